"""Class model resolution: from vocabulary types to base class descriptors.

For every selected type the builder decides between enumeration and entity
class, resolves a single parent, computes the field set from domain/range
declarations and filters legacy properties. Ambiguities are resolved by
taking the first candidate in declaration order and logging an error.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from ..config import GeneratorConfig
from ..ontology.goodrelations import GoodRelationsBridge
from ..ontology.graph import (
    OntologyModel,
    VocabularyProperty,
    VocabularyType,
    is_datatype,
    is_enum,
    local_name,
)
from .descriptors import (
    ENUM_EXTENDS,
    ENUM_USE,
    ClassDescriptor,
    ConstantDescriptor,
    FieldDescriptor,
)

logger = logging.getLogger(__name__)

LEGACY_PATTERN = re.compile(r"legacy spelling")

ENUM_RANGE_DATATYPE = "Text"


def constant_name(instance_name: str) -> str:
    """Upper snake case name of an enumeration member.

    ``EBook`` becomes ``E_BOOK``; ``paperback`` becomes ``PAPERBACK``.
    """
    name = re.sub(r"([A-Z])", r"_\1", instance_name).upper()
    if instance_name[:1].isupper():
        name = name[1:]
    return name


def is_legacy(property_: VocabularyProperty) -> bool:
    return bool(LEGACY_PATTERN.search(property_.comment))


def select_types(
    ontology: OntologyModel,
    config: GeneratorConfig,
    log: logging.Logger = logger,
) -> list[VocabularyType]:
    """Types to generate.

    Without an allow-list, every class of every source. With one, each
    requested name is looked up across sources; misses are logged as
    critical and dropped.
    """
    if not config.types_defined:
        return ontology.types()

    selected = []
    for name in config.types:
        vocabulary_type = ontology.find_type(name)
        if vocabulary_type is None:
            log.critical('Type "%s" cannot be found.', name)
            continue
        selected.append(vocabulary_type)
    return selected


def build_property_domain_index(
    ontology: OntologyModel,
    types: list[VocabularyType],
) -> dict[str, list[VocabularyProperty]]:
    """Map each selected type URI to the properties declaring it in their domain.

    Single pass over all properties; order follows the property scan.
    """
    index: dict[str, list[VocabularyProperty]] = {t.uri: [] for t in types}
    for property_ in ontology.properties():
        for domain in property_.domains:
            if domain in index:
                index[domain].append(property_)
    return index


class ClassModelBuilder:
    """Builds base descriptors (pass one) for a generation run.

    Args:
        ontology: Vocabulary model
        config: Run configuration
        bridge: GoodRelations oracle for the advisory compatibility check
        log: Diagnostics sink (module logger by default)
    """

    def __init__(
        self,
        ontology: OntologyModel,
        config: GeneratorConfig,
        bridge: Optional[GoodRelationsBridge] = None,
        log: Optional[logging.Logger] = None,
    ):
        self.ontology = ontology
        self.config = config
        self.bridge = bridge or GoodRelationsBridge()
        self.log = log or logger

    def build(self) -> dict[str, ClassDescriptor]:
        """Build descriptors keyed by class name, in selection order."""
        types = select_types(self.ontology, self.config, self.log)
        domain_index = build_property_domain_index(self.ontology, types)

        classes: dict[str, ClassDescriptor] = {}
        for vocabulary_type in types:
            if is_enum(vocabulary_type):
                descriptor = self.build_enum(vocabulary_type)
            else:
                descriptor = self.build_entity(vocabulary_type, domain_index[vocabulary_type.uri])
            classes[descriptor.name] = descriptor
        return classes

    def build_enum(self, vocabulary_type: VocabularyType) -> ClassDescriptor:
        type_config = self.config.type_config(vocabulary_type.name)
        namespace = (type_config and type_config.class_namespace) or self.config.namespaces["enum"]

        descriptor = ClassDescriptor(
            name=vocabulary_type.name,
            namespace=namespace,
            resource=vocabulary_type,
            comment=vocabulary_type.comment,
            parent=ENUM_EXTENDS,
            is_enum=True,
            uses=[ENUM_USE],
        )

        for instance in self.ontology.instances_of(vocabulary_type.uri):
            descriptor.constants[instance.name] = ConstantDescriptor(
                name=constant_name(instance.name),
                resource=instance,
                value=instance.uri,
            )
        return descriptor

    def build_entity(
        self,
        vocabulary_type: VocabularyType,
        properties: list[VocabularyProperty],
    ) -> ClassDescriptor:
        type_config = self.config.type_config(vocabulary_type.name)
        namespace = (type_config and type_config.class_namespace) or self.config.namespaces["entity"]

        descriptor = ClassDescriptor(
            name=vocabulary_type.name,
            namespace=namespace,
            resource=vocabulary_type,
            comment=vocabulary_type.comment,
            parent=self.resolve_parent(vocabulary_type),
        )

        if self.config.use_rte:
            descriptor.interface_namespace = (
                (type_config and type_config.interface_namespace) or self.config.namespaces["interface"]
            )
            descriptor.interface_name = f"{vocabulary_type.name}Interface"

        for property_ in properties:
            field = self.resolve_field(vocabulary_type, property_)
            if field is not None:
                descriptor.fields[field.name] = field
        return descriptor

    def resolve_parent(self, vocabulary_type: VocabularyType) -> Optional[str]:
        """Single parent of an entity class.

        Explicit configuration wins; otherwise the first declared superclass.
        Several superclasses are an error (first one kept). A parent outside
        an active type allow-list is reported but still returned.
        """
        type_config = self.config.type_config(vocabulary_type.name)
        parent = type_config.parent if type_config else None

        if parent is None:
            superclasses = vocabulary_type.superclasses
            if len(superclasses) > 1:
                self.log.error(
                    'The type "%s" has several supertypes. Using the first one.',
                    vocabulary_type.name,
                )
            parent = local_name(superclasses[0]) if superclasses else None

        if self.config.types_defined and parent and parent not in self.config.types:
            self.log.error(
                'The type "%s" (parent of "%s") doesn\'t exist',
                parent,
                vocabulary_type.name,
            )
        return parent

    def resolve_field(
        self,
        vocabulary_type: VocabularyType,
        property_: VocabularyProperty,
    ) -> Optional[FieldDescriptor]:
        """Field for a property of the type's domain, or None when skipped."""
        allowed = self.config.properties_for(vocabulary_type.name)

        if allowed and property_.name not in allowed:
            return None

        if is_legacy(property_):
            if not allowed:
                self.log.info(
                    'The property "%s" (type "%s") is legacy. Ignoring.',
                    property_.name,
                    vocabulary_type.name,
                )
                return None
            self.log.warning(
                'The property "%s" (type "%s") is legacy.',
                property_.name,
                vocabulary_type.name,
            )

        if self.config.check_is_good_relations and not self.bridge.exists(property_.name):
            self.log.warning(
                'The property "%s" (type "%s") is not part of GoodRelations.',
                property_.name,
                vocabulary_type.name,
            )

        ranges = self.resolve_ranges(property_, allowed)
        if len(ranges) > 1:
            self.log.error(
                'The property "%s" (type "%s") has several types. Using the first one.',
                property_.name,
                vocabulary_type.name,
            )
        elif not ranges:
            self.log.error(
                'The property "%s" (type "%s") has no usable range. Skipping.',
                property_.name,
                vocabulary_type.name,
            )
            return None

        property_config = allowed.get(property_.name)
        return FieldDescriptor(
            name=property_.name,
            resource=property_,
            range=ranges[0],
            range_override=bool(property_config and property_config.range),
        )

    def resolve_ranges(self, property_: VocabularyProperty, allowed: dict) -> list[str]:
        """Candidate ranges of a property, in declaration order.

        A configured override is used verbatim. Otherwise ranges outside an
        active type allow-list are dropped (datatypes always pass) and
        enumeration ranges are coerced to Text.
        """
        property_config = allowed.get(property_.name)
        if property_config is not None and property_config.range:
            return [property_config.range]

        ranges: list[str] = []
        for range_uri in property_.ranges:
            range_name = local_name(range_uri)
            if self.config.types_defined and not is_datatype(range_name) and range_name not in self.config.types:
                continue

            if is_enum(self.ontology.get_type(range_uri)):
                range_name = ENUM_RANGE_DATATYPE
            # [Text, SomeEnum] collapses to a single Text candidate, no ambiguity
            if range_name not in ranges:
                ranges.append(range_name)
        return ranges
