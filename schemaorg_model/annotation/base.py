"""Annotation generator protocol and shared context.

An annotation generator contributes extra metadata to generated classes,
interfaces, fields, accessors and enumeration members. Every generator of a
run receives the same AnnotationContext.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Protocol, runtime_checkable

from ..config import GeneratorConfig
from ..model.descriptors import ClassDescriptor, FieldDescriptor
from ..ontology.cardinality import Cardinality, CardinalityIndex
from ..ontology.graph import PYTHON_TYPES, OntologyModel, VocabularyType, is_datatype, is_enum


@dataclass(frozen=True)
class AnnotationContext:
    """Context bundle handed to every annotation generator.

    Attributes:
        logger: Diagnostics sink
        ontology: Vocabulary sources
        cardinalities: Read-only property cardinality index
        config: Run configuration
        classes: Pass-one descriptors keyed by class name
    """

    logger: logging.Logger
    ontology: OntologyModel
    cardinalities: CardinalityIndex
    config: GeneratorConfig
    classes: dict[str, ClassDescriptor]


@runtime_checkable
class AnnotationGenerator(Protocol):
    """Protocol for annotation generators.

    Each hook returns an ordered list of metadata items; the pipeline
    concatenates the results of all generators in registration order.
    """

    def generate_class_annotations(self, class_name: str) -> list[str]:
        ...

    def generate_interface_annotations(self, class_name: str) -> list[str]:
        ...

    def generate_field_annotations(self, class_name: str, field_name: str) -> list[str]:
        ...

    def generate_getter_annotations(self, class_name: str, field_name: str) -> list[str]:
        ...

    def generate_setter_annotations(self, class_name: str, field_name: str) -> list[str]:
        ...

    def generate_constant_annotations(self, class_name: str, constant_name: str) -> list[str]:
        ...

    def generate_uses(self, class_name: str) -> list[str]:
        ...


def is_annotation_generator(obj: Any) -> bool:
    """Check if an object implements the AnnotationGenerator protocol."""
    return isinstance(obj, AnnotationGenerator)


class AbstractAnnotationGenerator:
    """Base class with empty hooks and context helpers.

    Subclasses override only the hooks they care about.
    """

    def __init__(self, context: AnnotationContext):
        self.context = context
        self.logger = context.logger
        self.ontology = context.ontology
        self.cardinalities = context.cardinalities
        self.config = context.config
        self.classes = context.classes

    def generate_class_annotations(self, class_name: str) -> list[str]:
        return []

    def generate_interface_annotations(self, class_name: str) -> list[str]:
        return []

    def generate_field_annotations(self, class_name: str, field_name: str) -> list[str]:
        return []

    def generate_getter_annotations(self, class_name: str, field_name: str) -> list[str]:
        return []

    def generate_setter_annotations(self, class_name: str, field_name: str) -> list[str]:
        return []

    def generate_constant_annotations(self, class_name: str, constant_name: str) -> list[str]:
        return []

    def generate_uses(self, class_name: str) -> list[str]:
        return []

    def field(self, class_name: str, field_name: str) -> FieldDescriptor:
        return self.classes[class_name].fields[field_name]

    def cardinality(self, field_name: str) -> Cardinality:
        return self.cardinalities.get(field_name, Cardinality.UNKNOWN)

    def enum_ranges(self, field: FieldDescriptor) -> list[ClassDescriptor]:
        """Generated enumerations among the field's declared ranges.

        Enumeration ranges are coerced to Text during resolution, so the
        declared ranges are the only place the enumeration is still visible.
        A configured range override replaces them entirely.
        """
        if field.range_override:
            return []
        enums = []
        for range_uri in field.resource.ranges:
            range_type: Optional[VocabularyType] = self.ontology.get_type(range_uri)
            if not is_enum(range_type):
                continue
            descriptor = self.classes.get(range_type.name)
            if descriptor is not None and descriptor.is_enum:
                enums.append(descriptor)
        return enums

    def python_type(self, field: FieldDescriptor) -> str:
        """Python type expression of a field, as rendered in generated code.

        Computed from the range rather than ``field.type_hint``: generators
        run before the type hint pass.
        """
        if is_datatype(field.range):
            hint = PYTHON_TYPES[field.range]
        else:
            target = self.classes.get(field.range)
            if target is None:
                hint = field.range
            else:
                hint = target.interface_name or target.name

        if self.cardinality(field.name).is_multiple:
            return f"list[{hint}]"
        return f"Optional[{hint}]"
