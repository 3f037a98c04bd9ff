"""In-memory descriptors of the classes to generate.

Descriptors are built once per run by the ClassModelBuilder, enriched in
place by the annotation pipeline and the second-pass resolvers, then handed
to rendering.
"""

from __future__ import annotations

import keyword
import re
from dataclasses import dataclass, field
from typing import Optional

from ..ontology.graph import VocabularyInstance, VocabularyProperty, VocabularyType

ENUM_EXTENDS = "Enum"
ENUM_USE = "enum:Enum"


def python_identifier(name: str) -> str:
    """Python class and module name for a vocabulary type name.

    ``3DModel`` becomes ``_3DModel``; keywords get a trailing underscore.
    """
    name = re.sub(r"[^0-9a-zA-Z_]", "_", name)
    if not (name[:1].isalpha() or name[:1] == "_"):
        name = "_" + name
    if keyword.iskeyword(name):
        name += "_"
    return name


def use_reference(namespace: str, name: str) -> str:
    """Import reference of a generated class (``module:Name``).

    Each generated class lives in its own module named after it.
    """
    name = python_identifier(name)
    return f"{namespace}.{name}:{name}"


@dataclass
class FieldDescriptor:
    """A field of an entity class, backed by a vocabulary property.

    Attributes:
        name: Field name (property local name)
        resource: Backing property
        range: The single resolved range name
        type_hint: Interface or class name for object ranges, None for datatypes
        range_override: The range comes from configuration, not the vocabulary
        annotations: Field-level metadata from the annotation pipeline
        getter_annotations: Getter-level metadata
        setter_annotations: Setter-level metadata
    """

    name: str
    resource: VocabularyProperty
    range: str
    type_hint: Optional[str] = None
    range_override: bool = False
    annotations: list[str] = field(default_factory=list)
    getter_annotations: list[str] = field(default_factory=list)
    setter_annotations: list[str] = field(default_factory=list)


@dataclass
class ConstantDescriptor:
    """An enumeration member, backed by a vocabulary instance."""

    name: str
    resource: VocabularyInstance
    value: str
    annotations: list[str] = field(default_factory=list)


@dataclass
class ClassDescriptor:
    """A class, interface and/or enumeration to generate."""

    name: str
    namespace: str
    resource: VocabularyType
    comment: str = ""
    parent: Optional[str] = None
    is_enum: bool = False
    interface_name: Optional[str] = None
    interface_namespace: Optional[str] = None
    fields: dict[str, FieldDescriptor] = field(default_factory=dict)
    constants: dict[str, ConstantDescriptor] = field(default_factory=dict)
    annotations: list[str] = field(default_factory=list)
    interface_annotations: list[str] = field(default_factory=list)
    uses: list[str] = field(default_factory=list)

    @property
    def has_interface(self) -> bool:
        return self.interface_name is not None and self.interface_namespace is not None

    @property
    def reference(self) -> str:
        return use_reference(self.namespace, self.name)

    @property
    def interface_reference(self) -> Optional[str]:
        if not self.has_interface:
            return None
        return use_reference(self.interface_namespace, self.interface_name)
