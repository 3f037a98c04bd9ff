"""Class model resolution and cross-descriptor passes."""

from .descriptors import (
    ENUM_EXTENDS,
    ENUM_USE,
    ClassDescriptor,
    ConstantDescriptor,
    FieldDescriptor,
    python_identifier,
    use_reference,
)
from .builder import (
    ClassModelBuilder,
    build_property_domain_index,
    constant_name,
    is_legacy,
    select_types,
)
from .resolvers import TypeHintResolver, UsesResolver

__all__ = [
    "ENUM_EXTENDS",
    "ENUM_USE",
    "ClassDescriptor",
    "ConstantDescriptor",
    "FieldDescriptor",
    "python_identifier",
    "use_reference",
    "ClassModelBuilder",
    "build_property_domain_index",
    "constant_name",
    "is_legacy",
    "select_types",
    "TypeHintResolver",
    "UsesResolver",
]
