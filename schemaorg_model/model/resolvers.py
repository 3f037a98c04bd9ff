"""Second-pass resolvers that need the complete descriptor set.

Fields routinely reference types built later in the run, so type hints and
import references can only be resolved once pass one is finished.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Optional

from ..ontology.graph import is_datatype
from .descriptors import ClassDescriptor

if TYPE_CHECKING:
    from ..annotation.pipeline import AnnotationPipeline

logger = logging.getLogger(__name__)


class TypeHintResolver:
    """Resolves each object-valued field to an interface or class name."""

    def __init__(self, classes: dict[str, ClassDescriptor], log: Optional[logging.Logger] = None):
        self.classes = classes
        self.log = log or logger

    def type_hint(self, class_name: str, range_name: str) -> Optional[str]:
        if is_datatype(range_name):
            return None

        target = self.classes.get(range_name)
        if target is None:
            self.log.warning(
                'The range "%s" (class "%s") is not generated in this run.',
                range_name,
                class_name,
            )
            return range_name

        if target.interface_name:
            return target.interface_name
        return target.name

    def resolve(self) -> None:
        for class_name, descriptor in self.classes.items():
            for field in descriptor.fields.values():
                field.type_hint = self.type_hint(class_name, field.range)


class UsesResolver:
    """Computes the sorted, deduplicated import references of each class.

    A class uses its own interface when that lives in another namespace,
    the interface of every field range that has one, and whatever the
    annotation pipeline contributes.
    """

    def __init__(
        self,
        classes: dict[str, ClassDescriptor],
        pipeline: Optional['AnnotationPipeline'] = None,
    ):
        self.classes = classes
        self.pipeline = pipeline

    def uses_for(self, class_name: str) -> list[str]:
        descriptor = self.classes[class_name]
        uses: set[str] = set(descriptor.uses)

        if descriptor.has_interface and descriptor.interface_namespace != descriptor.namespace:
            uses.add(descriptor.interface_reference)

        uses.update(self._field_interfaces(descriptor.fields.values()))

        if self.pipeline is not None:
            uses.update(self.pipeline.generate_uses(class_name))

        return sorted(uses)

    def _field_interfaces(self, fields: Iterable) -> Iterable[str]:
        for field in fields:
            if is_datatype(field.range):
                continue
            target = self.classes.get(field.range)
            if target is not None and target.has_interface:
                yield target.interface_reference

    def resolve(self) -> None:
        for class_name, descriptor in self.classes.items():
            descriptor.uses = self.uses_for(class_name)
