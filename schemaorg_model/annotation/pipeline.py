"""Annotation pipeline: runs every generator hook over every descriptor."""

from __future__ import annotations

from typing import Sequence

from ..model.descriptors import ClassDescriptor
from .base import AnnotationContext, AnnotationGenerator
from .registry import create_annotation_generators


class AnnotationPipeline:
    """Ordered set of annotation generators.

    Hook results are concatenated in registration order; no generator can
    suppress or reorder another's output.

    Args:
        generators: Generators in registration order
    """

    def __init__(self, generators: Sequence[AnnotationGenerator]):
        self.generators = list(generators)

    @classmethod
    def from_names(cls, names: Sequence[str], context: AnnotationContext) -> 'AnnotationPipeline':
        return cls(create_annotation_generators(names, context))

    def _collect(self, hook: str, *args: str) -> list[str]:
        annotations: list[str] = []
        for generator in self.generators:
            annotations.extend(getattr(generator, hook)(*args))
        return annotations

    def generate_class_annotations(self, class_name: str) -> list[str]:
        return self._collect("generate_class_annotations", class_name)

    def generate_interface_annotations(self, class_name: str) -> list[str]:
        return self._collect("generate_interface_annotations", class_name)

    def generate_field_annotations(self, class_name: str, field_name: str) -> list[str]:
        return self._collect("generate_field_annotations", class_name, field_name)

    def generate_getter_annotations(self, class_name: str, field_name: str) -> list[str]:
        return self._collect("generate_getter_annotations", class_name, field_name)

    def generate_setter_annotations(self, class_name: str, field_name: str) -> list[str]:
        return self._collect("generate_setter_annotations", class_name, field_name)

    def generate_constant_annotations(self, class_name: str, constant_name: str) -> list[str]:
        return self._collect("generate_constant_annotations", class_name, constant_name)

    def generate_uses(self, class_name: str) -> list[str]:
        return self._collect("generate_uses", class_name)

    def annotate(self, classes: dict[str, ClassDescriptor]) -> None:
        """Fill the annotation lists of every descriptor in place."""
        for class_name, descriptor in classes.items():
            descriptor.annotations = self.generate_class_annotations(class_name)
            descriptor.interface_annotations = self.generate_interface_annotations(class_name)

            for constant_key, constant in descriptor.constants.items():
                constant.annotations = self.generate_constant_annotations(class_name, constant_key)

            for field_name, field in descriptor.fields.items():
                field.annotations = self.generate_field_annotations(class_name, field_name)
                field.getter_annotations = self.generate_getter_annotations(class_name, field_name)
                field.setter_annotations = self.generate_setter_annotations(class_name, field_name)
