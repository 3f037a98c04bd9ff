"""JSON-LD IRI annotations."""

from __future__ import annotations

from .base import AbstractAnnotationGenerator


class JsonLdAnnotationGenerator(AbstractAnnotationGenerator):
    """Links classes, fields and enumeration members to their vocabulary IRI."""

    def generate_class_annotations(self, class_name: str) -> list[str]:
        return [f"iri: {self.classes[class_name].resource.uri}"]

    def generate_field_annotations(self, class_name: str, field_name: str) -> list[str]:
        return [f"iri: {self.field(class_name, field_name).resource.uri}"]

    def generate_constant_annotations(self, class_name: str, constant_name: str) -> list[str]:
        return [f"iri: {self.classes[class_name].constants[constant_name].value}"]
