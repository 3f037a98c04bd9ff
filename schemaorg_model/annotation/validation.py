"""Validation constraint annotations."""

from __future__ import annotations

from .base import AbstractAnnotationGenerator

DATATYPE_CONSTRAINTS = {
    "Boolean": "type(bool)",
    "Date": "date",
    "DateTime": "datetime",
    "Float": "type(float)",
    "Integer": "type(int)",
    "Number": "type(float)",
    "Text": "type(str)",
    "Time": "time",
    "URL": "url",
}


class ValidationAnnotationGenerator(AbstractAnnotationGenerator):
    """Constraints derived from ranges and cardinalities.

    Fields backed by a generated enumeration get a ``choice`` constraint and
    the enumeration is added to the class imports.
    """

    def generate_field_annotations(self, class_name: str, field_name: str) -> list[str]:
        field = self.field(class_name, field_name)
        constraints = []

        constraint = DATATYPE_CONSTRAINTS.get(field.range)
        if constraint:
            constraints.append(f"check: {constraint}")

        for enum in self.enum_ranges(field):
            constraints.append(f"check: choice({enum.name})")

        if self.cardinality(field_name).is_mandatory:
            constraints.append("check: not_null")
        return constraints

    def generate_uses(self, class_name: str) -> list[str]:
        uses = []
        for field in self.classes[class_name].fields.values():
            for enum in self.enum_ranges(field):
                if enum.reference not in uses:
                    uses.append(enum.reference)
        return uses
