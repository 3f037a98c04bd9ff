"""Persistence mapping annotations."""

from __future__ import annotations

from ..ontology.cardinality import Cardinality
from ..ontology.graph import is_datatype
from .base import AbstractAnnotationGenerator

COLUMN_TYPES = {
    "Boolean": "boolean",
    "DataType": "string",
    "Date": "date",
    "DateTime": "datetime",
    "Float": "float",
    "Integer": "integer",
    "Number": "float",
    "Text": "text",
    "Time": "time",
    "URL": "string",
}

RELATIONS = {
    Cardinality.ZERO_ONE: "one_to_one",
    Cardinality.ONE_ONE: "one_to_one",
    Cardinality.UNKNOWN: "many_to_one",
    Cardinality.MANY_ZERO: "many_to_one",
    Cardinality.MANY_ONE: "many_to_one",
    Cardinality.ZERO_MANY: "many_to_many",
    Cardinality.ONE_MANY: "many_to_many",
    Cardinality.MANY_MANY: "many_to_many",
}

MANDATORY_RELATIONS = {Cardinality.ONE_ONE, Cardinality.MANY_ONE, Cardinality.ONE_MANY}


class OrmAnnotationGenerator(AbstractAnnotationGenerator):
    """Maps entity classes to tables and fields to columns or relations.

    Classes other generated classes inherit from are mapped superclasses.
    """

    def generate_class_annotations(self, class_name: str) -> list[str]:
        descriptor = self.classes[class_name]
        if descriptor.is_enum:
            return []

        is_parent = any(
            other.parent == class_name for other in self.classes.values() if not other.is_enum
        )
        return ["orm: mapped_superclass" if is_parent else "orm: entity"]

    def generate_field_annotations(self, class_name: str, field_name: str) -> list[str]:
        field = self.field(class_name, field_name)
        cardinality = self.cardinality(field_name)

        if field_name == "id":
            return ["orm: id"]

        if is_datatype(field.range):
            nullable = "False" if cardinality.is_mandatory else "True"
            return [f"orm: column({COLUMN_TYPES[field.range]}, nullable={nullable})"]

        target = self.classes.get(field.range)
        if target is None:
            # range override naming a class outside the run
            return []
        relation = f"orm: {RELATIONS[cardinality]}(target={target.interface_name or target.name}"
        if cardinality in MANDATORY_RELATIONS:
            relation += ", nullable=False"
        return [relation + ")"]
