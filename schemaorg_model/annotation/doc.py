"""Documentation annotations (Sphinx field lists)."""

from __future__ import annotations

from .base import AbstractAnnotationGenerator


def _comment_lines(comment: str) -> list[str]:
    return [line.strip() for line in comment.strip().splitlines() if line.strip()]


class DocAnnotationGenerator(AbstractAnnotationGenerator):
    """Generates docstring lines from vocabulary comments and resolved types."""

    def generate_class_annotations(self, class_name: str) -> list[str]:
        descriptor = self.classes[class_name]
        lines = _comment_lines(descriptor.comment)
        if lines:
            lines.append("")
        lines.append(f":see: {descriptor.resource.uri}")
        return lines

    def generate_interface_annotations(self, class_name: str) -> list[str]:
        descriptor = self.classes[class_name]
        return [f"{class_name}'s interface.", "", f":see: {descriptor.resource.uri}"]

    def generate_constant_annotations(self, class_name: str, constant_name: str) -> list[str]:
        constant = self.classes[class_name].constants[constant_name]
        return _comment_lines(constant.resource.comment) + [f":see: {constant.resource.uri}"]

    def generate_field_annotations(self, class_name: str, field_name: str) -> list[str]:
        field = self.field(class_name, field_name)
        return _comment_lines(field.resource.comment) + [f":type: {self.python_type(field)}"]

    def generate_getter_annotations(self, class_name: str, field_name: str) -> list[str]:
        field = self.field(class_name, field_name)
        return [f"Gets {field_name}.", "", f":rtype: {self.python_type(field)}"]

    def generate_setter_annotations(self, class_name: str, field_name: str) -> list[str]:
        field = self.field(class_name, field_name)
        return [
            f"Sets {field_name}.",
            "",
            f":param {field_name}: new value",
            f":type {field_name}: {self.python_type(field)}",
            ":returns: self",
        ]
