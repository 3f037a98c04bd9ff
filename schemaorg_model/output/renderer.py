"""Jinja2 rendering of finished descriptors into Python modules."""

from __future__ import annotations

import keyword
import re
from pathlib import Path
from typing import Optional, Union

from jinja2 import Environment, FileSystemLoader

from ..config import GeneratorConfig
from ..model.descriptors import ClassDescriptor, FieldDescriptor, python_identifier, use_reference
from ..ontology.cardinality import Cardinality, CardinalityIndex
from ..ontology.graph import PYTHON_TYPES

TEMPLATES_DIR = Path(__file__).parent / "templates"

VISIBILITY_PREFIXES = {
    "public": "",
    "protected": "_",
    "private": "__",
}


def snake_case(name: str) -> str:
    """``datePublished`` -> ``date_published``; keywords get a trailing underscore."""
    name = re.sub(r"(?<=[a-z0-9])([A-Z])", r"_\1", name)
    name = re.sub(r"[^0-9a-zA-Z_]", "_", name).lower()
    if name[:1].isdigit():
        name = "_" + name
    if keyword.iskeyword(name):
        name += "_"
    return name


def docblock(lines: list[str], indent: int = 4) -> str:
    """Indent docstring lines, leaving blank lines empty."""
    pad = " " * indent
    return "\n".join(pad + line if line else "" for line in lines)


def comment_block(lines: list[str], indent: int = 4) -> str:
    """Render lines as ``#:`` attribute comments."""
    pad = " " * indent
    return "\n".join(f"{pad}#: {line}" if line else f"{pad}#:" for line in lines)


def import_line(use: str) -> str:
    """``pkg.mod:Name`` -> ``from pkg.mod import Name``."""
    module, _, name = use.partition(":")
    return f"from {module} import {name}"


class Renderer:
    """Renders class and interface modules.

    Args:
        template_dir: Directory holding ``class.py.j2`` and ``interface.py.j2``
    """

    def __init__(self, template_dir: Union[str, Path] = TEMPLATES_DIR):
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["docblock"] = docblock
        self.env.filters["comment_block"] = comment_block
        self.env.filters["snake_case"] = snake_case
        self.env.filters["identifier"] = python_identifier
        self.env.filters["pyrepr"] = repr

    def field_hint(
        self,
        field: FieldDescriptor,
        cardinalities: Optional[CardinalityIndex] = None,
    ) -> str:
        if field.type_hint:
            hint = python_identifier(field.type_hint)
        else:
            hint = PYTHON_TYPES.get(field.range, "str")

        cardinality = (cardinalities or {}).get(field.name, Cardinality.UNKNOWN)
        if cardinality.is_multiple:
            return f"list[{hint}]"
        return hint

    def class_imports(
        self,
        descriptor: ClassDescriptor,
        classes: dict[str, ClassDescriptor],
    ) -> list[str]:
        """Import lines of a class module.

        Uses are absolute imports. Base classes living in the same namespace
        are imported relatively.
        """
        imports = []

        if descriptor.fields:
            imports.append("from typing import Optional")
            temporal = sorted(
                PYTHON_TYPES[f.range]
                for f in descriptor.fields.values()
                if f.range in ("Date", "DateTime", "Time")
            )
            if temporal:
                imports.append(f"from datetime import {', '.join(dict.fromkeys(temporal))}")

        own = descriptor.reference
        for use in descriptor.uses:
            if use != own:
                imports.append(import_line(use))

        if not descriptor.is_enum and descriptor.parent:
            parent = classes.get(descriptor.parent)
            parent_namespace = parent.namespace if parent else descriptor.namespace
            parent_name = python_identifier(descriptor.parent)
            if parent_namespace == descriptor.namespace:
                imports.append(f"from .{parent_name} import {parent_name}")
            else:
                line = import_line(use_reference(parent_namespace, descriptor.parent))
                if line not in imports:
                    imports.append(line)

        if descriptor.has_interface and descriptor.interface_namespace == descriptor.namespace:
            interface_name = python_identifier(descriptor.interface_name)
            imports.append(f"from .{interface_name} import {interface_name}")

        return imports

    def bases(self, descriptor: ClassDescriptor) -> list[str]:
        bases = []
        if descriptor.parent:
            bases.append(python_identifier(descriptor.parent))
        if descriptor.has_interface:
            bases.append(python_identifier(descriptor.interface_name))
        return bases

    def render_class(
        self,
        descriptor: ClassDescriptor,
        classes: dict[str, ClassDescriptor],
        config: GeneratorConfig,
        cardinalities: Optional[CardinalityIndex] = None,
    ) -> str:
        template = self.env.get_template("class.py.j2")
        return template.render(
            header=config.header,
            prefix=VISIBILITY_PREFIXES[config.field_visibility],
            imports=self.class_imports(descriptor, classes),
            bases=self.bases(descriptor),
            hints={
                name: self.field_hint(field, cardinalities)
                for name, field in descriptor.fields.items()
            },
            cls=descriptor,
        )

    def render_interface(self, descriptor: ClassDescriptor, config: GeneratorConfig) -> str:
        template = self.env.get_template("interface.py.j2")
        return template.render(header=config.header, cls=descriptor)
