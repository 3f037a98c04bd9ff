"""Registry of annotation generators.

Configuration refers to generators by identifier. Identifiers are checked
against this registry when the configuration is loaded, so a typo fails
before any vocabulary is processed.
"""

from __future__ import annotations

from typing import Callable, Iterable

from ..errors import UnknownAnnotationGeneratorError
from .base import AnnotationContext, AnnotationGenerator
from .doc import DocAnnotationGenerator
from .jsonld import JsonLdAnnotationGenerator
from .orm import OrmAnnotationGenerator
from .validation import ValidationAnnotationGenerator

AnnotationGeneratorFactory = Callable[[AnnotationContext], AnnotationGenerator]

ANNOTATION_GENERATORS: dict[str, AnnotationGeneratorFactory] = {
    "doc": DocAnnotationGenerator,
    "validation": ValidationAnnotationGenerator,
    "orm": OrmAnnotationGenerator,
    "jsonld": JsonLdAnnotationGenerator,
}


def register_annotation_generator(name: str, factory: AnnotationGeneratorFactory) -> None:
    """Register a custom generator factory under ``name``.

    Raises:
        ValueError: If the name is already registered
    """
    if name in ANNOTATION_GENERATORS:
        raise ValueError(f"Annotation generator {name!r} is already registered")
    ANNOTATION_GENERATORS[name] = factory


def validate_annotation_generators(names: Iterable[str]) -> None:
    """Raise UnknownAnnotationGeneratorError for the first unknown name."""
    for name in names:
        if name not in ANNOTATION_GENERATORS:
            raise UnknownAnnotationGeneratorError(name, sorted(ANNOTATION_GENERATORS))


def create_annotation_generators(
    names: Iterable[str],
    context: AnnotationContext,
) -> list[AnnotationGenerator]:
    """Instantiate generators in the given order, all with the same context.

    All names are validated before the first generator is created.
    """
    names = list(names)
    validate_annotation_generators(names)
    return [ANNOTATION_GENERATORS[name](context) for name in names]
