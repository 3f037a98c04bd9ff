"""Pluggable annotation generators and the pipeline that runs them."""

from .base import (
    AbstractAnnotationGenerator,
    AnnotationContext,
    AnnotationGenerator,
    is_annotation_generator,
)
from .doc import DocAnnotationGenerator
from .jsonld import JsonLdAnnotationGenerator
from .orm import OrmAnnotationGenerator
from .validation import ValidationAnnotationGenerator
from .registry import (
    ANNOTATION_GENERATORS,
    create_annotation_generators,
    register_annotation_generator,
    validate_annotation_generators,
)
from .pipeline import AnnotationPipeline

__all__ = [
    "AbstractAnnotationGenerator",
    "AnnotationContext",
    "AnnotationGenerator",
    "is_annotation_generator",
    "DocAnnotationGenerator",
    "JsonLdAnnotationGenerator",
    "OrmAnnotationGenerator",
    "ValidationAnnotationGenerator",
    "ANNOTATION_GENERATORS",
    "create_annotation_generators",
    "register_annotation_generator",
    "validate_annotation_generators",
    "AnnotationPipeline",
]
