"""Test helper utilities: build small schema.org-shaped graphs in memory."""

from .vocabulary import (
    GR,
    SCHEMA,
    add_instance,
    add_property,
    add_relation_term,
    add_type,
)

__all__ = [
    'GR',
    'SCHEMA',
    'add_instance',
    'add_property',
    'add_relation_term',
    'add_type',
]
