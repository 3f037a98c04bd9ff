"""Property cardinalities, computed once before generation starts."""

from __future__ import annotations

import re
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping

if TYPE_CHECKING:
    from .goodrelations import GoodRelationsBridge
    from .graph import OntologyModel, VocabularyProperty


class Cardinality(str, Enum):
    """Cardinality categories, written the way GoodRelations labels them."""

    ZERO_ONE = "(0..1)"
    ZERO_MANY = "(0..*)"
    ONE_ONE = "(1..1)"
    ONE_MANY = "(1..*)"
    MANY_ZERO = "(*..0)"
    MANY_ONE = "(*..1)"
    MANY_MANY = "(*..*)"
    UNKNOWN = "unknown"

    @property
    def is_mandatory(self) -> bool:
        return self in (Cardinality.ONE_ONE, Cardinality.ONE_MANY)

    @property
    def is_multiple(self) -> bool:
        return self in (Cardinality.ZERO_MANY, Cardinality.ONE_MANY, Cardinality.MANY_MANY)


CardinalityIndex = Mapping[str, Cardinality]

_PLURAL_PATTERNS = (
    re.compile(r"\(s\)"),
    re.compile(r"^The most generic uni-directional social relation\."),
    re.compile(r"one or more", re.IGNORECASE),
)


def cardinality_for(property_: 'VocabularyProperty', bridge: 'GoodRelationsBridge') -> Cardinality:
    """Guess the cardinality of a single property.

    GoodRelations wins when it knows the property; otherwise the comment and
    local name are used as hints.
    """
    from_goodrelations = bridge.extract_cardinality(property_.name)
    if from_goodrelations is not None:
        return from_goodrelations

    comment = property_.comment
    if any(pattern.search(comment) for pattern in _PLURAL_PATTERNS):
        return Cardinality.ZERO_MANY

    if property_.name.startswith("is") or comment.startswith("The "):
        return Cardinality.ZERO_ONE

    return Cardinality.UNKNOWN


def extract_cardinalities(ontology: 'OntologyModel', bridge: 'GoodRelationsBridge') -> CardinalityIndex:
    """Build the read-only property name -> cardinality index.

    Args:
        ontology: Vocabulary to scan
        bridge: GoodRelations oracle consulted first

    Returns:
        Immutable mapping keyed by property local name
    """
    index = {}
    for property_ in ontology.properties():
        index[property_.name] = cardinality_for(property_, bridge)
    return MappingProxyType(index)
