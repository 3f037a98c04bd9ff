"""Vocabulary access: graph model, cardinalities and the GoodRelations bridge."""

from .graph import (
    DATATYPES,
    SCHEMA_ORG_ENUMERATION,
    SCHEMA_ORG_NAMESPACE,
    OntologyModel,
    VocabularyInstance,
    VocabularyProperty,
    VocabularyType,
    is_datatype,
    is_enum,
    local_name,
    parse_graph,
)
from .cardinality import Cardinality, CardinalityIndex, cardinality_for, extract_cardinalities
from .goodrelations import GOODRELATIONS_NAMESPACE, GoodRelationsBridge

__all__ = [
    'DATATYPES',
    'SCHEMA_ORG_ENUMERATION',
    'SCHEMA_ORG_NAMESPACE',
    'OntologyModel',
    'VocabularyInstance',
    'VocabularyProperty',
    'VocabularyType',
    'is_datatype',
    'is_enum',
    'local_name',
    'parse_graph',
    'Cardinality',
    'CardinalityIndex',
    'cardinality_for',
    'extract_cardinalities',
    'GOODRELATIONS_NAMESPACE',
    'GoodRelationsBridge',
]
