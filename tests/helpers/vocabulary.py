"""Builders for vocabulary graphs used across the test suite.

Triples are added in call order; rdflib's in-memory store keeps that order,
which is what the declaration-order tie-breaks are tested against.
"""

from typing import Optional, Sequence

from rdflib import Graph, Literal, Namespace, RDF, RDFS

SCHEMA = Namespace("http://schema.org/")
GR = Namespace("http://purl.org/goodrelations/v1#")


def add_type(graph: Graph, name: str, superclasses: Sequence[str] = (), comment: Optional[str] = None):
    """Declare ``schema:<name>`` as an rdfs:Class with ordered superclasses."""
    uri = SCHEMA[name]
    graph.add((uri, RDF.type, RDFS.Class))
    graph.add((uri, RDFS.comment, Literal(comment if comment is not None else f"A {name}.")))
    for superclass in superclasses:
        graph.add((uri, RDFS.subClassOf, SCHEMA[superclass]))
    return uri


def add_property(
    graph: Graph,
    name: str,
    domains: Sequence[str],
    ranges: Sequence[str],
    comment: Optional[str] = None,
):
    """Declare ``schema:<name>`` as an rdf:Property with ordered domains and ranges."""
    uri = SCHEMA[name]
    graph.add((uri, RDF.type, RDF.Property))
    graph.add((uri, RDFS.comment, Literal(comment if comment is not None else f"The {name} of the item.")))
    for domain in domains:
        graph.add((uri, SCHEMA.domainIncludes, SCHEMA[domain]))
    for range_ in ranges:
        graph.add((uri, SCHEMA.rangeIncludes, SCHEMA[range_]))
    return uri


def add_instance(graph: Graph, name: str, type_name: str, comment: Optional[str] = None):
    """Declare ``schema:<name>`` as an instance of ``schema:<type_name>``."""
    uri = SCHEMA[name]
    graph.add((uri, RDF.type, SCHEMA[type_name]))
    if comment:
        graph.add((uri, RDFS.comment, Literal(comment)))
    return uri


def add_relation_term(graph: Graph, name: str, label: str):
    """Declare a GoodRelations term with a (cardinality-bearing) label."""
    uri = GR[name]
    graph.add((uri, RDF.type, RDF.Property))
    graph.add((uri, RDFS.label, Literal(label)))
    return uri
