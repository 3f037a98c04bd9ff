"""Read-only view over schema.org-shaped vocabulary graphs.

The vocabulary is one or more rdflib graphs. Types are ``rdfs:Class``
resources, properties are ``rdf:Property`` resources linked to types through
``schema:domainIncludes`` and ``schema:rangeIncludes``.

Declaration order matters for the generator's tie-breaks (first declared
parent, first acceptable range). rdflib's in-memory store yields objects in
insertion order, which is parse order for the bundled parsers. OntologyModel
reads every relation once and freezes that order into tuples, so later passes
never depend on store iteration again. A resource declared in several graphs
is merged: its relations are appended in source order without duplicates and
the first non-empty comment wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Union

from rdflib import Graph, RDF, RDFS, URIRef
from rdflib.util import guess_format

from ..errors import ConfigError

SCHEMA_ORG_NAMESPACE = "http://schema.org/"
SCHEMA_ORG_ENUMERATION = SCHEMA_ORG_NAMESPACE + "Enumeration"

DATATYPES = frozenset({
    "Boolean",
    "DataType",
    "Date",
    "DateTime",
    "Float",
    "Integer",
    "Number",
    "Text",
    "Time",
    "URL",
})

# Python types rendered for each datatype
PYTHON_TYPES = {
    "Boolean": "bool",
    "DataType": "str",
    "Date": "date",
    "DateTime": "datetime",
    "Float": "float",
    "Integer": "int",
    "Number": "float",
    "Text": "str",
    "Time": "time",
    "URL": "str",
}


def local_name(uri: str) -> str:
    """Get the local part of a URI (after the last ``#`` or ``/``)."""
    uri = str(uri)
    if '#' in uri:
        return uri.rsplit('#', 1)[-1]
    return uri.rstrip('/').rsplit('/', 1)[-1]


def is_datatype(name: Optional[str]) -> bool:
    """Is this range name one of the primitive vocabulary datatypes?"""
    return name in DATATYPES


def parse_graph(path: Union[str, Path]) -> Graph:
    """Parse one vocabulary file, guessing the RDF format from its suffix.

    Raises:
        ConfigError: If the suffix maps to no format rdflib can parse
            (e.g. the historical ``schema.rdfa`` distribution)
    """
    rdf_format = guess_format(str(path))
    if rdf_format is None:
        raise ConfigError(
            f"Cannot guess the RDF format of {path}. "
            "Use a Turtle (.ttl), JSON-LD (.jsonld), RDF/XML (.rdf, .owl) or N-Triples (.nt) file."
        )
    graph = Graph()
    graph.parse(str(path), format=rdf_format)
    return graph


def _extend(target: list[str], objects: Iterable) -> None:
    for obj in objects:
        uri = str(obj)
        if uri not in target:
            target.append(uri)


@dataclass(frozen=True)
class VocabularyType:
    """A vocabulary type (``rdfs:Class``)."""

    uri: str
    name: str
    comment: str = ""
    superclasses: tuple[str, ...] = ()


@dataclass(frozen=True)
class VocabularyProperty:
    """A vocabulary property with its domain and range declarations."""

    uri: str
    name: str
    comment: str = ""
    domains: tuple[str, ...] = ()
    ranges: tuple[str, ...] = ()


@dataclass(frozen=True)
class VocabularyInstance:
    """An individual typed by a vocabulary type (enumeration member)."""

    uri: str
    name: str
    comment: str = ""


def is_enum(vocabulary_type: Optional[VocabularyType]) -> bool:
    """Tests if a type is an enumeration.

    True iff the type declares exactly one superclass and that superclass is
    the schema.org Enumeration marker type.
    """
    if vocabulary_type is None:
        return False
    superclasses = vocabulary_type.superclasses
    return len(superclasses) == 1 and superclasses[0] == SCHEMA_ORG_ENUMERATION


class OntologyModel:
    """Queryable, read-only model of one or more vocabulary graphs.

    Args:
        graphs: rdflib graphs holding the vocabulary
        namespace: Base URI used to resolve type names (default schema.org)

    Example:
        ontology = OntologyModel([parse_graph("schema.ttl")])
        book = ontology.find_type("Book")
    """

    def __init__(self, graphs: Iterable[Graph], namespace: str = SCHEMA_ORG_NAMESPACE):
        self.graphs = list(graphs)
        self.namespace = namespace
        self.domain_predicate = URIRef(namespace + "domainIncludes")
        self.range_predicate = URIRef(namespace + "rangeIncludes")

        self._types: dict[str, VocabularyType] = {}
        self._properties: dict[str, VocabularyProperty] = {}
        self._load()

    @classmethod
    def from_files(
        cls,
        paths: Iterable[Union[str, Path]],
        namespace: str = SCHEMA_ORG_NAMESPACE,
    ) -> 'OntologyModel':
        """Parse each file into its own graph (format guessed from the suffix)."""
        return cls([parse_graph(path) for path in paths], namespace=namespace)

    def _load(self) -> None:
        # uri -> (comment, superclasses) and uri -> (comment, domains, ranges),
        # merged across graphs in source order
        types: dict[str, tuple[str, list[str]]] = {}
        properties: dict[str, tuple[str, list[str], list[str]]] = {}

        for graph in self.graphs:
            for subject in graph.subjects(RDF.type, RDFS.Class):
                if not isinstance(subject, URIRef):
                    continue
                comment, superclasses = types.setdefault(str(subject), ("", []))
                _extend(superclasses, graph.objects(subject, RDFS.subClassOf))
                if not comment:
                    types[str(subject)] = (self._comment(graph, subject), superclasses)

            for subject in graph.subjects(RDF.type, RDF.Property):
                if not isinstance(subject, URIRef):
                    continue
                comment, domains, ranges = properties.setdefault(str(subject), ("", [], []))
                _extend(domains, graph.objects(subject, self.domain_predicate))
                _extend(ranges, graph.objects(subject, self.range_predicate))
                if not comment:
                    properties[str(subject)] = (self._comment(graph, subject), domains, ranges)

        for uri, (comment, superclasses) in types.items():
            self._types[uri] = VocabularyType(
                uri=uri,
                name=local_name(uri),
                comment=comment,
                superclasses=tuple(superclasses),
            )
        for uri, (comment, domains, ranges) in properties.items():
            self._properties[uri] = VocabularyProperty(
                uri=uri,
                name=local_name(uri),
                comment=comment,
                domains=tuple(domains),
                ranges=tuple(ranges),
            )

    @staticmethod
    def _comment(graph: Graph, subject: URIRef) -> str:
        comment = graph.value(subject, RDFS.comment)
        return str(comment) if comment is not None else ""

    def types(self) -> list[VocabularyType]:
        """All types of all graphs, in graph order."""
        return list(self._types.values())

    def properties(self) -> list[VocabularyProperty]:
        """All properties of all graphs, in graph order."""
        return list(self._properties.values())

    def get_type(self, uri: str) -> Optional[VocabularyType]:
        """Look up a type by full URI."""
        return self._types.get(str(uri))

    def find_type(self, name: str) -> Optional[VocabularyType]:
        """Look up a type by local name within the vocabulary namespace."""
        return self._types.get(self.namespace + name)

    def instances_of(self, type_uri: str) -> list[VocabularyInstance]:
        """Resources typed by ``type_uri`` across all graphs."""
        instances: dict[str, VocabularyInstance] = {}
        target = URIRef(type_uri)
        for graph in self.graphs:
            for subject in graph.subjects(RDF.type, target):
                uri = str(subject)
                if uri in instances or not isinstance(subject, URIRef):
                    continue
                instances[uri] = VocabularyInstance(
                    uri=uri,
                    name=local_name(uri),
                    comment=self._comment(graph, subject),
                )
        return list(instances.values())
