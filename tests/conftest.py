"""Shared test fixtures for the schemaorg-model test suite."""

import logging

import pytest
from rdflib import Graph

from helpers import add_instance, add_property, add_relation_term, add_type
from schemaorg_model.config import GeneratorConfig
from schemaorg_model.ontology import GoodRelationsBridge, OntologyModel, extract_cardinalities


# ============================================================================
# Vocabulary Fixtures
# ============================================================================

@pytest.fixture
def schema_graph():
    """A small schema.org-shaped vocabulary.

    Declaration order is significant: LocalBusiness lists Organization
    before Place, and author lists Person before Organization.
    """
    g = Graph()

    add_type(g, "Thing", comment="The most generic type of item.")
    add_type(g, "CreativeWork", ["Thing"], comment="The most generic kind of creative work.")
    add_type(g, "Book", ["CreativeWork"], comment="A book.")
    add_type(g, "Person", ["Thing"], comment="A person (alive, dead, undead, or fictional).")
    add_type(g, "Organization", ["Thing"], comment="An organization such as a school or a club.")
    add_type(g, "Place", ["Thing"], comment="Entities that have a somewhat fixed, physical extension.")
    add_type(g, "LocalBusiness", ["Organization", "Place"], comment="A particular physical business.")
    add_type(g, "Enumeration", ["Thing"], comment="Lists or enumerations.")
    add_type(g, "BookFormatType", ["Enumeration"], comment="The publication format of the book.")

    add_instance(g, "EBook", "BookFormatType", comment="Book format: Ebook.")
    add_instance(g, "Hardcover", "BookFormatType", comment="Book format: Hardcover.")

    add_property(g, "name", ["Thing"], ["Text"], comment="The name of the item.")
    add_property(g, "url", ["Thing"], ["URL"], comment="URL of the item.")
    add_property(g, "author", ["CreativeWork"], ["Person", "Organization"], comment="The author of this content.")
    add_property(g, "datePublished", ["CreativeWork"], ["Date"], comment="Date of first publication.")
    add_property(g, "isAccessibleForFree", ["CreativeWork"], ["Boolean"], comment="A flag to signal free access.")
    add_property(g, "bookFormat", ["Book"], ["BookFormatType"], comment="The format of the book.")
    add_property(g, "isbn", ["Book"], ["Text"], comment="The ISBN of the book.")
    add_property(g, "numberOfPages", ["Book"], ["Integer"], comment="The number of pages in the book.")
    add_property(g, "award", ["Person"], ["Text"], comment="An award won by or for this item.")
    add_property(
        g, "awards", ["Person"], ["Text"],
        comment="Awards won by or for this item (legacy spelling; see award).",
    )
    add_property(
        g, "knows", ["Person"], ["Person"],
        comment="The most generic uni-directional social relation.",
    )
    add_property(g, "employee", ["Organization"], ["Person"], comment="Someone working for this organization.")

    return g


@pytest.fixture
def ontology(schema_graph):
    """OntologyModel over the small vocabulary."""
    return OntologyModel([schema_graph])


@pytest.fixture
def relations_graph():
    """A GoodRelations fragment: ``name`` is mandatory there."""
    g = Graph()
    add_relation_term(g, "name", "name (1..1)")
    add_relation_term(g, "hasMPN", "has MPN (0..*)")
    add_relation_term(g, "description", "description")
    return g


@pytest.fixture
def bridge(relations_graph):
    """GoodRelationsBridge over the fragment."""
    return GoodRelationsBridge([relations_graph])


@pytest.fixture
def cardinalities(ontology):
    """Cardinality index without GoodRelations."""
    return extract_cardinalities(ontology, GoodRelationsBridge())


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def default_config(tmp_path):
    """Default configuration writing under a temporary directory."""
    config = GeneratorConfig()
    config.output = tmp_path / "out"
    return config


@pytest.fixture
def book_config(tmp_path):
    """Allow-list of Thing, CreativeWork, Book, Person and BookFormatType."""
    return GeneratorConfig.from_dict({
        "types": {
            "Thing": None,
            "CreativeWork": None,
            "Book": None,
            "Person": None,
            "BookFormatType": None,
        },
        "output": str(tmp_path / "out"),
    })


# ============================================================================
# Logging Fixtures
# ============================================================================

@pytest.fixture
def diagnostics(caplog):
    """Capture package diagnostics down to INFO.

    Returns a function giving the captured records of one level.
    """
    caplog.set_level(logging.INFO, logger="schemaorg_model")

    def records(level):
        return [r for r in caplog.records if r.levelno == level]

    return records
