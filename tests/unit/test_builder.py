"""Tests for class model resolution (pass one)."""

import logging

import pytest

from rdflib import Graph

from helpers import SCHEMA, add_property, add_type
from schemaorg_model.config import DEFAULT_NAMESPACES, GeneratorConfig
from schemaorg_model.model import (
    ENUM_EXTENDS,
    ENUM_USE,
    ClassModelBuilder,
    build_property_domain_index,
    constant_name,
    select_types,
)
from schemaorg_model.ontology import OntologyModel


def build(ontology, config=None, bridge=None):
    return ClassModelBuilder(ontology, config or GeneratorConfig(), bridge).build()


def messages(records):
    return [r.getMessage() for r in records]


class TestSelectTypes:
    """Test type selection."""

    def test_all_types_without_allow_list(self, ontology):
        selected = select_types(ontology, GeneratorConfig())
        assert [t.name for t in selected] == [t.name for t in ontology.types()]

    def test_allow_list_order(self, ontology):
        config = GeneratorConfig.from_dict({"types": {"Person": None, "Book": None}})
        assert [t.name for t in select_types(ontology, config)] == ["Person", "Book"]

    def test_missing_type_is_critical(self, ontology, diagnostics):
        """Unknown names are reported and dropped; the run continues."""
        config = GeneratorConfig.from_dict({"types": {"Book": None, "Unicorn": None}})

        selected = select_types(ontology, config)

        assert [t.name for t in selected] == ["Book"]
        assert messages(diagnostics(logging.CRITICAL)) == ['Type "Unicorn" cannot be found.']


class TestDomainIndex:
    """Test the property domain index."""

    def test_properties_grouped_by_domain(self, ontology):
        types = ontology.types()
        index = build_property_domain_index(ontology, types)

        assert [p.name for p in index[str(SCHEMA.Book)]] == ["bookFormat", "isbn", "numberOfPages"]
        assert [p.name for p in index[str(SCHEMA.Thing)]] == ["name", "url"]
        assert index[str(SCHEMA.Place)] == []

    def test_only_selected_types_indexed(self, ontology):
        types = [ontology.find_type("Book")]
        index = build_property_domain_index(ontology, types)
        assert list(index) == [str(SCHEMA.Book)]


class TestConstantName:
    """Test enumeration member naming."""

    @pytest.mark.parametrize("name,expected", [
        ("EBook", "E_BOOK"),
        ("Hardcover", "HARDCOVER"),
        ("paperback", "PAPERBACK"),
        ("AudiobookFormat", "AUDIOBOOK_FORMAT"),
        ("graphicNovel", "GRAPHIC_NOVEL"),
    ])
    def test_constant_name(self, name, expected):
        assert constant_name(name) == expected


class TestEnumerations:
    """Test enumeration descriptors."""

    def test_enum_descriptor(self, ontology):
        classes = build(ontology)
        book_format = classes["BookFormatType"]

        assert book_format.is_enum
        assert book_format.parent == ENUM_EXTENDS
        assert book_format.namespace == DEFAULT_NAMESPACES["enum"]
        assert book_format.uses == [ENUM_USE]
        assert book_format.fields == {}
        assert book_format.interface_name is None

    def test_enum_constants(self, ontology):
        constants = build(ontology)["BookFormatType"].constants

        assert list(constants) == ["EBook", "Hardcover"]
        assert constants["EBook"].name == "E_BOOK"
        assert constants["EBook"].value == str(SCHEMA.EBook)

    def test_enumeration_marker_is_a_class(self, ontology):
        """Enumeration itself derives from Thing, so it is an entity class."""
        enumeration = build(ontology)["Enumeration"]
        assert not enumeration.is_enum
        assert enumeration.parent == "Thing"

    def test_enum_namespace_override(self, ontology):
        config = GeneratorConfig.from_dict({
            "types": {"BookFormatType": {"namespaces": {"class": "app.formats"}}},
        })
        assert build(ontology, config)["BookFormatType"].namespace == "app.formats"

    def test_enums_never_get_interfaces(self, ontology):
        config = GeneratorConfig.from_dict({"useRte": True})
        assert not build(ontology, config)["BookFormatType"].has_interface


class TestParents:
    """Test parent resolution."""

    def test_first_declared_superclass(self, ontology):
        classes = build(ontology)
        assert classes["Book"].parent == "CreativeWork"
        assert classes["Thing"].parent is None

    def test_several_superclasses(self, ontology, diagnostics):
        """The first superclass wins and an error is logged."""
        config = GeneratorConfig.from_dict({"types": {"LocalBusiness": None}})

        classes = build(ontology, config)

        assert classes["LocalBusiness"].parent == "Organization"
        errors = messages(diagnostics(logging.ERROR))
        assert 'The type "LocalBusiness" has several supertypes. Using the first one.' in errors

    def test_several_superclasses_single_error(self, diagnostics):
        """Two declared superclasses: first one kept, exactly one error."""
        g = Graph()
        add_type(g, "Thing")
        add_type(g, "Organization", ["Thing"])
        add_type(g, "Place", ["Thing"])
        add_type(g, "LocalBusiness", ["Organization", "Place"])

        classes = build(OntologyModel([g]))

        assert classes["LocalBusiness"].parent == "Organization"
        assert len(diagnostics(logging.ERROR)) == 1

    def test_explicit_parent(self, ontology, diagnostics):
        config = GeneratorConfig.from_dict({
            "types": {"LocalBusiness": {"parent": "Place"}, "Place": None},
        })

        classes = build(ontology, config)

        assert classes["LocalBusiness"].parent == "Place"
        assert not any("several supertypes" in m for m in messages(diagnostics(logging.ERROR)))

    def test_parent_outside_allow_list(self, ontology, diagnostics):
        """A parent that is not generated is reported but kept."""
        config = GeneratorConfig.from_dict({"types": {"Book": None}})

        classes = build(ontology, config)

        assert classes["Book"].parent == "CreativeWork"
        errors = messages(diagnostics(logging.ERROR))
        assert 'The type "CreativeWork" (parent of "Book") doesn\'t exist' in errors


class TestFields:
    """Test field resolution."""

    def test_fields_from_domain(self, ontology):
        classes = build(ontology)
        assert list(classes["Book"].fields) == ["bookFormat", "isbn", "numberOfPages"]
        assert classes["Book"].fields["numberOfPages"].range == "Integer"

    def test_fields_are_not_inherited(self, ontology):
        assert "name" not in build(ontology)["Book"].fields

    def test_enum_range_becomes_text(self, ontology):
        assert build(ontology)["Book"].fields["bookFormat"].range == "Text"

    def test_text_and_enum_ranges_collapse(self, schema_graph, diagnostics):
        """[Text, enum] becomes a single Text candidate without an ambiguity error."""
        add_property(schema_graph, "bookEdition", ["Book"], ["Text", "BookFormatType"])

        classes = build(OntologyModel([schema_graph]))

        assert classes["Book"].fields["bookEdition"].range == "Text"
        assert not any("bookEdition" in m for m in messages(diagnostics(logging.ERROR)))

    def test_several_ranges(self, ontology, diagnostics):
        classes = build(ontology)

        assert classes["CreativeWork"].fields["author"].range == "Person"
        errors = messages(diagnostics(logging.ERROR))
        assert 'The property "author" (type "CreativeWork") has several types. Using the first one.' in errors

    def test_allow_list_filters_ranges(self, ontology, book_config, diagnostics):
        """Organization is not generated, so Person is the only candidate."""
        classes = build(ontology, book_config)

        assert classes["CreativeWork"].fields["author"].range == "Person"
        assert diagnostics(logging.ERROR) == []

    def test_no_usable_range(self, ontology, diagnostics):
        """Every range filtered out: the field is dropped with an error."""
        config = GeneratorConfig.from_dict({"types": {"CreativeWork": None}})

        classes = build(ontology, config)

        assert "author" not in classes["CreativeWork"].fields
        assert "datePublished" in classes["CreativeWork"].fields
        errors = messages(diagnostics(logging.ERROR))
        assert 'The property "author" (type "CreativeWork") has no usable range. Skipping.' in errors

    def test_range_override(self, ontology, diagnostics):
        config = GeneratorConfig.from_dict({
            "types": {"CreativeWork": {"properties": {"author": {"range": "Organization"}}}},
        })

        classes = build(ontology, config)

        assert list(classes["CreativeWork"].fields) == ["author"]
        assert classes["CreativeWork"].fields["author"].range == "Organization"
        assert not any("author" in m for m in messages(diagnostics(logging.ERROR)))

    def test_property_allow_list(self, ontology):
        config = GeneratorConfig.from_dict({"types": {"Book": {"properties": {"isbn": None}}}})
        assert list(build(ontology, config)["Book"].fields) == ["isbn"]

    def test_legacy_property_skipped(self, ontology, diagnostics):
        classes = build(ontology)

        assert "awards" not in classes["Person"].fields
        assert "award" in classes["Person"].fields
        infos = messages(diagnostics(logging.INFO))
        assert 'The property "awards" (type "Person") is legacy. Ignoring.' in infos

    def test_listed_legacy_property_kept(self, ontology, diagnostics):
        """An explicitly listed legacy property is generated with a warning."""
        config = GeneratorConfig.from_dict({"types": {"Person": {"properties": {"awards": None}}}})

        classes = build(ontology, config)

        assert list(classes["Person"].fields) == ["awards"]
        warnings = messages(diagnostics(logging.WARNING))
        assert 'The property "awards" (type "Person") is legacy.' in warnings

    def test_goodrelations_check(self, ontology, bridge, diagnostics):
        """The check is advisory: the field is generated anyway."""
        config = GeneratorConfig.from_dict({"types": {"Thing": None}, "checkIsGoodRelations": True})

        classes = build(ontology, config, bridge)

        assert list(classes["Thing"].fields) == ["name", "url"]
        warnings = messages(diagnostics(logging.WARNING))
        assert warnings == ['The property "url" (type "Thing") is not part of GoodRelations.']

    def test_goodrelations_check_disabled(self, ontology, bridge, diagnostics):
        config = GeneratorConfig.from_dict({"types": {"Thing": None}})
        build(ontology, config, bridge)
        assert diagnostics(logging.WARNING) == []


class TestNamespacesAndInterfaces:
    """Test namespace and interface assignment."""

    def test_default_entity_namespace(self, ontology):
        assert build(ontology)["Book"].namespace == DEFAULT_NAMESPACES["entity"]

    def test_no_interface_by_default(self, ontology):
        assert not build(ontology)["Book"].has_interface

    def test_interfaces(self, ontology):
        config = GeneratorConfig.from_dict({"useRte": True})

        book = build(ontology, config)["Book"]

        assert book.interface_name == "BookInterface"
        assert book.interface_namespace == DEFAULT_NAMESPACES["interface"]
        assert book.interface_reference == "schema_org.model.BookInterface:BookInterface"

    def test_type_namespace_overrides(self, ontology):
        config = GeneratorConfig.from_dict({
            "useRte": True,
            "types": {"Book": {"namespaces": {"class": "app.books", "interface": "app.books"}}},
        })

        book = build(ontology, config)["Book"]

        assert book.namespace == "app.books"
        assert book.interface_namespace == "app.books"
        assert book.reference == "app.books.Book:Book"

    def test_selection_order(self, ontology):
        config = GeneratorConfig.from_dict({"types": {"Person": None, "Book": None, "Thing": None}})
        assert list(build(ontology, config)) == ["Person", "Book", "Thing"]
