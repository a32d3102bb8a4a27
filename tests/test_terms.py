"""
Term and triple model tests
"""

import dataclasses

import pytest
import rdflib
from rdflib.namespace import XSD
from rdflib.term import Variable

from ontowalk.errors import MalformedTerm, TermTypeMismatch
from ontowalk.rdf import (
    Blank, Literal, TermKind, Triple, Uri, RDF_LANG_STRING, XSD_STRING,
    kind_of, make_term, term_as,
)


def test_kind_of_each_kind():
    assert kind_of(Uri("http://example.org/a")) is TermKind.URI
    assert kind_of(Literal("x")) is TermKind.LITERAL
    assert kind_of(Blank("b0")) is TermKind.BLANK


def test_term_as_returns_matching_term():
    term = Uri("http://example.org/a")
    assert term_as(term, TermKind.URI) is term
    assert term_as(term, Uri).value == "http://example.org/a"


def test_term_as_wrong_kind_raises():
    with pytest.raises(TermTypeMismatch) as excinfo:
        term_as(Literal("42"), Uri)

    assert excinfo.value.expected is TermKind.URI
    assert excinfo.value.actual is TermKind.LITERAL
    assert isinstance(excinfo.value, TypeError)


def test_term_as_blank_as_literal_raises():
    with pytest.raises(TermTypeMismatch):
        term_as(Blank("b1"), TermKind.LITERAL)


def test_term_as_rejects_non_term_class():
    with pytest.raises(ValueError):
        term_as(Uri("http://example.org/a"), str)


def test_rendering_uses_primary_payload_only():
    datatype = Uri(str(XSD.integer))
    assert str(Uri("http://example.org/a")) == "http://example.org/a"
    assert str(Literal("42", datatype)) == "42"
    assert str(Blank("node7")) == "node7"


def test_triple_rendering():
    triple = Triple(Uri("http://example.org/a"), Uri("http://example.org/p"), Literal("hello"))
    assert str(triple) == "http://example.org/a http://example.org/p hello"


def test_triple_is_immutable():
    triple = Triple(Uri("s"), Uri("p"), Uri("o"))
    with pytest.raises(dataclasses.FrozenInstanceError):
        triple.object = Uri("x")


def test_terms_compare_by_value():
    assert Uri("http://example.org/a") == Uri("http://example.org/a")
    assert Uri("x") != Blank("x")
    assert len({Literal("1"), Literal("1"), Literal("1", Uri(str(XSD.integer)))}) == 2


def test_make_term_uri():
    term = make_term(rdflib.URIRef("http://example.org/a"))
    assert term == Uri("http://example.org/a")


def test_make_term_typed_literal_keeps_datatype():
    term = make_term(rdflib.Literal("42", datatype=XSD.integer))
    assert isinstance(term, Literal)
    assert term.value == "42"
    assert term.datatype == Uri(str(XSD.integer))


def test_make_term_plain_literal_is_xsd_string():
    term = make_term(rdflib.Literal("plain"))
    assert term.datatype == XSD_STRING
    assert term.language is None


def test_make_term_language_literal():
    term = make_term(rdflib.Literal("chat", lang="fr"))
    assert term.datatype == RDF_LANG_STRING
    assert term.language == "fr"
    assert str(term) == "chat"


def test_make_term_blank():
    term = make_term(rdflib.BNode("b42"))
    assert term == Blank("b42")


def test_make_term_unknown_type_is_malformed():
    with pytest.raises(MalformedTerm):
        make_term(Variable("x"))


def test_make_term_rejects_plain_strings():
    with pytest.raises(MalformedTerm):
        make_term("http://example.org/a")


def test_triple_from_nodes():
    triple = Triple.from_nodes(
        rdflib.URIRef("http://example.org/a"),
        rdflib.URIRef("http://example.org/p"),
        rdflib.BNode("x"),
    )
    assert triple == Triple(Uri("http://example.org/a"), Uri("http://example.org/p"), Blank("x"))
