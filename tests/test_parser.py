"""
RDF document decoding tests
"""

import pytest
import rdflib

from ontowalk.errors import FetchFailed
from ontowalk.fetching import RDFDocumentParser, RawDocument
from ontowalk.rdf import Literal, Triple, Uri

NTRIPLES = b"""<http://example.org/c> <http://example.org/p> <http://example.org/z> .
<http://example.org/a> <http://example.org/p> "first" .
<http://example.org/b> <http://example.org/p> <http://example.org/y> .
"""

TURTLE = b"""@prefix ex: <http://example.org/> .
ex:a ex:knows ex:b ;
     ex:name "Alice" .
"""

RDFXML = b"""<?xml version="1.0"?>
<rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#"
         xmlns:ex="http://example.org/">
  <rdf:Description rdf:about="http://example.org/a">
    <ex:knows rdf:resource="http://example.org/b"/>
  </rdf:Description>
</rdf:RDF>
"""


@pytest.fixture
def parser():
    return RDFDocumentParser()


def test_select_format_from_media_type(parser):
    assert parser.select_format("http://example.org/doc", "text/turtle; charset=utf-8") == "turtle"
    assert parser.select_format("http://example.org/doc", "application/rdf+xml") == "xml"
    assert parser.select_format("http://example.org/doc", "application/ld+json") == "json-ld"


def test_select_format_from_extension(parser):
    assert parser.select_format("http://example.org/onto.ttl") == "turtle"
    assert parser.select_format("/data/people.nt") == "nt"


def test_select_format_unknown_media_type_falls_back_to_extension(parser):
    assert parser.select_format("http://example.org/onto.ttl", "text/plain") == "turtle"


def test_select_format_defaults_to_rdfxml(parser):
    assert parser.select_format("http://example.org/ontology") == "xml"


def test_parse_preserves_decode_order(parser):
    triples = parser.parse(RawDocument("http://example.org/doc.nt", NTRIPLES))

    assert [str(t.subject) for t in triples] == [
        "http://example.org/c",
        "http://example.org/a",
        "http://example.org/b",
    ]
    assert triples[1].object == Literal("first")


def test_parse_turtle(parser):
    triples = parser.parse(RawDocument("http://example.org/doc", TURTLE, media_type="text/turtle"))

    assert Triple(Uri("http://example.org/a"), Uri("http://example.org/knows"),
                  Uri("http://example.org/b")) in triples
    assert Triple(Uri("http://example.org/a"), Uri("http://example.org/name"),
                  Literal("Alice")) in triples
    assert len(triples) == 2


def test_parse_rdfxml_by_default(parser):
    triples = parser.parse(RawDocument("http://example.org/ontology", RDFXML))

    assert triples == [
        Triple(Uri("http://example.org/a"), Uri("http://example.org/knows"), Uri("http://example.org/b"))
    ]


def test_parse_error_raises_fetch_failed(parser):
    with pytest.raises(FetchFailed) as excinfo:
        parser.parse(RawDocument("http://example.org/broken.ttl", b"this is @@ not turtle"))

    assert excinfo.value.identifier == "http://example.org/broken.ttl"
    assert "parsing error" in excinfo.value.reason


def test_parse_keeps_typed_literals_as_written(parser):
    document = RawDocument("http://example.org/numbers.nt", b"""
<http://example.org/s> <http://example.org/p> "01"^^<http://www.w3.org/2001/XMLSchema#integer> .
<http://example.org/s> <http://example.org/p> "1.50"^^<http://www.w3.org/2001/XMLSchema#decimal> .
""")

    triples = parser.parse(document)

    assert [t.object.value for t in triples] == ["01", "1.50"]
    assert triples[0].object.datatype == Uri("http://www.w3.org/2001/XMLSchema#integer")


def test_parse_restores_literal_normalization(parser):
    before = rdflib.NORMALIZE_LITERALS
    parser.parse(RawDocument("http://example.org/doc.nt", NTRIPLES))

    assert rdflib.NORMALIZE_LITERALS == before
