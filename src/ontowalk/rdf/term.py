"""
RDF terms - a closed union of URI, literal and blank node values
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Type, Union

import rdflib
from rdflib.namespace import RDF, XSD

from ..errors import MalformedTerm, TermTypeMismatch


class TermKind(Enum):
    """The three kinds a term can be"""
    URI = "uri"
    LITERAL = "literal"
    BLANK = "blank"


@dataclass(frozen=True)
class Uri:
    """A term naming a resource"""
    value: str
    kind: TermKind = field(default=TermKind.URI, init=False, repr=False)

    def __str__(self) -> str:
        return self.value


XSD_STRING = Uri(str(XSD.string))
RDF_LANG_STRING = Uri(str(RDF.langString))


@dataclass(frozen=True)
class Literal:
    """A literal value with its datatype"""
    value: str
    datatype: Uri = XSD_STRING
    language: Optional[str] = None
    kind: TermKind = field(default=TermKind.LITERAL, init=False, repr=False)

    def __str__(self) -> str:
        # Datatype and language are not rendered
        return self.value


@dataclass(frozen=True)
class Blank:
    """A blank node identifier"""
    value: str
    kind: TermKind = field(default=TermKind.BLANK, init=False, repr=False)

    def __str__(self) -> str:
        return self.value


Term = Union[Uri, Literal, Blank]

_KIND_CLASSES = {
    TermKind.URI: Uri,
    TermKind.LITERAL: Literal,
    TermKind.BLANK: Blank,
}


def kind_of(term: Term) -> TermKind:
    """Return the kind of a term"""
    return term.kind


def term_as(term: Term, kind: Union[TermKind, Type]) -> Term:
    """Extract ``term`` as ``kind``, raising TermTypeMismatch on the wrong kind

    ``kind`` may be a TermKind or one of the Uri/Literal/Blank classes.
    """
    if not isinstance(kind, TermKind):
        expected = next((k for k, cls in _KIND_CLASSES.items() if cls is kind), None)
        if expected is None:
            raise ValueError(f"Not a term class: {kind!r}")
        kind = expected

    actual = kind_of(term)
    if actual is not kind:
        raise TermTypeMismatch(kind, actual)
    return term


def make_term(node) -> Term:
    """Build a term from a node decoded by rdflib"""
    if isinstance(node, rdflib.URIRef):
        return Uri(str(node))

    if isinstance(node, rdflib.Literal):
        if node.datatype is not None:
            datatype = Uri(str(node.datatype))
        elif node.language:
            datatype = RDF_LANG_STRING
        else:
            datatype = XSD_STRING
        return Literal(str(node), datatype, node.language or None)

    if isinstance(node, rdflib.BNode):
        return Blank(str(node))

    raise MalformedTerm(node)
