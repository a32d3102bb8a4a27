"""
RDF data model - typed terms and triples
"""

from .term import (
    TermKind, Uri, Literal, Blank, Term,
    kind_of, term_as, make_term,
    XSD_STRING, RDF_LANG_STRING,
)
from .triple import Triple

__all__ = [
    'TermKind',
    'Uri',
    'Literal',
    'Blank',
    'Term',
    'Triple',
    'kind_of',
    'term_as',
    'make_term',
    'XSD_STRING',
    'RDF_LANG_STRING'
]
