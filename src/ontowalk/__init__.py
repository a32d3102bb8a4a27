"""
ontowalk - crawl graphs of linked RDF documents

Start from one identifier, fetch and decode its document, hand the
filtered triples to an observer and follow every URI object until no new
identifiers remain.
"""

from .errors import OntowalkError, TermTypeMismatch, MalformedTerm, FetchFailed, ObserverErrors
from .rdf import TermKind, Uri, Literal, Blank, Term, Triple, kind_of, term_as, make_term
from .filters import (
    TripleFilter, AcceptAll, FunctionFilter, ObjectKindFilter, PredicateFilter, DomainFilter,
    all_of, any_of, negate, as_filter,
)
from .observers import (
    TripleObserver, FunctionObserver, PrintTriples, PrintIdentifiers, WriteTriples,
    CollectTriples, CollectTriplesIf, CollectIdentifiers, CountNodes, NodeCounter,
    TripleFileWriter, Aggregate,
)
from .fetching import DocumentFetcher, FetchResult, WebFetcher, FileFetcher, MemoryFetcher
from .crawler import OntologyWalker, WalkerBuilder, WalkConfig, crawl, walk

__version__ = "1.0.0"

__all__ = [
    'OntowalkError', 'TermTypeMismatch', 'MalformedTerm', 'FetchFailed', 'ObserverErrors',
    'TermKind', 'Uri', 'Literal', 'Blank', 'Term', 'Triple', 'kind_of', 'term_as', 'make_term',
    'TripleFilter', 'AcceptAll', 'FunctionFilter', 'ObjectKindFilter', 'PredicateFilter',
    'DomainFilter', 'all_of', 'any_of', 'negate', 'as_filter',
    'TripleObserver', 'FunctionObserver', 'PrintTriples', 'PrintIdentifiers', 'WriteTriples',
    'CollectTriples', 'CollectTriplesIf', 'CollectIdentifiers', 'CountNodes', 'NodeCounter',
    'TripleFileWriter', 'Aggregate',
    'DocumentFetcher', 'FetchResult', 'WebFetcher', 'FileFetcher', 'MemoryFetcher',
    'OntologyWalker', 'WalkerBuilder', 'WalkConfig', 'crawl', 'walk',
]
