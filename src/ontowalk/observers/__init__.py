"""
Observers - composable reactions to the triples found at each node
"""

from .base import TripleObserver, FunctionObserver, as_observer
from .printing import PrintTriples, PrintIdentifiers, WriteTriples, SEPARATOR
from .collecting import CollectTriples, CollectTriplesIf, CollectIdentifiers, CountNodes, NodeCounter
from .file_writer import TripleFileWriter, format_triple, format_term
from .aggregate import Aggregate

__all__ = [
    'TripleObserver',
    'FunctionObserver',
    'as_observer',
    'PrintTriples',
    'PrintIdentifiers',
    'WriteTriples',
    'SEPARATOR',
    'CollectTriples',
    'CollectTriplesIf',
    'CollectIdentifiers',
    'CountNodes',
    'NodeCounter',
    'TripleFileWriter',
    'format_triple',
    'format_term',
    'Aggregate'
]
