"""
Crawl engine - breadth-first walk over linked RDF documents
"""

from .config import WalkConfig
from .frontier import Frontier
from .walker import OntologyWalker, crawl, walk, create_fetcher, resolve_start
from .builder import WalkerBuilder

__all__ = [
    'WalkConfig',
    'Frontier',
    'OntologyWalker',
    'WalkerBuilder',
    'crawl',
    'walk',
    'create_fetcher',
    'resolve_start'
]
