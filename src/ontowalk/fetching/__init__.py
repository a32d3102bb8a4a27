"""
Document fetchers - resolve identifiers into decoded triples
"""

from .result import FetchResult, RawDocument
from .base import DocumentFetcher, RDFDocumentFetcher
from .parser import RDFDocumentParser
from .web_fetcher import WebFetcher
from .file_fetcher import FileFetcher
from .memory_fetcher import MemoryFetcher

__all__ = [
    'FetchResult',
    'RawDocument',
    'DocumentFetcher',
    'RDFDocumentFetcher',
    'RDFDocumentParser',
    'WebFetcher',
    'FileFetcher',
    'MemoryFetcher'
]
