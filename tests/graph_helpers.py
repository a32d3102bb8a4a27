"""
Builders for small in-memory RDF graphs used across the tests
"""

import asyncio

from ontowalk.fetching import DocumentFetcher, FetchResult, MemoryFetcher
from ontowalk.rdf import Blank, Literal, Triple, Uri

EX = "http://example.org/"
P = Uri(EX + "p")
Q = Uri(EX + "q")


def uri(name: str) -> Uri:
    return Uri(name if ":" in name else EX + name)


def link(source: str, target: str, predicate: Uri = P) -> Triple:
    return Triple(uri(source), predicate, uri(target))


def literal(source: str, value: str, predicate: Uri = P) -> Triple:
    return Triple(uri(source), predicate, Literal(value))


def blank(source: str, value: str, predicate: Uri = P) -> Triple:
    return Triple(uri(source), predicate, Blank(value))


def graph_fetcher(edges, failing=()) -> MemoryFetcher:
    """MemoryFetcher for an adjacency mapping {node: [targets]}"""
    documents = {}
    for source, targets in edges.items():
        documents[uri(source).value] = [link(source, target) for target in targets]
    return MemoryFetcher(documents, failing=[uri(f).value for f in failing])


def names(identifiers):
    """Strip the example namespace for readable assertions"""
    return [i[len(EX):] if i.startswith(EX) else i for i in identifiers]


class SlowFetcher(DocumentFetcher):
    """Wraps another fetcher, sleeping before each fetch and tracking overlap"""

    def __init__(self, inner: DocumentFetcher, delay: float = 0.01):
        self.inner = inner
        self.delay = delay
        self.in_flight = 0
        self.max_in_flight = 0

    async def fetch(self, identifier: str) -> FetchResult:
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delay)
            return await self.inner.fetch(identifier)
        finally:
            self.in_flight -= 1
