from typing import Callable, List, Sequence

from ..rdf import Triple
from .base import TripleObserver


class CollectTriples(TripleObserver):
    """Append every observed triple to a caller-owned list"""

    def __init__(self, store: List[Triple]):
        self.store = store

    async def observe(self, identifier: str, batch: Sequence[Triple]) -> None:
        self.store.extend(batch)


class CollectTriplesIf(TripleObserver):
    """Append the observed triples that satisfy ``predicate``

    Applied after, and independently of, the crawl filter.
    """

    def __init__(self, store: List[Triple], predicate: Callable[[Triple], bool]):
        self.store = store
        self.predicate = predicate

    async def observe(self, identifier: str, batch: Sequence[Triple]) -> None:
        self.store.extend(t for t in batch if self.predicate(t))


class CollectIdentifiers(TripleObserver):
    """Append the identifier of each visited node"""

    def __init__(self, store: List[str]):
        self.store = store

    async def observe(self, identifier: str, batch: Sequence[Triple]) -> None:
        self.store.append(identifier)


class NodeCounter:
    """Mutable counter owned by the caller"""

    def __init__(self, value: int = 0):
        self.value = value

    def increment(self) -> None:
        self.value += 1

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"NodeCounter({self.value})"


class CountNodes(TripleObserver):
    """Count observed nodes (not triples)"""

    def __init__(self, counter: NodeCounter = None):
        self.counter = counter if counter is not None else NodeCounter()

    async def observe(self, identifier: str, batch: Sequence[Triple]) -> None:
        self.counter.increment()

    @property
    def count(self) -> int:
        return self.counter.value
