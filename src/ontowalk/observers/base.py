"""
Observer Interface - reacts to the triples discovered at each node
"""

import inspect
from abc import ABC, abstractmethod
from typing import Callable, Sequence

from ..rdf import Triple


class TripleObserver(ABC):
    """Base interface for all observers

    ``observe`` is awaited once per successfully fetched node with the
    filtered batch, in filtered order. The batch is a tuple and must not be
    mutated; return values are ignored.
    """

    @abstractmethod
    async def observe(self, identifier: str, batch: Sequence[Triple]) -> None:
        """Process the filtered triples of one node"""
        pass


class FunctionObserver(TripleObserver):
    """Adapt a plain or async function ``func(identifier, batch)``"""

    def __init__(self, func: Callable):
        self.func = func

    async def observe(self, identifier: str, batch: Sequence[Triple]) -> None:
        result = self.func(identifier, batch)
        if inspect.isawaitable(result):
            await result


def as_observer(obj) -> TripleObserver:
    """Coerce an observer or a callable into a TripleObserver"""
    if isinstance(obj, TripleObserver):
        return obj
    if callable(obj):
        return FunctionObserver(obj)
    raise TypeError(f"Cannot use {type(obj).__name__} as an observer")
