import logging
from typing import Sequence

from ..errors import ObserverErrors
from ..rdf import Triple
from .base import TripleObserver, as_observer

logger = logging.getLogger(__name__)


class Aggregate(TripleObserver):
    """Fan one node visit out to several observers in registration order

    By default the first failing observer aborts the ones after it. With
    ``isolate_failures`` every observer runs and the failures are raised
    together as ObserverErrors.
    """

    def __init__(self, *observers, isolate_failures: bool = False):
        self.observers = tuple(as_observer(o) for o in observers)
        self.isolate_failures = isolate_failures

    async def observe(self, identifier: str, batch: Sequence[Triple]) -> None:
        batch = tuple(batch)

        if not self.isolate_failures:
            for observer in self.observers:
                await observer.observe(identifier, batch)
            return

        failures = []
        for observer in self.observers:
            try:
                await observer.observe(identifier, batch)
            except Exception as e:
                logger.error(f"Observer {type(observer).__name__} failed at {identifier}: {e}")
                failures.append((observer, e))

        if failures:
            raise ObserverErrors(identifier, failures)

    def __len__(self) -> int:
        return len(self.observers)
