import sys
from typing import Sequence, TextIO

from ..rdf import Triple
from .base import TripleObserver

SEPARATOR = "=" * 62


class PrintTriples(TripleObserver):
    """Print each triple, then a separator line after every batch"""

    def __init__(self, stream: TextIO = None):
        self.stream = stream

    async def observe(self, identifier: str, batch: Sequence[Triple]) -> None:
        # Resolved late so redirected stdout is honoured
        stream = self.stream or sys.stdout
        for triple in batch:
            stream.write(f"{triple}\n")
        stream.write(f"{SEPARATOR}\n")
        stream.flush()


class PrintIdentifiers(TripleObserver):
    """Print the identifier of each visited node"""

    def __init__(self, stream: TextIO = None):
        self.stream = stream

    async def observe(self, identifier: str, batch: Sequence[Triple]) -> None:
        stream = self.stream or sys.stdout
        stream.write(f"{identifier}\n")
        stream.flush()


class WriteTriples(TripleObserver):
    """Write each triple to an arbitrary text sink, one per line"""

    def __init__(self, sink: TextIO):
        self.sink = sink

    async def observe(self, identifier: str, batch: Sequence[Triple]) -> None:
        for triple in batch:
            self.sink.write(f"{triple}\n")
