import logging
from pathlib import Path
from typing import Sequence

import aiofiles

from ..rdf import Blank, Literal, Term, Triple, Uri, XSD_STRING
from .base import TripleObserver

logger = logging.getLogger(__name__)


def _escape(value: str) -> str:
    return (value.replace('\\', '\\\\').replace('"', '\\"')
            .replace('\n', '\\n').replace('\r', '\\r'))


def format_term(term: Term) -> str:
    """Render a term in N-Triples syntax"""
    if isinstance(term, Uri):
        return f"<{term.value}>"
    if isinstance(term, Blank):
        return f"_:{term.value}"
    if isinstance(term, Literal):
        text = f'"{_escape(term.value)}"'
        if term.language:
            return f"{text}@{term.language}"
        if term.datatype != XSD_STRING:
            return f"{text}^^<{term.datatype.value}>"
        return text
    raise TypeError(f"Not a term: {term!r}")


def format_triple(triple: Triple) -> str:
    return f"{format_term(triple.subject)} {format_term(triple.predicate)} {format_term(triple.object)} ."


class TripleFileWriter(TripleObserver):
    """Append observed triples to a file in N-Triples syntax

    With ``mode='w'`` the file is truncated by the first batch this writer
    receives and appended to afterwards, so a writer reused for a second
    crawl keeps appending. A writer that never receives a batch leaves the
    file untouched.
    """

    def __init__(self, path, mode: str = 'a'):
        if mode not in ('a', 'w'):
            raise ValueError("mode must be 'a' or 'w'")
        self.path = Path(path)
        self.mode = mode
        self.triples_written = 0
        self._truncated = False

    async def observe(self, identifier: str, batch: Sequence[Triple]) -> None:
        # 'w' truncates only on the first batch this writer ever receives
        mode = 'a' if self.mode == 'a' or self._truncated else 'w'
        self.path.parent.mkdir(parents=True, exist_ok=True)

        async with aiofiles.open(self.path, mode, encoding='utf-8') as f:
            await f.write(''.join(f"{format_triple(t)}\n" for t in batch))

        self._truncated = True
        self.triples_written += len(batch)
        logger.debug(f"Wrote {len(batch)} triples from {identifier} to {self.path}")
