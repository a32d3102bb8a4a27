"""
Fetch Result - outcome of resolving one identifier into triples
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from ..rdf import Triple


@dataclass
class FetchResult:
    """Result of fetching a single identifier

    ``triples`` is only meaningful when ``ok`` is true. Iterating a result
    yields ``(ok, triples)``.
    """
    identifier: str
    ok: bool
    triples: List[Triple] = field(default_factory=list)
    error: Optional[str] = None
    response_time: float = 0.0
    status_code: Optional[int] = None

    @classmethod
    def success(cls, identifier: str, triples: List[Triple], **kwargs) -> "FetchResult":
        return cls(identifier=identifier, ok=True, triples=list(triples), **kwargs)

    @classmethod
    def failure(cls, identifier: str, error: str, **kwargs) -> "FetchResult":
        return cls(identifier=identifier, ok=False, error=error, **kwargs)

    def __iter__(self) -> Iterator:
        return iter((self.ok, self.triples))


@dataclass
class RawDocument:
    """Undecoded document body and the hints used to pick a decoder"""
    identifier: str
    content: bytes
    media_type: Optional[str] = None
    status_code: Optional[int] = None
