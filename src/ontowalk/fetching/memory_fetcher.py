from typing import Dict, Iterable, List, Optional

from ..rdf import Triple
from .base import DocumentFetcher
from .result import FetchResult


class MemoryFetcher(DocumentFetcher):
    """Serves documents from an in-memory mapping of identifier to triples

    Identifiers missing from the mapping, or listed in ``failing``, fail.
    Every requested identifier is recorded in ``requests``.
    """

    def __init__(self, documents: Dict[str, Iterable[Triple]], failing: Optional[Iterable[str]] = None):
        self.documents = {identifier: list(triples) for identifier, triples in documents.items()}
        self.failing = set(failing or ())
        self.requests: List[str] = []

    async def fetch(self, identifier: str) -> FetchResult:
        self.requests.append(identifier)

        if identifier in self.failing or identifier not in self.documents:
            return FetchResult.failure(identifier, f"no document for {identifier}")

        return FetchResult.success(identifier, self.documents[identifier])
