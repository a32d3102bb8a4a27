"""
Fetcher Interface - the service that resolves identifiers into triples
"""

import time
import logging
from abc import ABC, abstractmethod

from ..errors import FetchFailed
from .parser import RDFDocumentParser
from .result import FetchResult, RawDocument

logger = logging.getLogger(__name__)


class DocumentFetcher(ABC):
    """Base interface for all document fetchers

    ``fetch`` never raises for a document that cannot be retrieved or
    decoded; it returns a failed FetchResult instead. MalformedTerm is the
    exception: it propagates to the caller.
    """

    @abstractmethod
    async def fetch(self, identifier: str) -> FetchResult:
        """Resolve an identifier into its triples"""
        pass

    async def open(self) -> None:
        """Acquire resources before the first fetch"""
        pass

    async def close(self) -> None:
        """Release resources"""
        pass

    async def __aenter__(self):
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()


class RDFDocumentFetcher(DocumentFetcher):
    """Fetcher that loads raw bytes and decodes them with rdflib"""

    def __init__(self, parser: RDFDocumentParser = None):
        self.parser = parser or RDFDocumentParser()

    @abstractmethod
    async def load(self, identifier: str) -> RawDocument:
        """Retrieve the undecoded document, raising FetchFailed on failure"""
        pass

    async def fetch(self, identifier: str) -> FetchResult:
        start_time = time.time()
        try:
            document = await self.load(identifier)
            triples = self.parser.parse(document)
        except FetchFailed as e:
            logger.warning(f"Fetch failed for {e.identifier}: {e.reason}")
            return FetchResult.failure(
                identifier,
                e.reason,
                response_time=time.time() - start_time,
                status_code=e.status_code
            )

        return FetchResult.success(
            identifier,
            triples,
            response_time=time.time() - start_time,
            status_code=document.status_code
        )
