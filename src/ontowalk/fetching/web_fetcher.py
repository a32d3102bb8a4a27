import asyncio
import logging
from typing import Optional
from urllib.parse import urlparse

import aiohttp

from ..error_handler import ErrorHandler, RetryConfig
from ..errors import FetchFailed
from .base import RDFDocumentFetcher
from .parser import ACCEPT_HEADER, RDFDocumentParser
from .result import RawDocument

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = 'OntowalkCrawler/1.0'


class WebFetcher(RDFDocumentFetcher):
    """Fetches RDF documents over HTTP(S) with aiohttp

    One ClientSession is shared by every fetch between ``open`` and
    ``close``; fetching without opening first opens lazily.
    """

    def __init__(self,
                 request_timeout: float = 30.0,
                 user_agent: str = DEFAULT_USER_AGENT,
                 retry_config: Optional[RetryConfig] = None,
                 parser: RDFDocumentParser = None,
                 session: Optional[aiohttp.ClientSession] = None):
        super().__init__(parser)
        self.request_timeout = request_timeout
        self.user_agent = user_agent
        self.error_handler = ErrorHandler(retry_config)
        self.session = session
        self._owns_session = session is None

    async def open(self) -> None:
        if self.session is None:
            self.session = aiohttp.ClientSession()
            self._owns_session = True

    async def close(self) -> None:
        if self.session is not None and self._owns_session:
            await self.session.close()
            self.session = None

    async def load(self, identifier: str) -> RawDocument:
        scheme = urlparse(identifier).scheme.lower()
        if scheme not in ('http', 'https'):
            raise FetchFailed(identifier, f"unsupported scheme '{scheme}'")

        if self.session is None:
            await self.open()

        try:
            return await self.error_handler.execute_with_retry(self._request, identifier, identifier)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            error_type = self.error_handler.classify_error(e)
            raise FetchFailed(identifier, f"{error_type.value}: {e}") from e

    async def _request(self, identifier: str) -> RawDocument:
        headers = {'User-Agent': self.user_agent, 'Accept': ACCEPT_HEADER}
        timeout = aiohttp.ClientTimeout(total=self.request_timeout)

        async with self.session.get(identifier, headers=headers, timeout=timeout) as response:
            if response.status != 200:
                raise FetchFailed(identifier, f"HTTP {response.status}", response.status)

            content = await response.read()
            logger.debug(f"Fetched {identifier} ({len(content)} bytes, {response.content_type})")
            return RawDocument(
                identifier=identifier,
                content=content,
                media_type=response.content_type,
                status_code=response.status
            )
