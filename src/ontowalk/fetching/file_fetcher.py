import logging
from pathlib import Path
from urllib.parse import urlparse
from urllib.request import url2pathname

import aiofiles

from ..errors import FetchFailed
from .base import RDFDocumentFetcher
from .result import RawDocument

logger = logging.getLogger(__name__)


class FileFetcher(RDFDocumentFetcher):
    """Fetches RDF documents from the local filesystem

    Identifiers may be plain paths or ``file://`` URIs. Relative paths are
    resolved against ``base_dir``.
    """

    def __init__(self, base_dir=None, parser=None):
        super().__init__(parser)
        self.base_dir = Path(base_dir) if base_dir else None

    def resolve_path(self, identifier: str) -> Path:
        parsed = urlparse(identifier)
        if parsed.scheme == 'file':
            path = Path(url2pathname(parsed.path))
        elif parsed.scheme and len(parsed.scheme) > 1:
            raise FetchFailed(identifier, f"unsupported scheme '{parsed.scheme}'")
        else:
            path = Path(identifier)

        if not path.is_absolute() and self.base_dir is not None:
            path = self.base_dir / path
        return path

    async def load(self, identifier: str) -> RawDocument:
        path = self.resolve_path(identifier)
        try:
            async with aiofiles.open(path, 'rb') as f:
                content = await f.read()
        except OSError as e:
            raise FetchFailed(identifier, f"cannot read {path}: {e.strerror or e}") from e

        logger.debug(f"Read {len(content)} bytes from {path}")
        return RawDocument(identifier=identifier, content=content)
