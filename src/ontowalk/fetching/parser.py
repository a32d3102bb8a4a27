import logging
from contextlib import contextmanager
from typing import List, Optional
from urllib.parse import urlparse

import rdflib
from rdflib import Graph
from rdflib.plugins.stores.memory import Memory
from rdflib.util import guess_format

from ..errors import FetchFailed
from ..rdf import Triple
from .result import RawDocument

logger = logging.getLogger(__name__)

MEDIA_TYPE_FORMATS = {
    'application/rdf+xml': 'xml',
    'application/xml': 'xml',
    'text/xml': 'xml',
    'text/turtle': 'turtle',
    'application/x-turtle': 'turtle',
    'application/turtle': 'turtle',
    'text/n3': 'n3',
    'text/rdf+n3': 'n3',
    'application/n-triples': 'nt',
    'application/ld+json': 'json-ld',
}

DEFAULT_FORMAT = 'xml'

ACCEPT_HEADER = (
    'application/rdf+xml, text/turtle;q=0.9, application/n-triples;q=0.9, '
    'application/ld+json;q=0.8, text/n3;q=0.7, application/xml;q=0.5, */*;q=0.1'
)


class _RecordingStore(Memory):
    """In-memory store that remembers asserted statements in arrival order"""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.statements = []

    def add(self, triple, context, quoted=False):
        # Quoted statements belong to N3 formulae, not to the document
        if not quoted:
            self.statements.append(triple)
        super().add(triple, context, quoted)


@contextmanager
def _lexical_literals():
    """Keep typed literals as written ("01", not "1") while decoding"""
    previous = rdflib.NORMALIZE_LITERALS
    rdflib.NORMALIZE_LITERALS = False
    try:
        yield
    finally:
        rdflib.NORMALIZE_LITERALS = previous


class RDFDocumentParser:
    """Decodes RDF documents into triples in decode order"""

    def __init__(self, default_format: str = DEFAULT_FORMAT):
        self.default_format = default_format

    def select_format(self, identifier: str, media_type: Optional[str] = None) -> str:
        """Pick an rdflib format from the media type, then the file extension"""
        if media_type:
            base_type = media_type.split(';')[0].strip().lower()
            if base_type in MEDIA_TYPE_FORMATS:
                return MEDIA_TYPE_FORMATS[base_type]

        path = urlparse(identifier).path or identifier
        return guess_format(path) or self.default_format

    def parse(self, document: RawDocument) -> List[Triple]:
        """Decode a document

        Raises FetchFailed when the decoder reports an error, and
        MalformedTerm when it yields a term of an unknown type.
        """
        rdf_format = self.select_format(document.identifier, document.media_type)
        store = _RecordingStore()
        graph = Graph(store=store)

        try:
            with _lexical_literals():
                graph.parse(data=document.content, format=rdf_format, publicID=document.identifier)
        except Exception as e:
            logger.error(f"Failed to parse {document.identifier} as {rdf_format}: {e}")
            raise FetchFailed(document.identifier, f"parsing error ({rdf_format}): {e}",
                              document.status_code) from e

        triples = [Triple.from_nodes(s, p, o) for s, p, o in store.statements]
        logger.debug(f"Decoded {len(triples)} triples from {document.identifier} ({rdf_format})")
        return triples
