"""
Ontology Walker - breadth-first crawl over linked RDF documents
"""

import time
import asyncio
import logging
from typing import List, Optional, Sequence, Tuple
from urllib.parse import urlparse
from pathlib import Path

from ..fetching import DocumentFetcher, FetchResult, FileFetcher, WebFetcher
from ..filters import TripleFilter, as_filter
from ..monitoring import MetricsCollector, ProgressReporter
from ..observers import Aggregate, TripleObserver, as_observer
from ..rdf import TermKind, Triple, Uri, kind_of, term_as
from .config import WalkConfig
from .frontier import Frontier

logger = logging.getLogger(__name__)


class _WalkStopped(Exception):
    """A configured bound or the cancellation event ended the walk early"""


class OntologyWalker:
    """
    Walks a graph of RDF documents by following URIs that appear as the
    objects of triples. Each successfully fetched node is handed, after
    filtering, to an observer; the walk keeps a closed list so no
    identifier is fetched or observed twice.

    Fringe and closed list belong to a single ``crawl`` call, so one walker
    can run several crawls, even concurrently.
    """

    def __init__(self, fetcher: DocumentFetcher, config: WalkConfig = None,
                 metrics_collector: Optional[MetricsCollector] = None):
        self.fetcher = fetcher
        self.config = config or WalkConfig()
        self.metrics_collector = metrics_collector
        self.observers: List[TripleObserver] = []
        self.triple_filter: TripleFilter = as_filter(None)

    def add_observer(self, observer) -> "OntologyWalker":
        """Register an observer used when ``crawl`` is given none"""
        self.observers.append(as_observer(observer))
        return self

    def set_filter(self, triple_filter) -> "OntologyWalker":
        """Set the filter used when ``crawl`` is given none"""
        self.triple_filter = as_filter(triple_filter)
        return self

    def _resolve_observer(self, observer) -> TripleObserver:
        if observer is not None:
            return as_observer(observer)
        if len(self.observers) == 1:
            return self.observers[0]
        if self.observers:
            return Aggregate(*self.observers)
        raise ValueError("An observer is required: pass one to crawl() or register it with add_observer()")

    async def crawl(self, start_identifier: str, observer=None, triple_filter=None,
                    cancel_event: Optional[asyncio.Event] = None) -> None:
        """Walk the graph reachable from ``start_identifier``

        Results surface only through the observer. Documents that cannot be
        fetched are skipped; any other error aborts the walk and propagates.
        """
        observer = self._resolve_observer(observer)
        triple_filter = as_filter(triple_filter) if triple_filter is not None else self.triple_filter

        frontier = Frontier()
        frontier.push(start_identifier, 0)
        deadline = time.monotonic() + self.config.deadline if self.config.deadline else None

        reporter = None
        if self.metrics_collector and self.config.report_interval:
            reporter = ProgressReporter(self.metrics_collector, self.config.report_interval)
            await reporter.start_reporting()

        logger.info(f"🕸️ Starting walk at {start_identifier}")
        try:
            while frontier:
                await self._walk_layer(frontier, observer, triple_filter, deadline, cancel_event)
        except _WalkStopped as stop:
            logger.warning(f"Walk from {start_identifier} stopped early: {stop}")
        finally:
            if reporter:
                await reporter.stop_reporting()

        logger.info(f"Walk from {start_identifier} finished: {len(frontier.closed)} identifiers visited")

    async def _walk_layer(self, frontier: Frontier, observer: TripleObserver, triple_filter: TripleFilter,
                          deadline: Optional[float], cancel_event: Optional[asyncio.Event]) -> None:
        """Visit every fringe entry of the current breadth-first layer"""
        claimed: List[Tuple[str, int]] = []
        limit_reached = False

        for identifier, depth in frontier.pop_layer():
            if frontier.is_closed(identifier):
                logger.debug(f"Skipping already visited {identifier}")
                if self.metrics_collector:
                    self.metrics_collector.record_duplicate_skipped(identifier)
                continue

            if self.config.max_nodes is not None and len(frontier.closed) >= self.config.max_nodes:
                limit_reached = True
                break

            frontier.claim(identifier)
            claimed.append((identifier, depth))

        if self.config.concurrency == 1:
            for identifier, depth in claimed:
                self._check_cancelled(cancel_event)
                result = await self._fetch(identifier, deadline)
                await self._handle_result(result, depth, frontier, observer, triple_filter)
        else:
            await self._visit_concurrently(claimed, frontier, observer, triple_filter, deadline, cancel_event)

        if limit_reached:
            raise _WalkStopped(f"max_nodes ({self.config.max_nodes}) reached")

    async def _visit_concurrently(self, claimed: List[Tuple[str, int]], frontier: Frontier,
                                  observer: TripleObserver, triple_filter: TripleFilter,
                                  deadline: Optional[float], cancel_event: Optional[asyncio.Event]) -> None:
        """Fetch a layer concurrently, then observe and expand in fringe order"""
        semaphore = asyncio.Semaphore(self.config.concurrency)

        async def bounded_fetch(identifier: str) -> FetchResult:
            async with semaphore:
                return await self._fetch(identifier, deadline)

        tasks = [asyncio.ensure_future(bounded_fetch(identifier)) for identifier, _ in claimed]
        try:
            for (identifier, depth), task in zip(claimed, tasks):
                self._check_cancelled(cancel_event)
                result = await task
                await self._handle_result(result, depth, frontier, observer, triple_filter)
        finally:
            for task in tasks:
                if not task.done():
                    task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)

    async def _fetch(self, identifier: str, deadline: Optional[float]) -> FetchResult:
        if deadline is None:
            return await self.fetcher.fetch(identifier)

        remaining = deadline - time.monotonic()
        if remaining <= 0:
            raise _WalkStopped(f"deadline of {self.config.deadline}s reached")
        try:
            return await asyncio.wait_for(self.fetcher.fetch(identifier), timeout=remaining)
        except asyncio.TimeoutError:
            raise _WalkStopped(f"deadline of {self.config.deadline}s reached while fetching {identifier}")

    @staticmethod
    def _check_cancelled(cancel_event: Optional[asyncio.Event]) -> None:
        if cancel_event is not None and cancel_event.is_set():
            raise _WalkStopped("cancelled")

    async def _handle_result(self, result: FetchResult, depth: int, frontier: Frontier,
                             observer: TripleObserver, triple_filter: TripleFilter) -> None:
        """Filter, observe and expand one fetched node"""
        identifier = result.identifier

        if not result.ok:
            logger.warning(f"Skipping {identifier}: {result.error}")
            if self.metrics_collector:
                self.metrics_collector.record_fetch_failure(identifier, result.error)
            return

        filtered = tuple(t for t in result.triples if triple_filter.matches(t))
        await observer.observe(identifier, filtered)

        appended = 0
        if self.config.max_depth is None or depth < self.config.max_depth:
            appended = frontier.extend(self.discovered_identifiers(filtered), depth + 1)

        logger.info(
            f"Visited ({len(frontier.closed)}): {identifier} - "
            f"{len(filtered)}/{len(result.triples)} triples, {appended} identifiers queued"
        )

        if self.metrics_collector:
            self.metrics_collector.record_node_visited(
                identifier, len(result.triples), len(filtered), result.response_time
            )
            self.metrics_collector.record_identifiers_enqueued(appended)
            self.metrics_collector.update_fringe_size(len(frontier))

    @staticmethod
    def discovered_identifiers(batch: Sequence[Triple]) -> List[str]:
        """URI objects of ``batch`` in order, duplicates kept"""
        return [
            term_as(t.object, Uri).value
            for t in batch
            if kind_of(t.object) is TermKind.URI
        ]


def resolve_start(start_identifier: str) -> str:
    """Turn a local path into an absolute ``file://`` URI; URIs are returned unchanged

    Decoders resolve links in a document against its URI, so a start given as
    a path would never match the ``file://`` links that lead back to it.
    """
    # One-letter schemes are Windows drive letters
    if len(urlparse(start_identifier).scheme) > 1:
        return start_identifier
    return Path(start_identifier).resolve().as_uri()


def create_fetcher(start_identifier: str, config: WalkConfig = None) -> DocumentFetcher:
    """Pick a fetcher for an identifier: web for http(s), filesystem otherwise"""
    config = config or WalkConfig()
    if urlparse(start_identifier).scheme.lower() in ('http', 'https'):
        return WebFetcher(
            request_timeout=config.request_timeout,
            user_agent=config.user_agent,
            retry_config=config.retry
        )
    return FileFetcher()


async def crawl(start_identifier: str, observer, triple_filter=None, *,
                fetcher: DocumentFetcher = None, config: WalkConfig = None,
                metrics_collector: Optional[MetricsCollector] = None,
                cancel_event: Optional[asyncio.Event] = None) -> None:
    """Walk from ``start_identifier``, creating and closing a fetcher if none is given

    Without a fetcher, a start given as a local path is walked as its
    ``file://`` URI.
    """
    if fetcher is not None:
        walker = OntologyWalker(fetcher, config, metrics_collector)
        await walker.crawl(start_identifier, observer, triple_filter, cancel_event)
        return

    start_identifier = resolve_start(start_identifier)
    async with create_fetcher(start_identifier, config) as own_fetcher:
        walker = OntologyWalker(own_fetcher, config, metrics_collector)
        await walker.crawl(start_identifier, observer, triple_filter, cancel_event)


def walk(start_identifier: str, observer, triple_filter=None, **kwargs) -> None:
    """Blocking form of ``crawl`` for code outside an event loop"""
    asyncio.run(crawl(start_identifier, observer, triple_filter, **kwargs))
