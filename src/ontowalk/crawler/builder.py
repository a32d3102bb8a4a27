"""
Walker Builder - Fluent API for building ontology walkers
"""

from typing import Optional

from ..error_handler import RetryConfig
from ..fetching import DocumentFetcher, WebFetcher
from ..filters import all_of, as_filter
from ..monitoring import MetricsCollector
from ..observers import PrintIdentifiers, PrintTriples, as_observer
from .config import WalkConfig
from .walker import OntologyWalker


class WalkerBuilder:
    """Builder for creating walkers with observers, filters and bounds"""

    def __init__(self, fetcher: Optional[DocumentFetcher] = None):
        self.fetcher = fetcher
        self._config = {}
        self.observers = []
        self.filters = []
        self._monitoring = False

    def max_nodes(self, count: int):
        """Stop after this many identifiers have been taken for fetching"""
        self._config['max_nodes'] = count
        return self

    def max_depth(self, depth: int):
        """Do not follow links beyond this depth (start node is depth 0)"""
        self._config['max_depth'] = depth
        return self

    def deadline(self, seconds: float):
        """Stop the walk after this many seconds"""
        self._config['deadline'] = seconds
        return self

    def concurrency(self, fetches: int):
        """Fetch up to this many documents of a layer at once"""
        self._config['concurrency'] = fetches
        return self

    def request_timeout(self, seconds: float):
        self._config['request_timeout'] = seconds
        return self

    def user_agent(self, user_agent: str):
        self._config['user_agent'] = user_agent
        return self

    def retries(self, max_attempts: int, base_delay: float = 1.0):
        """Configure retries of transient HTTP failures"""
        self._config['retry'] = RetryConfig(max_attempts=max_attempts, base_delay=base_delay)
        return self

    def with_fetcher(self, fetcher: DocumentFetcher):
        self.fetcher = fetcher
        return self

    def with_filter(self, triple_filter):
        """Add a filter; several filters must all accept a triple"""
        self.filters.append(as_filter(triple_filter))
        return self

    def with_observer(self, observer):
        self.observers.append(as_observer(observer))
        return self

    def with_printing(self, enable: bool = True, identifiers_only: bool = False):
        """Print triples (or only visited identifiers) to stdout"""
        if enable:
            self.observers.append(PrintIdentifiers() if identifiers_only else PrintTriples())
        return self

    def with_monitoring(self, enable: bool = True, report_interval: Optional[float] = None):
        """Collect walk metrics, optionally logging progress periodically"""
        self._monitoring = enable
        if enable and report_interval:
            self._config['report_interval'] = report_interval
        return self

    def build(self) -> OntologyWalker:
        """Build the configured walker"""
        config = WalkConfig(**self._config)

        fetcher = self.fetcher or WebFetcher(
            request_timeout=config.request_timeout,
            user_agent=config.user_agent,
            retry_config=config.retry
        )
        walker = OntologyWalker(
            fetcher,
            config,
            MetricsCollector() if self._monitoring else None
        )

        for observer in self.observers:
            walker.add_observer(observer)

        if len(self.filters) == 1:
            walker.set_filter(self.filters[0])
        elif self.filters:
            walker.set_filter(all_of(*self.filters))

        return walker
