import time
import psutil
import logging
import threading
from datetime import datetime
from dataclasses import asdict
from typing import Dict, Optional, Any
from collections import deque
from urllib.parse import urlparse
from .metrics import CrawlMetrics, DomainMetrics, SystemMetrics

logger = logging.getLogger(__name__)


class MetricsCollector:
    """Collects and aggregates metrics over one or more walks"""

    def __init__(self):
        self.start_time = time.time()

        self.crawl_metrics = CrawlMetrics()
        self.system_metrics = SystemMetrics()
        self.domain_metrics: Dict[str, DomainMetrics] = {}

        self.metrics_history: deque = deque(maxlen=100)
        self.response_times: deque = deque(maxlen=100)
        self.initial_network = psutil.net_io_counters()

        self._lock = threading.Lock()

    def _domain(self, identifier: str) -> DomainMetrics:
        domain = urlparse(identifier).netloc.lower() or "local"
        if domain not in self.domain_metrics:
            self.domain_metrics[domain] = DomainMetrics(domain=domain)
        return self.domain_metrics[domain]

    def record_node_visited(self, identifier: str, triples_fetched: int, triples_observed: int,
                            response_time: float = 0.0):
        """Record a successfully fetched and observed node"""
        with self._lock:
            self.crawl_metrics.nodes_visited += 1
            self.crawl_metrics.triples_fetched += triples_fetched
            self.crawl_metrics.triples_observed += triples_observed
            self.response_times.append(response_time)

            domain_metric = self._domain(identifier)
            domain_metric.nodes_visited += 1
            domain_metric.triples_observed += triples_observed
            domain_metric.last_visited = datetime.now()

            self._update_calculated_metrics()

    def record_fetch_failure(self, identifier: str, error: Optional[str] = None):
        """Record a node whose document could not be fetched"""
        with self._lock:
            self.crawl_metrics.fetch_failures += 1
            self._domain(identifier).fetch_failures += 1
            self._update_calculated_metrics()

    def record_duplicate_skipped(self, identifier: str):
        """Record a fringe entry discarded because it was already visited"""
        with self._lock:
            self.crawl_metrics.duplicates_skipped += 1

    def record_identifiers_enqueued(self, count: int):
        with self._lock:
            self.crawl_metrics.identifiers_enqueued += count

    def update_fringe_size(self, size: int):
        with self._lock:
            self.crawl_metrics.fringe_size = size

    def collect_system_metrics(self):
        """Collect resource usage of this process and network traffic since start"""
        try:
            process = psutil.Process()
            self.system_metrics.cpu_percent = process.cpu_percent(interval=None)
            self.system_metrics.process_memory_mb = process.memory_info().rss / (1024 * 1024)
            self.system_metrics.memory_percent = process.memory_percent()
            self.system_metrics.threads = process.num_threads()
            self.system_metrics.open_files = process.num_fds() if hasattr(process, 'num_fds') else len(process.open_files())

            network = psutil.net_io_counters()
            if network and self.initial_network:
                self.system_metrics.network_sent_mb = (network.bytes_sent - self.initial_network.bytes_sent) / (1024 * 1024)
                self.system_metrics.network_recv_mb = (network.bytes_recv - self.initial_network.bytes_recv) / (1024 * 1024)

        except (OSError, psutil.Error) as e:
            logger.warning(f"Failed to collect system metrics: {e}")

    def _update_calculated_metrics(self):
        elapsed_time = time.time() - self.start_time

        if elapsed_time > 0:
            self.crawl_metrics.nodes_per_second = self.crawl_metrics.nodes_visited / elapsed_time

        total_attempts = self.crawl_metrics.nodes_visited + self.crawl_metrics.fetch_failures
        if total_attempts > 0:
            self.crawl_metrics.success_rate = (self.crawl_metrics.nodes_visited / total_attempts) * 100

        if self.response_times:
            self.crawl_metrics.avg_response_time = sum(self.response_times) / len(self.response_times)

        for domain_metric in self.domain_metrics.values():
            domain_attempts = domain_metric.nodes_visited + domain_metric.fetch_failures
            if domain_attempts > 0:
                domain_metric.success_rate = (domain_metric.nodes_visited / domain_attempts) * 100

    def get_current_snapshot(self) -> Dict[str, Any]:
        """Get current metrics snapshot"""
        with self._lock:
            self.collect_system_metrics()

            return {
                'timestamp': datetime.now().isoformat(),
                'uptime_seconds': time.time() - self.start_time,
                'crawl_metrics': asdict(self.crawl_metrics),
                'system_metrics': asdict(self.system_metrics),
                'domain_metrics': {
                    domain: asdict(metrics) for domain, metrics in self.domain_metrics.items()
                }
            }

    def store_historical_snapshot(self):
        self.metrics_history.append(self.get_current_snapshot())
