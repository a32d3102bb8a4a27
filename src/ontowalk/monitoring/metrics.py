"""
Metric records kept by the MetricsCollector
"""

from dataclasses import dataclass
from typing import Optional
from datetime import datetime


@dataclass
class CrawlMetrics:
    """Counters for one or more walks"""
    nodes_visited: int = 0
    nodes_per_second: float = 0.0
    fetch_failures: int = 0
    duplicates_skipped: int = 0
    fringe_size: int = 0
    identifiers_enqueued: int = 0
    triples_fetched: int = 0
    triples_observed: int = 0
    success_rate: float = 0.0
    avg_response_time: float = 0.0


@dataclass
class DomainMetrics:
    """Per-host counters; local files are grouped under "local\""""
    domain: str = ""
    nodes_visited: int = 0
    fetch_failures: int = 0
    triples_observed: int = 0
    success_rate: float = 0.0
    last_visited: Optional[datetime] = None


@dataclass
class SystemMetrics:
    """Resource usage of the walking process"""
    cpu_percent: float = 0.0
    process_memory_mb: float = 0.0
    memory_percent: float = 0.0
    threads: int = 0
    open_files: int = 0
    network_sent_mb: float = 0.0
    network_recv_mb: float = 0.0
