"""
Monitoring and observability modules
"""

from .metrics_collector import MetricsCollector
from .progress_reporter import ProgressReporter
from .log_manager import LogManager
from .metrics import CrawlMetrics, DomainMetrics, SystemMetrics

__all__ = [
    'MetricsCollector',
    'ProgressReporter',
    'LogManager',
    'CrawlMetrics',
    'SystemMetrics',
    'DomainMetrics'
]
