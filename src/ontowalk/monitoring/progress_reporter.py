import time
import asyncio
import logging
from typing import Dict, List, Any
from .metrics_collector import MetricsCollector

logger = logging.getLogger(__name__)


class ProgressReporter:
    """Reports walk progress while a crawl is running"""

    def __init__(self, metrics_collector: MetricsCollector, report_interval: float = 30.0):
        self.metrics = metrics_collector
        self.report_interval = report_interval
        self.reporting_task = None

    async def start_reporting(self):
        """Start periodic progress reporting"""
        self.reporting_task = asyncio.create_task(self._reporting_loop())

    async def stop_reporting(self):
        """Stop progress reporting"""
        if self.reporting_task:
            self.reporting_task.cancel()
            try:
                await self.reporting_task
            except asyncio.CancelledError:
                pass
            self.reporting_task = None

    async def _reporting_loop(self):
        while True:
            await asyncio.sleep(self.report_interval)
            self.log_progress_report()
            self.metrics.store_historical_snapshot()

    def log_progress_report(self):
        """Log a one-line progress summary"""
        crawl_metrics = self.metrics.get_current_snapshot()['crawl_metrics']
        logger.info(
            f"📊 Progress: {crawl_metrics['nodes_visited']} nodes, "
            f"{crawl_metrics['fetch_failures']} failed, "
            f"{crawl_metrics['fringe_size']} pending, "
            f"{crawl_metrics['triples_observed']} triples observed "
            f"({crawl_metrics['nodes_per_second']:.2f} nodes/s)"
        )

    def get_final_report(self) -> Dict[str, Any]:
        """Generate final walk report"""
        return {
            'final_snapshot': self.metrics.get_current_snapshot(),
            'performance_summary': self._generate_performance_summary(),
            'domain_summary': self._generate_domain_summary()
        }

    def _generate_performance_summary(self) -> Dict[str, Any]:
        crawl_metrics = self.metrics.crawl_metrics
        elapsed_time = time.time() - self.metrics.start_time
        total_dequeued = crawl_metrics.nodes_visited + crawl_metrics.fetch_failures + crawl_metrics.duplicates_skipped

        return {
            'total_runtime_seconds': elapsed_time,
            'nodes_per_minute': (crawl_metrics.nodes_visited / elapsed_time) * 60 if elapsed_time > 0 else 0,
            'success_rate': crawl_metrics.success_rate,
            'duplication_rate': (crawl_metrics.duplicates_skipped / total_dequeued * 100) if total_dequeued > 0 else 0,
            'triples_per_node': (crawl_metrics.triples_observed / crawl_metrics.nodes_visited) if crawl_metrics.nodes_visited > 0 else 0
        }

    def _generate_domain_summary(self) -> List[Dict[str, Any]]:
        return [
            {
                'domain': domain,
                'nodes_visited': metrics.nodes_visited,
                'fetch_failures': metrics.fetch_failures,
                'triples_observed': metrics.triples_observed,
                'success_rate': metrics.success_rate
            }
            for domain, metrics in self.metrics.domain_metrics.items()
        ]
