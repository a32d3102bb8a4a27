"""
Metrics, progress reporting and log setup tests
"""

import json
import logging

import pytest

from ontowalk.monitoring import LogManager, MetricsCollector, ProgressReporter


@pytest.fixture
def metrics():
    collector = MetricsCollector()
    collector.record_node_visited("http://example.org/a", triples_fetched=4, triples_observed=3, response_time=0.2)
    collector.record_node_visited("/data/local.ttl", triples_fetched=2, triples_observed=2, response_time=0.4)
    collector.record_fetch_failure("http://example.org/b", "HTTP 404")
    collector.record_duplicate_skipped("http://example.org/a")
    collector.record_identifiers_enqueued(5)
    collector.update_fringe_size(2)
    return collector


def test_collector_counts(metrics):
    crawl_metrics = metrics.crawl_metrics

    assert crawl_metrics.nodes_visited == 2
    assert crawl_metrics.fetch_failures == 1
    assert crawl_metrics.duplicates_skipped == 1
    assert crawl_metrics.identifiers_enqueued == 5
    assert crawl_metrics.fringe_size == 2
    assert (crawl_metrics.triples_fetched, crawl_metrics.triples_observed) == (6, 5)
    assert crawl_metrics.success_rate == pytest.approx(200 / 3)
    assert crawl_metrics.avg_response_time == pytest.approx(0.3)


def test_collector_groups_by_domain(metrics):
    assert set(metrics.domain_metrics) == {"example.org", "local"}
    example = metrics.domain_metrics["example.org"]
    assert (example.nodes_visited, example.fetch_failures) == (1, 1)
    assert example.success_rate == 50.0


def test_snapshot(metrics):
    snapshot = metrics.get_current_snapshot()

    assert snapshot["crawl_metrics"]["nodes_visited"] == 2
    assert {"process_memory_mb", "threads", "open_files"} <= set(snapshot["system_metrics"])
    assert snapshot["domain_metrics"]["local"]["triples_observed"] == 2

    metrics.store_historical_snapshot()
    assert len(metrics.metrics_history) == 1


def test_final_report(metrics):
    report = ProgressReporter(metrics).get_final_report()

    summary = report["performance_summary"]
    assert summary["duplication_rate"] == pytest.approx(25.0)
    assert summary["triples_per_node"] == 2.5
    assert {entry["domain"] for entry in report["domain_summary"]} == {"example.org", "local"}


def test_progress_report_is_logged(metrics, caplog):
    with caplog.at_level(logging.INFO, logger="ontowalk.monitoring.progress_reporter"):
        ProgressReporter(metrics).log_progress_report()

    assert "2 nodes, 1 failed, 2 pending, 5 triples observed" in caplog.text


@pytest.mark.asyncio
async def test_reporter_start_and_stop(metrics):
    reporter = ProgressReporter(metrics, report_interval=60)

    await reporter.start_reporting()
    assert reporter.reporting_task is not None
    await reporter.stop_reporting()

    assert reporter.reporting_task is None


def test_log_manager_rejects_unknown_level(restore_logging):
    with pytest.raises(ValueError):
        LogManager(log_level="CHATTY")


def test_log_manager_writes_files(tmp_path, restore_logging):
    manager = LogManager(log_dir=tmp_path / "logs", log_level="debug")
    logging.getLogger("ontowalk.test").warning("written to disk")

    for handler in logging.getLogger().handlers:
        handler.flush()

    log_files = {path.name.split("_")[0] for path in (tmp_path / "logs").iterdir()}
    assert log_files == {"ontowalk", "errors"}

    exported = manager.export_metrics_json({"nodes_visited": 3}, "metrics.json")
    assert json.loads(exported.read_text()) == {"nodes_visited": 3}
