"""
Command line tests
"""

import json

import pytest

from ontowalk.cli import build_parser, main


@pytest.fixture
def documents(tmp_path):
    second = tmp_path / "second.ttl"
    first = tmp_path / "first.ttl"
    second.write_text('<http://example.org/s> <http://example.org/name> "second" .\n', encoding="utf-8")
    first.write_text(
        f"<http://example.org/s> <http://example.org/next> <{second.as_uri()}> .\n"
        '<http://example.org/s> <http://example.org/name> "first" .\n',
        encoding="utf-8"
    )
    return first, second


def test_parser_defaults():
    args = build_parser().parse_args(["start.ttl"])

    assert args.mode == "triples"
    assert args.concurrency == 1
    assert args.allow_domain == [] and args.block_domain == []


def test_prints_visited_identifiers(documents, capsys, restore_logging):
    first, second = documents

    assert main([str(first), "--mode", "uris", "--log-level", "ERROR"]) == 0

    captured = capsys.readouterr()
    assert captured.out.splitlines() == [first.resolve().as_uri(), second.as_uri()]
    assert "2 nodes observed, 0 failed, 3 triples" in captured.err


def test_prints_triples_and_writes_output(documents, tmp_path, capsys, restore_logging):
    first, second = documents
    output = tmp_path / "walk.nt"

    assert main([first.as_uri(), "--output", str(output), "--log-level", "ERROR"]) == 0

    out = capsys.readouterr().out
    assert f"http://example.org/s http://example.org/next {second.as_uri()}" in out
    assert "http://example.org/s http://example.org/name second" in out
    assert output.read_text(encoding="utf-8").count(" .\n") == 3


def test_max_depth_zero_stays_on_start(documents, capsys, restore_logging):
    first, _ = documents

    assert main([str(first), "--mode", "uris", "--max-depth", "0", "--log-level", "ERROR"]) == 0

    assert capsys.readouterr().out.splitlines() == [first.resolve().as_uri()]


def test_unreadable_start_is_skipped(tmp_path, capsys, restore_logging):
    assert main([str(tmp_path / "absent.ttl"), "--log-level", "ERROR"]) == 0

    assert "0 nodes observed, 1 failed" in capsys.readouterr().err


@pytest.mark.parametrize("argv", [
    ["start.ttl", "--max-nodes", "0"],
    ["start.ttl", "--log-level", "CHATTY"],
    ["start.ttl", "--mode", "everything"],
])
def test_invalid_arguments_exit(argv, restore_logging):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)

    assert excinfo.value.code == 2


@pytest.fixture
def cycle(tmp_path):
    """a.ttl and b.ttl link to each other with relative references"""
    (tmp_path / "a.ttl").write_text('<a.ttl> <http://example.org/next> <b.ttl> .\n', encoding="utf-8")
    (tmp_path / "b.ttl").write_text('<b.ttl> <http://example.org/next> <a.ttl> .\n', encoding="utf-8")
    return tmp_path


def test_relative_start_path_is_visited_once(cycle, monkeypatch, capsys, restore_logging):
    monkeypatch.chdir(cycle)

    assert main(["a.ttl", "--mode", "uris", "--log-level", "ERROR"]) == 0

    assert capsys.readouterr().out.splitlines() == [
        (cycle / "a.ttl").resolve().as_uri(),
        (cycle / "b.ttl").resolve().as_uri(),
    ]


def test_log_dir_receives_final_report(documents, tmp_path, capsys, restore_logging):
    first, _ = documents
    log_dir = tmp_path / "logs"

    assert main([str(first), "--mode", "uris", "--log-level", "ERROR", "--log-dir", str(log_dir)]) == 0

    exports = list(log_dir.glob("metrics_export_*.json"))
    assert len(exports) == 1
    report = json.loads(exports[0].read_text())
    assert report["final_snapshot"]["crawl_metrics"]["nodes_visited"] == 2
    assert report["performance_summary"]["triples_per_node"] == 1.5
    assert {entry["domain"] for entry in report["domain_summary"]} == {"local"}
