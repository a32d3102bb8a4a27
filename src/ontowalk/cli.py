"""
Command line entry point for walking an ontology
"""

import argparse
import asyncio
import sys
from typing import Optional

from .crawler import OntologyWalker, WalkConfig, create_fetcher, resolve_start
from .errors import OntowalkError
from .filters import DomainFilter
from .monitoring import LogManager, MetricsCollector, ProgressReporter
from .observers import Aggregate, CountNodes, PrintIdentifiers, PrintTriples, TripleFileWriter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ontowalk",
        description="Crawl linked RDF documents breadth-first from a start URI or file"
    )
    parser.add_argument("start", help="Start identifier (http(s) URI, file:// URI or local path)")
    parser.add_argument("--mode", choices=("triples", "uris"), default="triples",
                        help="Print every triple, or only visited identifiers")
    parser.add_argument("--output", help="Also append observed triples to this N-Triples file")
    parser.add_argument("--max-nodes", type=int, help="Stop after this many identifiers")
    parser.add_argument("--max-depth", type=int, help="Do not follow links beyond this depth")
    parser.add_argument("--deadline", type=float, help="Stop after this many seconds")
    parser.add_argument("--concurrency", type=int, default=1, help="Concurrent fetches per layer")
    parser.add_argument("--timeout", type=float, default=30.0, help="Per-request timeout in seconds")
    parser.add_argument("--allow-domain", action="append", default=[],
                        help="Only observe and follow URI objects on this host (repeatable)")
    parser.add_argument("--block-domain", action="append", default=[],
                        help="Never observe or follow URI objects on this host (repeatable)")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default WARNING)")
    parser.add_argument("--log-dir", help="Directory for log files and the final metrics report")
    return parser


async def run(args: argparse.Namespace, config: WalkConfig, log_manager: LogManager = None) -> int:
    counter = CountNodes()
    observers = [PrintIdentifiers() if args.mode == "uris" else PrintTriples(), counter]
    if args.output:
        observers.append(TripleFileWriter(args.output))

    triple_filter = None
    if args.allow_domain or args.block_domain:
        triple_filter = DomainFilter(args.allow_domain, args.block_domain)

    start = resolve_start(args.start)
    metrics = MetricsCollector()
    async with create_fetcher(start, config) as fetcher:
        walker = OntologyWalker(fetcher, config, metrics)
        await walker.crawl(start, Aggregate(*observers), triple_filter)

    report = ProgressReporter(metrics).get_final_report()
    error_handler = getattr(fetcher, 'error_handler', None)
    if error_handler is not None:
        report['fetch_errors'] = error_handler.get_error_summary()
        report['fetch_errors']['identifiers'] = error_handler.get_failed_identifiers()

    crawl_metrics = report['final_snapshot']['crawl_metrics']
    performance = report['performance_summary']
    print(
        f"\n{counter.count} nodes observed, {crawl_metrics['fetch_failures']} failed, "
        f"{crawl_metrics['triples_observed']} triples "
        f"in {performance['total_runtime_seconds']:.1f}s",
        file=sys.stderr
    )

    if log_manager is not None and log_manager.log_dir is not None:
        log_manager.export_metrics_json(report)
    return 0


def main(argv: Optional[list] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        log_manager = LogManager(log_dir=args.log_dir, log_level=args.log_level)
        config = WalkConfig(
            max_nodes=args.max_nodes,
            max_depth=args.max_depth,
            deadline=args.deadline,
            concurrency=args.concurrency,
            request_timeout=args.timeout
        )
    except ValueError as e:
        parser.error(str(e))

    try:
        return asyncio.run(run(args, config, log_manager))
    except OntowalkError as e:
        print(f"❌ Walk aborted: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n🛑 Walk stopped by user", file=sys.stderr)
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
