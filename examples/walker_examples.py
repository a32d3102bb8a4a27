#!/usr/bin/env python3
"""
Ontology walker examples
Demonstrates observers, filters and the builder
"""

import asyncio

from ontowalk import (
    Aggregate, CollectIdentifiers, CollectTriplesIf, CountNodes, Literal, WalkConfig,
    PredicateFilter, WalkerBuilder, crawl,
)
from ontowalk.observers import PrintIdentifiers

FOAF_START = 'http://xmlns.com/foaf/spec/index.rdf'
RDFS_SUBCLASS = 'http://www.w3.org/2000/01/rdf-schema#subClassOf'
RDFS_LABEL = 'http://www.w3.org/2000/01/rdf-schema#label'


async def basic_example():
    """Example 1: Print the order in which documents are visited"""
    print("📝 Example 1: Visit Order")
    print("-" * 30)

    visited = []
    await crawl(FOAF_START, Aggregate(PrintIdentifiers(), CollectIdentifiers(visited)),
                config=WalkConfig(max_nodes=10))
    print(f"✅ Completed: {len(visited)} documents\n")


async def filtered_example():
    """Example 2: Follow subclass links and collect the labels along the way"""
    print("🔎 Example 2: Filtered Walk")
    print("-" * 30)

    labels = []
    counter = CountNodes()
    walker = (WalkerBuilder()
              .max_nodes(20)
              .with_filter(PredicateFilter([RDFS_SUBCLASS, RDFS_LABEL]))
              .with_observer(CollectTriplesIf(labels, lambda t: isinstance(t.object, Literal)))
              .with_observer(counter)
              .build())

    async with walker.fetcher:
        await walker.crawl(FOAF_START)
    print(f"✅ {counter.count} nodes, {len(labels)} labels\n")


async def bounded_example():
    """Example 3: Concurrent walk bounded by depth and time, with metrics"""
    print("🕸️ Example 3: Bounded Concurrent Walk")
    print("-" * 30)

    walker = (WalkerBuilder()
              .max_depth(2)
              .deadline(60)
              .concurrency(4)
              .with_printing(identifiers_only=True)
              .with_monitoring()
              .build())

    async with walker.fetcher:
        await walker.crawl(FOAF_START)

    metrics = walker.metrics_collector.crawl_metrics
    print(f"✅ {metrics.nodes_visited} visited, {metrics.fetch_failures} failed, "
          f"{metrics.duplicates_skipped} duplicates skipped\n")


async def main():
    print("🌿 Ontology Walker Examples")
    print("=" * 40)

    await basic_example()
    await filtered_example()
    await bounded_example()


if __name__ == "__main__":
    asyncio.run(main())
