import logging

import pytest

from graph_helpers import graph_fetcher, literal, link, uri
from ontowalk.fetching import MemoryFetcher


@pytest.fixture
def scenario_fetcher():
    """A links to B and holds a literal; B links back to A"""
    a, b = uri("A").value, uri("B").value
    return MemoryFetcher({
        a: [link("A", "B"), literal("A", "lit")],
        b: [link("B", "A")],
    })


@pytest.fixture
def layered_fetcher():
    """Three breadth-first layers with a cycle back to the root

    A -> B, C; B -> D; C -> E, D; D -> F, A; E -> F
    """
    return graph_fetcher({
        "A": ["B", "C"],
        "B": ["D"],
        "C": ["E", "D"],
        "D": ["F", "A"],
        "E": ["F"],
        "F": [],
    })


@pytest.fixture
def restore_logging():
    """Undo root logger changes made by LogManager"""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
