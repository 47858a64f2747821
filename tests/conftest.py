"""
Pytest fixtures for cave graph tests.

Provides:
- Edge lists for the small, medium and large example cave systems
- Built CaveGraph fixtures for each
- A parametrized fixture spanning every example graph
"""

import pytest

from cave_graph.graph import CaveGraph

SMALL_EDGES = [
    "start-A",
    "start-b",
    "A-c",
    "A-b",
    "b-d",
    "A-end",
    "b-end",
]

MEDIUM_EDGES = [
    "dc-end",
    "HN-start",
    "start-kj",
    "dc-start",
    "dc-HN",
    "LN-dc",
    "HN-end",
    "kj-sa",
    "kj-HN",
    "kj-dc",
]

LARGE_EDGES = [
    "fs-end",
    "he-DX",
    "fs-he",
    "start-DX",
    "pj-DX",
    "end-zg",
    "zg-sl",
    "zg-pj",
    "pj-he",
    "RW-he",
    "fs-DX",
    "pj-RW",
    "zg-RW",
    "start-pj",
    "he-WI",
    "zg-he",
    "pj-fs",
    "start-RW",
]

EXAMPLE_EDGES = {
    "small": SMALL_EDGES,
    "medium": MEDIUM_EDGES,
    "large": LARGE_EDGES,
}


@pytest.fixture
def small_graph():
    """Seven-edge example: 10 strict paths, 36 relaxed."""
    return CaveGraph.from_lines(SMALL_EDGES)


@pytest.fixture
def medium_graph():
    """Two-letter labels example: 19 strict paths, 103 relaxed."""
    return CaveGraph.from_lines(MEDIUM_EDGES)


@pytest.fixture
def large_graph():
    """Eighteen-edge example: 226 strict paths, 3509 relaxed."""
    return CaveGraph.from_lines(LARGE_EDGES)


@pytest.fixture(params=sorted(EXAMPLE_EDGES))
def example_graph(request):
    """Each example graph in turn."""
    return CaveGraph.from_lines(EXAMPLE_EDGES[request.param])


@pytest.fixture
def write_input(tmp_path):
    """Write edge lines to a puzzle input file and return its path."""

    def _write(lines, name="input.txt"):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n")
        return path

    return _write
