"""
Graph model for cave systems.

Parses "A-B" edge tokens, classifies nodes from their labels, and stores
a directed adjacency where the start node is a pure source and the end
node is a pure sink.

Usage:
    graph = CaveGraph.from_lines(["start-A", "A-b", "b-end"])
    graph.neighbors("A")  # {Node("b")}
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import networkx as nx

logger = logging.getLogger(__name__)

START = "start"
END = "end"
EDGE_SEPARATOR = "-"

_LABEL_RE = re.compile(r"^[A-Za-z]+$")


class MalformedEdgeError(ValueError):
    """Raised when an edge token cannot be split into two node labels."""

    def __init__(self, token: str, reason: str, line_number: int | None = None):
        self.token = token
        self.line_number = line_number
        location = f" (line {line_number})" if line_number is not None else ""
        super().__init__(f"Malformed edge {token!r}{location}: {reason}")


@dataclass(frozen=True)
class NodeClass:
    """Attributes derived from a node label."""

    is_start: bool
    is_end: bool
    is_large: bool


def classify(label: str) -> NodeClass:
    """
    Classify a node label.

    Large nodes are those whose label equals its own uppercase form.
    Empty labels are not valid input.
    """
    return NodeClass(
        is_start=label == START,
        is_end=label == END,
        is_large=label == label.upper(),
    )


@dataclass(frozen=True)
class Node:
    """A cave, identified (and compared) by its label alone."""

    label: str

    @property
    def kind(self) -> NodeClass:
        return classify(self.label)

    @property
    def is_start(self) -> bool:
        return self.kind.is_start

    @property
    def is_end(self) -> bool:
        return self.kind.is_end

    @property
    def is_large(self) -> bool:
        return self.kind.is_large

    @property
    def is_small(self) -> bool:
        return not self.is_large

    def __str__(self):
        return self.label


@dataclass(frozen=True)
class Edge:
    """A directed connection between two caves."""

    source: Node
    target: Node

    def __str__(self):
        return f"Edge({self.source} -> {self.target})"


def parse_edge(token: str, line_number: int | None = None) -> tuple[str, str]:
    """
    Split an "A-B" token into its two labels.

    Raises:
        MalformedEdgeError: If the token lacks exactly one separator or a
            label is not alphabetic
    """
    parts = token.strip().split(EDGE_SEPARATOR)
    if len(parts) != 2:
        raise MalformedEdgeError(
            token, f"expected exactly one {EDGE_SEPARATOR!r} separator", line_number
        )

    left, right = (part.strip() for part in parts)
    for label in (left, right):
        if not _LABEL_RE.match(label):
            raise MalformedEdgeError(
                token, f"label {label!r} must be alphabetic", line_number
            )
    return left, right


def orient(u: str, v: str) -> list[Edge]:
    """
    Turn an undirected pair into directed edges.

    Start only ever leads out and end only ever leads in; any other pair
    is traversable both ways. A start-start or end-end pair yields no edges.
    """
    first, second = Node(u), Node(v)

    if first == second and (first.is_start or first.is_end):
        return []

    if second.is_start:
        first, second = second, first
    if first.is_end:
        first, second = second, first

    if first.is_start or second.is_end:
        return [Edge(first, second)]
    return [Edge(first, second), Edge(second, first)]


class CaveGraph:
    """
    Read-only directed adjacency over cave nodes.

    Backed by a frozen networkx DiGraph keyed by Node values, so duplicate
    edges collapse and the structure cannot change once built.
    """

    def __init__(self, digraph: nx.DiGraph):
        self._graph = nx.freeze(digraph)

    @classmethod
    def build(cls, pairs: Iterable[tuple[str, str]]) -> "CaveGraph":
        """Build a graph from undirected label pairs."""
        digraph = nx.DiGraph()
        for u, v in pairs:
            edges = orient(u, v)
            if not edges:
                logger.warning("Ignoring self-loop on reserved node %r", u)
            for edge in edges:
                digraph.add_edge(edge.source, edge.target)

        logger.debug(
            "Built cave graph with %d nodes and %d directed edges",
            digraph.number_of_nodes(),
            digraph.number_of_edges(),
        )
        return cls(digraph)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "CaveGraph":
        """Parse "A-B" lines (blank lines ignored) and build a graph."""
        pairs = [
            parse_edge(line, line_number)
            for line_number, line in enumerate(lines, start=1)
            if line.strip()
        ]
        return cls.build(pairs)

    @classmethod
    def from_file(cls, path: Path | str) -> "CaveGraph":
        """Load a puzzle input file with one edge token per line."""
        with open(path) as f:
            return cls.from_lines(f.read().splitlines())

    @property
    def digraph(self) -> nx.DiGraph:
        """The underlying frozen networkx graph."""
        return self._graph

    @property
    def nodes(self) -> set[Node]:
        return set(self._graph.nodes)

    @property
    def edges(self) -> set[Edge]:
        return {Edge(u, v) for u, v in self._graph.edges}

    def neighbors(self, label: str | Node) -> set[Node]:
        """Outgoing targets of a node; empty when it has none or is unknown."""
        node = label if isinstance(label, Node) else Node(label)
        if node not in self._graph:
            return set()
        return set(self._graph.successors(node))

    def __contains__(self, label: object) -> bool:
        node = label if isinstance(label, Node) else Node(str(label))
        return node in self._graph

    def __len__(self):
        return self._graph.number_of_nodes()

    def __repr__(self):
        return (
            f"CaveGraph(nodes={self._graph.number_of_nodes()}, "
            f"edges={self._graph.number_of_edges()})"
        )
