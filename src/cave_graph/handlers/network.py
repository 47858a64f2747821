"""
NetworkX-based graph diagnostics.

Summarizes a cave graph before enumeration: size, node classes, density,
dead ends and whether the end node can be reached at all.
"""

import networkx as nx

from ..graph import END, START, CaveGraph, Node
from .base import GraphSummaryResult


def describe(graph: CaveGraph) -> GraphSummaryResult:
    """
    Summarize the structure of a cave graph.

    Args:
        graph: Cave graph to inspect

    Returns:
        dict with:
            - node_count, edge_count: size after orientation
            - large_nodes, small_nodes: sorted labels by class
            - density: directed density
            - end_reachable: whether start has any route to end
            - dead_ends: non-end nodes with no outgoing edges
            - stats: max in/out degree

    Example:
        >>> summary = describe(CaveGraph.from_lines(["start-A", "A-end"]))
        >>> summary["end_reachable"]
        True
    """
    G = graph.digraph
    labels = sorted(node.label for node in G.nodes)

    return {
        "node_count": G.number_of_nodes(),
        "edge_count": G.number_of_edges(),
        "large_nodes": [label for label in labels if Node(label).is_large],
        "small_nodes": [label for label in labels if Node(label).is_small],
        "density": nx.density(G) if G.number_of_nodes() > 1 else 0.0,
        "end_reachable": end_reachable(graph),
        "dead_ends": sorted(
            node.label for node in G.nodes if not node.is_end and G.out_degree(node) == 0
        ),
        "stats": {
            "max_out_degree": max((d for _, d in G.out_degree()), default=0),
            "max_in_degree": max((d for _, d in G.in_degree()), default=0),
        },
    }


def end_reachable(graph: CaveGraph) -> bool:
    """True if any directed route leads from start to end."""
    G = graph.digraph
    start, end = Node(START), Node(END)
    if start not in G or end not in G:
        return False
    return nx.has_path(G, start, end)
