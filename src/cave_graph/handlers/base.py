"""
Core handler infrastructure with safety limits and result types.

This module provides the foundation for the path enumeration handlers:
- Non-negotiable safety limits to prevent runaway enumeration
- The exception raised when a limit is breached
- TypedDict definitions for handler return types
"""

from typing import Any, TypedDict


# === TYPED RESULT DICTIONARIES ===
# These provide IDE support and documentation for handler return types


class EnumerationResult(TypedDict):
    """Result type for traverse()."""

    paths: list[list[str]]
    """Every completed path as a list of labels, sorted for stable output."""

    path_count: int
    """Number of distinct paths found."""

    policy: str
    """Revisit policy applied ("strict" or "relaxed")."""

    rounds: int
    """Expansion rounds executed before the frontier halted."""

    rejected: int
    """Candidate extensions refused by the policy or the visit limit."""

    dead_ends: int
    """Paths that reached a non-end node with no outgoing edges."""


class GraphSummaryResult(TypedDict):
    """Result type for describe()."""

    node_count: int
    """Total nodes in the graph."""

    edge_count: int
    """Total directed edges after orientation."""

    large_nodes: list[str]
    """Labels of revisitable (uppercase) nodes, sorted."""

    small_nodes: list[str]
    """Labels of quota-limited nodes, sorted."""

    density: float
    """Directed graph density."""

    end_reachable: bool
    """True if any directed route leads from start to end."""

    dead_ends: list[str]
    """Non-end nodes with no outgoing edges, sorted."""

    stats: dict[str, Any]
    """Degree statistics (max_out_degree, max_in_degree)."""


# === SAFETY LIMITS (Non-negotiable) ===
MAX_ROUNDS = 30  # Expansion rounds before the engine aborts
MAX_VISITS = 1000  # Visits to a single node within one path


class SafetyLimitExceeded(Exception):
    """Raised when enumeration would exceed safety limits."""

    pass


def check_limits(rounds: int, max_rounds: int = MAX_ROUNDS) -> None:
    """
    Check enumeration hasn't exceeded the round ceiling.

    Args:
        rounds: Rounds already executed
        max_rounds: Ceiling to enforce

    Raises:
        SafetyLimitExceeded: If the ceiling is reached
    """
    if rounds >= max_rounds:
        raise SafetyLimitExceeded(
            f"Enumeration still active after {rounds} rounds, exceeds limit {max_rounds}"
        )
