"""
Round-based path enumeration over a cave graph.

Each round replaces every unsettled path in the frontier with all of its
policy-approved one-step extensions. Paths that have reached the end
node are carried forward unchanged. Enumeration halts once every path is
settled, and aborts if the round ceiling is reached first.
"""

import logging
from dataclasses import dataclass

from ..config import EnumerationConfig
from ..graph import CaveGraph, Node, START
from .base import EnumerationResult, SafetyLimitExceeded, check_limits
from .paths import PathState, RevisitPolicy

logger = logging.getLogger(__name__)


@dataclass
class _RunStats:
    rounds: int = 0
    rejected: int = 0
    dead_ends: int = 0


def enumerate_paths(
    graph: CaveGraph,
    policy: RevisitPolicy | str,
    config: EnumerationConfig | None = None,
) -> set[tuple[str, ...]]:
    """
    Enumerate every path from start to end under a revisit policy.

    Args:
        graph: Cave graph to walk (borrowed read-only)
        policy: RevisitPolicy member or its value ("strict"/"relaxed")
        config: Limits and dead-end handling (None = defaults)

    Returns:
        Set of paths, each an ordered tuple of node labels

    Raises:
        SafetyLimitExceeded: If the frontier is still active at max_rounds

    Example:
        >>> graph = CaveGraph.from_lines(["start-A", "A-end"])
        >>> enumerate_paths(graph, "strict")
        {('start', 'A', 'end')}
    """
    frontier, _ = _run(graph, RevisitPolicy.coerce(policy), config or EnumerationConfig())
    return {path.labels() for path in frontier}


def count_paths(
    graph: CaveGraph,
    policy: RevisitPolicy | str,
    config: EnumerationConfig | None = None,
) -> int:
    """Number of distinct start-to-end paths under a revisit policy."""
    return len(enumerate_paths(graph, policy, config))


def traverse(
    graph: CaveGraph,
    policy: RevisitPolicy | str,
    config: EnumerationConfig | None = None,
) -> EnumerationResult:
    """
    Enumerate paths and report how the enumeration went.

    Args:
        graph: Cave graph to walk
        policy: RevisitPolicy member or its value
        config: Limits and dead-end handling (None = defaults)

    Returns:
        dict with:
            - paths: sorted list of label lists
            - path_count: number of distinct paths
            - policy: policy value applied
            - rounds: expansion rounds executed
            - rejected: candidate extensions refused
            - dead_ends: paths stuck at a non-end node with no outgoing edges

    Raises:
        SafetyLimitExceeded: If the frontier is still active at max_rounds
    """
    policy = RevisitPolicy.coerce(policy)
    frontier, stats = _run(graph, policy, config or EnumerationConfig())
    paths = sorted({path.labels() for path in frontier})

    return {
        "paths": [list(path) for path in paths],
        "path_count": len(paths),
        "policy": policy.value,
        "rounds": stats.rounds,
        "rejected": stats.rejected,
        "dead_ends": stats.dead_ends,
    }


def _run(
    graph: CaveGraph,
    policy: RevisitPolicy,
    config: EnumerationConfig,
) -> tuple[list[PathState], _RunStats]:
    """Drive rounds from the seed path until the frontier halts."""
    stats = _RunStats()
    frontier = [PathState.seed(Node(START))]

    while not all(_is_settled(graph, path, config) for path in frontier):
        try:
            check_limits(stats.rounds, config.max_rounds)
        except SafetyLimitExceeded:
            logger.error(
                "Frontier of %d paths still active after %d rounds (policy=%s)",
                len(frontier), stats.rounds, policy.value,
            )
            raise

        frontier = _expand(graph, frontier, policy, config, stats)
        stats.rounds += 1
        logger.debug("Round %d: %d paths in frontier", stats.rounds, len(frontier))

    if config.parks_dead_ends:
        stats.dead_ends = sum(1 for path in frontier if not path.last.is_end)

    logger.info(
        "Halted after %d rounds with %d paths (policy=%s)",
        stats.rounds, len(frontier), policy.value,
    )
    return frontier, stats


def _is_settled(graph: CaveGraph, path: PathState, config: EnumerationConfig) -> bool:
    """A path is settled once no further round can change it."""
    if path.last.is_end:
        return True
    return config.parks_dead_ends and not graph.neighbors(path.last)


def _expand(
    graph: CaveGraph,
    frontier: list[PathState],
    policy: RevisitPolicy,
    config: EnumerationConfig,
    stats: _RunStats,
) -> list[PathState]:
    """Build the next frontier from the current one."""
    next_frontier: list[PathState] = []

    for path in frontier:
        neighbors = graph.neighbors(path.last)

        if not neighbors:
            if path.last.is_end or config.parks_dead_ends:
                next_frontier.append(path)
            else:
                stats.dead_ends += 1
            continue

        for node in neighbors:
            extended = path.try_append(node, policy, config.max_visits)
            if extended is None:
                stats.rejected += 1
            else:
                next_frontier.append(extended)

    return next_frontier
