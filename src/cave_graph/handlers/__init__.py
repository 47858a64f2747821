"""
Path enumeration handlers.

This package provides the handlers that walk a cave graph:
- paths: immutable path state and the strict/relaxed revisit policies
- traversal: round-based enumeration with a hard round ceiling
- network: graph diagnostics via NetworkX

For limits and dead-end handling, import from cave_graph.config:
    from cave_graph.config import EnumerationConfig
"""

from .base import (
    MAX_ROUNDS,
    MAX_VISITS,
    SafetyLimitExceeded,
    check_limits,
    # Result TypedDicts for type hints
    EnumerationResult,
    GraphSummaryResult,
)
from .network import (
    describe,
    end_reachable,
)
from .paths import (
    PathState,
    RevisitPolicy,
)
from .traversal import (
    count_paths,
    enumerate_paths,
    traverse,
)

# Re-export EnumerationConfig for convenience
from ..config import EnumerationConfig

__all__ = [
    # Constants
    "MAX_ROUNDS",
    "MAX_VISITS",
    # Exceptions
    "SafetyLimitExceeded",
    # Base functions
    "check_limits",
    # Result TypedDicts
    "EnumerationResult",
    "GraphSummaryResult",
    # Configuration
    "EnumerationConfig",
    # Path state
    "PathState",
    "RevisitPolicy",
    # Traversal handlers
    "enumerate_paths",
    "count_paths",
    "traverse",
    # Network handlers
    "describe",
    "end_reachable",
]
