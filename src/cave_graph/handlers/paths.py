"""
Path state and revisit policies.

A PathState is an immutable snapshot of one partial path: the nodes
visited so far, how often each was visited, and how many small nodes
have already used up a second visit. Extending a path never touches the
parent; try_append returns a fresh PathState or None when the candidate
is refused.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from ..graph import Node
from .base import MAX_VISITS


class RevisitPolicy(str, Enum):
    """Rules for revisiting small nodes."""

    STRICT = "strict"  # No small node twice
    RELAXED = "relaxed"  # At most one small node twice per path

    def permits(self, node: Node, new_count: int, small_revisits: int) -> bool:
        """
        Decide whether a path may visit node for the new_count-th time.

        Large nodes are always permitted; the visit cap is enforced by
        PathState.try_append, not here.
        """
        if node.is_large or new_count <= 1:
            return True
        if self is RevisitPolicy.STRICT:
            return False
        return small_revisits < 1

    @classmethod
    def coerce(cls, value: "RevisitPolicy | str") -> "RevisitPolicy":
        """Accept a member or its string value."""
        try:
            return cls(value)
        except ValueError:
            choices = ", ".join(p.value for p in cls)
            raise ValueError(f"Unknown policy {value!r} (expected one of: {choices})") from None


@dataclass(frozen=True)
class PathState:
    """One partial or complete path through the cave graph."""

    nodes: tuple[Node, ...]
    visits: Mapping[str, int] = field(compare=False)
    small_revisits: int = field(default=0, compare=False)

    @classmethod
    def seed(cls, start: Node) -> "PathState":
        """Singleton path holding only the start node."""
        return cls(nodes=(start,), visits=MappingProxyType({start.label: 1}))

    @property
    def first(self) -> Node:
        return self.nodes[0]

    @property
    def last(self) -> Node:
        return self.nodes[-1]

    def visit_count(self, node: Node | str) -> int:
        label = node.label if isinstance(node, Node) else node
        return self.visits.get(label, 0)

    def try_append(
        self,
        node: Node,
        policy: RevisitPolicy,
        max_visits: int = MAX_VISITS,
    ) -> "PathState | None":
        """
        Extend the path by one node if the policy allows it.

        Args:
            node: Candidate next node
            policy: Revisit policy to apply
            max_visits: Unconditional cap on visits to any one node

        Returns:
            A new PathState ending at node, or None if the candidate is rejected
        """
        new_count = self.visit_count(node) + 1
        if new_count > max_visits:
            return None
        if not policy.permits(node, new_count, self.small_revisits):
            return None

        visits = dict(self.visits)
        visits[node.label] = new_count
        small_revisits = self.small_revisits
        # Only the first overflow of a given small node uses up the budget
        if node.is_small and new_count == 2:
            small_revisits += 1

        return PathState(
            nodes=self.nodes + (node,),
            visits=MappingProxyType(visits),
            small_revisits=small_revisits,
        )

    def labels(self) -> tuple[str, ...]:
        return tuple(node.label for node in self.nodes)

    def render(self, delimiter: str = ",") -> str:
        """Diagnostic form, e.g. "start,A,end"."""
        return delimiter.join(self.labels())

    def __len__(self):
        return len(self.nodes)

    def __str__(self):
        return self.render()
