"""
Tests for path state and revisit policies.
"""

import pytest

from cave_graph.graph import Node
from cave_graph.handlers.paths import PathState, RevisitPolicy

START = Node("start")
END = Node("end")
A = Node("A")
b = Node("b")
c = Node("c")


def walk(policy, *nodes, max_visits=1000):
    """Append nodes one by one from a seeded path, stopping at the first rejection."""
    path = PathState.seed(START)
    for node in nodes:
        path = path.try_append(node, policy, max_visits)
        if path is None:
            return None
    return path


class TestRevisitPolicy:
    """Tests for RevisitPolicy.permits."""

    def test_first_visit_always_permitted(self):
        """A first visit is never refused."""
        for policy in RevisitPolicy:
            assert policy.permits(b, 1, 0)
            assert policy.permits(b, 1, 1)

    def test_large_nodes_never_rejected(self):
        """Policies never refuse large nodes."""
        for policy in RevisitPolicy:
            assert policy.permits(A, 50, 1)

    def test_strict_rejects_second_small_visit(self):
        """Strict refuses any second visit to a small node."""
        assert not RevisitPolicy.STRICT.permits(b, 2, 0)

    def test_relaxed_allows_one_second_visit(self):
        """Relaxed allows one second visit per path."""
        assert RevisitPolicy.RELAXED.permits(b, 2, 0)
        assert not RevisitPolicy.RELAXED.permits(b, 2, 1)
        assert not RevisitPolicy.RELAXED.permits(b, 3, 1)

    def test_coerce(self):
        """Members and their string values both resolve."""
        assert RevisitPolicy.coerce("strict") is RevisitPolicy.STRICT
        assert RevisitPolicy.coerce(RevisitPolicy.RELAXED) is RevisitPolicy.RELAXED

    def test_coerce_unknown(self):
        """Unknown policy names raise ValueError."""
        with pytest.raises(ValueError, match="Unknown policy"):
            RevisitPolicy.coerce("lenient")


class TestPathState:
    """Tests for PathState seeding and extension."""

    def test_seed(self):
        """A seeded path holds only the start node."""
        path = PathState.seed(START)
        assert path.nodes == (START,)
        assert path.first == path.last == START
        assert path.visit_count("start") == 1
        assert path.small_revisits == 0

    def test_append_leaves_parent_untouched(self):
        """Extensions are clones; the parent keeps its counts."""
        parent = walk(RevisitPolicy.STRICT, A)
        child = parent.try_append(b, RevisitPolicy.STRICT)

        assert child.labels() == ("start", "A", "b")
        assert child.visit_count(b) == 1
        assert parent.labels() == ("start", "A")
        assert parent.visit_count(b) == 0

    def test_rejection_leaves_parent_untouched(self):
        """A refused candidate leaves no trace on the parent."""
        parent = walk(RevisitPolicy.STRICT, b, A)
        assert parent.try_append(b, RevisitPolicy.STRICT) is None
        assert parent.visit_count(b) == 1
        assert parent.small_revisits == 0

    def test_small_revisits_counts_first_overflow_only(self):
        """Only the first second-visit of a small node uses the budget."""
        path = walk(RevisitPolicy.RELAXED, b, A, b)
        assert path.small_revisits == 1
        assert path.visit_count(b) == 2
        # A third visit, or a second visit to another small node, is refused
        assert path.try_append(b, RevisitPolicy.RELAXED) is None
        assert walk(RevisitPolicy.RELAXED, b, A, b, A, c, A, c) is None

    def test_large_node_revisits(self):
        """Large nodes revisit freely without using the budget."""
        path = walk(RevisitPolicy.STRICT, A, b, A, c, A)
        assert path.visit_count(A) == 3
        assert path.small_revisits == 0

    def test_visit_cap_rejects_unconditionally(self):
        """The visit cap applies even to large nodes."""
        assert walk(RevisitPolicy.RELAXED, A, A, max_visits=2) is not None
        assert walk(RevisitPolicy.RELAXED, A, A, A, max_visits=2) is None

    def test_visits_are_read_only(self):
        """Visit counts cannot be modified in place."""
        path = PathState.seed(START)
        with pytest.raises(TypeError):
            path.visits["start"] = 5

    def test_equality_by_node_sequence(self):
        """Paths compare and hash by their node sequence."""
        first = walk(RevisitPolicy.STRICT, A, END)
        second = walk(RevisitPolicy.RELAXED, A, END)
        assert first == second
        assert len({first, second}) == 1

    def test_render(self):
        """Rendering joins labels with the delimiter."""
        path = walk(RevisitPolicy.STRICT, A, b, END)
        assert path.render() == "start,A,b,end"
        assert path.render(" -> ") == "start -> A -> b -> end"
        assert str(path) == "start,A,b,end"
        assert len(path) == 4
