"""
Unit Tests for the disjoint-set partition (src/spatial/union_find.py)
"""

import pytest

from src.spatial.union_find import DisjointSet


class TestDisjointSet:
    """Test find/union behaviour."""

    def test_initial_sets_are_singletons(self):
        """Every index starts as its own root."""
        uf = DisjointSet(4)

        assert len(uf) == 4
        assert [uf.find(i) for i in range(4)] == [0, 1, 2, 3]

    def test_union_attaches_second_root_under_first(self):
        """union(i, j) makes the root of i the root of j."""
        uf = DisjointSet(3)
        uf.union(2, 1)

        assert uf.parent[1] == 2
        assert uf.find(1) == 2

    def test_union_is_transitive(self):
        """Chained unions end up in one set."""
        uf = DisjointSet(5)
        uf.union(0, 1)
        uf.union(1, 2)
        uf.union(3, 4)

        assert uf.connected(0, 2)
        assert uf.connected(3, 4)
        assert not uf.connected(2, 3)

    def test_find_compresses_paths(self):
        """After find, every node on the path points straight at the root."""
        uf = DisjointSet(4)
        # Build a chain 3 -> 2 -> 1 -> 0 by hand
        uf.parent = [0, 0, 1, 2]

        assert uf.find(3) == 0
        assert uf.parent == [0, 0, 0, 0]

    def test_union_same_set_is_noop(self):
        """Uniting two members of one set changes nothing."""
        uf = DisjointSet(3)
        uf.union(0, 1)
        before = list(uf.parent)
        uf.union(1, 0)

        assert uf.parent == before

    def test_groups_ordered_by_first_member(self):
        """Groups come out ordered by their smallest index."""
        uf = DisjointSet(6)
        uf.union(5, 1)
        uf.union(4, 0)
        uf.union(2, 3)

        assert list(uf.groups().values()) == [[0, 4], [1, 5], [2, 3]]

    def test_empty(self):
        """A zero-sized set has no groups."""
        assert DisjointSet(0).groups() == {}

    def test_negative_size_rejected(self):
        """Negative sizes raise ValueError."""
        with pytest.raises(ValueError):
            DisjointSet(-1)
