"""
Disjoint-set partition used by the proximity grouping pass.

The parent table is a flat list of indices into the entity slice of a single
grouping pass. Nothing here holds entity references, so a fresh instance is
built for every pass.
"""

from __future__ import annotations

from typing import Dict, List


class DisjointSet:
    """
    Union-find over the index space ``0..n``.

    ``find`` compresses paths recursively. ``union`` attaches the second root
    under the first without any rank or size heuristic; interactive point
    counts keep the trees shallow enough.
    """

    __slots__ = ("parent",)

    def __init__(self, n: int):
        if n < 0:
            raise ValueError(f"DisjointSet size must be non-negative, got {n}")
        self.parent: List[int] = list(range(n))

    def __len__(self) -> int:
        return len(self.parent)

    def find(self, i: int) -> int:
        """Return the root of ``i``, pointing every visited node at it."""
        if self.parent[i] != i:
            self.parent[i] = self.find(self.parent[i])
        return self.parent[i]

    def union(self, i: int, j: int) -> None:
        """Merge the sets containing ``i`` and ``j``."""
        root_i = self.find(i)
        root_j = self.find(j)
        if root_i != root_j:
            self.parent[root_j] = root_i

    def connected(self, i: int, j: int) -> bool:
        return self.find(i) == self.find(j)

    def groups(self) -> Dict[int, List[int]]:
        """
        Return root -> member indices.

        Members are listed in ascending index order and groups are ordered by
        their smallest member, so the output only depends on the partition.
        """
        result: Dict[int, List[int]] = {}
        for i in range(len(self.parent)):
            result.setdefault(self.find(i), []).append(i)
        return result
