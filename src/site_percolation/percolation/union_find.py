"""
Weighted quick-union with path compression.

Array-backed disjoint-set forest used by PercolationGrid to track which
sites are connected. Parent and size tables are numpy int32 arrays so the
element count is bounded by the same index type as the grid.
"""

import numpy as np


class WeightedQuickUnion:
    """
    Disjoint sets over the elements 0..size-1.

    Each element starts in its own set. Unions link the root of the smaller
    tree under the root of the larger one, and find() halves the path it walks,
    so union/find/connected run in near-constant amortized time.

    Example:
        uf = WeightedQuickUnion(4)
        uf.union(0, 1)
        uf.connected(0, 1)   # True
        uf.count             # 3
    """

    def __init__(self, size: int):
        """
        Initialize size singleton sets.

        Args:
            size: Number of elements (must be positive)
        """
        if size <= 0:
            raise ValueError(f"Union-find size must be positive, got {size}")

        self.size = size
        self.parent = np.arange(size, dtype=np.int32)
        self._tree_size = np.ones(size, dtype=np.int32)
        self.count = size

    def _validate(self, p: int) -> None:
        if p < 0 or p >= self.size:
            raise IndexError(f"Element {p} is not between 0 and {self.size - 1}")

    def find(self, p: int) -> int:
        """Return the root of the set containing p."""
        self._validate(p)
        parent = self.parent
        while parent[p] != p:
            # Path halving: point p at its grandparent as we walk up
            parent[p] = parent[parent[p]]
            p = parent[p]
        return int(p)

    def union(self, p: int, q: int) -> bool:
        """
        Merge the sets containing p and q.

        Returns:
            True if two different sets were merged, False if p and q were
            already connected
        """
        root_p = self.find(p)
        root_q = self.find(q)
        if root_p == root_q:
            return False

        tree_size = self._tree_size
        if tree_size[root_p] < tree_size[root_q]:
            root_p, root_q = root_q, root_p
        self.parent[root_q] = root_p
        tree_size[root_p] += tree_size[root_q]
        self.count -= 1
        return True

    def connected(self, p: int, q: int) -> bool:
        """Return True if p and q are in the same set."""
        return self.find(p) == self.find(q)

    def component_size(self, p: int) -> int:
        """Number of elements in the set containing p."""
        return int(self._tree_size[self.find(p)])
