"""
Core percolation model on an N-by-N grid of sites.

Sites are addressed with 1-based (row, col) pairs and stored in a flat
0-based open-state table. A union-find structure over N*N + 2 elements tracks
connectivity; the two extra elements are a virtual TOP node, which every
opened top-row site joins, and a virtual BOTTOM node.

BOTTOM is allocated but never joined. percolates() scans the bottom row for an
open site connected to TOP instead, so a bottom-row site reachable only through
other bottom-row sites is never reported as full.
"""

import numpy as np

from .errors import InvalidSize, SizeOverflow, OutOfRange
from .union_find import WeightedQuickUnion

# Largest linear index the open-state and union-find tables may address
INDEX_MAX = int(np.iinfo(np.int32).max)


class PercolationGrid:
    """
    Percolation system of size N x N, with all sites initially blocked.

    Example:
        grid = PercolationGrid(3)
        grid.open(1, 1)
        grid.open(2, 1)
        grid.open(3, 1)
        grid.percolates()   # True
    """

    def __init__(self, n: int):
        """
        Create an N-by-N grid with all sites blocked.

        Args:
            n: Number of rows and columns

        Raises:
            InvalidSize: if n <= 0
            SizeOverflow: if n*n cannot be indexed by 32-bit integers
        """
        if n <= 0:
            raise InvalidSize(f"Provided size ({n}) is not positive.")
        if INDEX_MAX // n < n:
            raise SizeOverflow(
                f"Provided size ({n}) is too big for N*N to be indexed by integers."
            )

        self.n = n
        self._open = np.zeros(n * n, dtype=bool)
        self._uf = WeightedQuickUnion(n * n + 2)
        self.top = n * n
        self.bottom = self.top + 1

    def index(self, row: int, col: int) -> int:
        """
        The linearized 0-based index of the 1-based (row, col) position.

        No bounds checking is done here; callers validate first.
        """
        return (row - 1) * self.n + (col - 1)

    def _validate(self, value: int) -> None:
        if value <= 0 or value > self.n:
            raise OutOfRange(f"Value {value} is out of bounds (1 to {self.n}).")

    def _is_open(self, row: int, col: int) -> bool:
        return bool(self._open[self.index(row, col)])

    def open(self, row: int, col: int) -> None:
        """
        Open site (row, col) if it is not open already.

        The newly opened site is joined with TOP when it is in the first row,
        and with each open neighbour above, left, right and below.

        Raises:
            OutOfRange: if row or col is outside 1..N
        """
        self._validate(row)
        self._validate(col)
        if self._is_open(row, col):
            return

        idx = self.index(row, col)
        self._open[idx] = True

        if row == 1:
            self._uf.union(idx, self.top)
        elif self._is_open(row - 1, col):
            self._uf.union(idx, self.index(row - 1, col))

        if col > 1 and self._is_open(row, col - 1):
            self._uf.union(idx, self.index(row, col - 1))

        if col < self.n and self._is_open(row, col + 1):
            self._uf.union(idx, self.index(row, col + 1))

        if row < self.n and self._is_open(row + 1, col):
            self._uf.union(idx, self.index(row + 1, col))

    def is_open(self, row: int, col: int) -> bool:
        """
        Return True if site (row, col) is open.

        Raises:
            OutOfRange: if row or col is outside 1..N
        """
        self._validate(row)
        self._validate(col)
        return self._is_open(row, col)

    def is_full(self, row: int, col: int) -> bool:
        """
        Return True if site (row, col) is full, i.e. open and connected to an
        open site in the top row.

        Raises:
            OutOfRange: if row or col is outside 1..N
        """
        self._validate(row)
        self._validate(col)
        return self._is_open(row, col) and self._uf.connected(self.index(row, col), self.top)

    def percolates(self) -> bool:
        """
        Return True if the system percolates, i.e. some open site in the
        bottom row is connected to the top row.
        """
        start = self.index(self.n, 1)
        stop = self.index(self.n, self.n) + 1
        for idx in np.flatnonzero(self._open[start:stop]) + start:
            if self._uf.connected(int(idx), self.top):
                return True
        return False

    def number_of_open_sites(self) -> int:
        """Number of sites opened so far."""
        return int(np.count_nonzero(self._open))

    def __repr__(self) -> str:
        return (f"PercolationGrid(n={self.n}, open_sites={self.number_of_open_sites()}, "
                f"percolates={self.percolates()})")
