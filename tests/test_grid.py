"""Tests for the percolation grid model."""

import pytest

from site_percolation.percolation import (
    PercolationGrid, InvalidSize, SizeOverflow, OutOfRange, PercolationError
)


class TestConstruction:
    """Tests for grid construction."""

    def test_can_create_objects(self):
        """Test construction for a range of valid sizes."""
        for n in (1, 2, 10, 100):
            grid = PercolationGrid(n)
            assert grid.n == n
            assert grid.top == n * n
            assert grid.bottom == n * n + 1

    @pytest.mark.parametrize('n', [0, -1, -100])
    def test_non_positive_size_is_rejected(self, n):
        """Test that N <= 0 raises InvalidSize."""
        with pytest.raises(InvalidSize):
            PercolationGrid(n)

    @pytest.mark.parametrize('n', [46341, 2 ** 31 - 1, 10 ** 12])
    def test_too_big_size_is_rejected(self, n):
        """Test that N with N*N beyond 32-bit indexing raises SizeOverflow."""
        with pytest.raises(SizeOverflow):
            PercolationGrid(n)

    def test_errors_share_base_class(self):
        """Test that model errors are PercolationErrors and builtin kinds."""
        with pytest.raises(PercolationError):
            PercolationGrid(0)
        with pytest.raises(ValueError):
            PercolationGrid(0)
        with pytest.raises(IndexError):
            PercolationGrid(2).open(3, 1)

    def test_at_startup_all_closed(self):
        """Test that a fresh grid has every site closed and does not percolate."""
        n = 5
        grid = PercolationGrid(n)
        for row in range(1, n + 1):
            for col in range(1, n + 1):
                assert not grid.is_open(row, col)
                assert not grid.is_full(row, col)
        assert not grid.percolates()
        assert grid.number_of_open_sites() == 0


class TestIndex:
    """Tests for the linear index conversion."""

    @pytest.mark.parametrize('row, col, expected', [
        (1, 1, 0), (1, 10, 9), (2, 10, 19), (5, 1, 40),
        (5, 10, 49), (10, 1, 90), (10, 10, 99),
    ])
    def test_known_indices(self, row, col, expected):
        """Test index values on a 10 x 10 grid."""
        assert PercolationGrid(10).index(row, col) == expected

    def test_index_is_bijection(self):
        """Test that every site maps to a distinct index in [0, N*N)."""
        n = 7
        grid = PercolationGrid(n)
        indices = {grid.index(r, c) for r in range(1, n + 1) for c in range(1, n + 1)}
        assert indices == set(range(n * n))


class TestRangeValidation:
    """Tests for out-of-range coordinates."""

    @pytest.mark.parametrize('row, col', [
        (0, 1), (1, 0), (4, 1), (1, 4), (-1, 2), (2, -1),
    ])
    def test_out_of_range_raises(self, row, col):
        """Test that open, is_open and is_full reject coordinates outside 1..N."""
        grid = PercolationGrid(3)
        with pytest.raises(OutOfRange):
            grid.open(row, col)
        with pytest.raises(OutOfRange):
            grid.is_open(row, col)
        with pytest.raises(OutOfRange):
            grid.is_full(row, col)

    def test_failed_open_leaves_grid_unchanged(self):
        """Test that a rejected open does not mutate state."""
        grid = PercolationGrid(3)
        with pytest.raises(OutOfRange):
            grid.open(1, 4)
        assert grid.number_of_open_sites() == 0

    def test_error_message_names_bounds(self):
        """Test the out-of-range message."""
        with pytest.raises(OutOfRange, match=r"Value 0 is out of bounds \(1 to 3\)"):
            PercolationGrid(3).is_open(0, 1)


class TestOpen:
    """Tests for opening sites."""

    def test_open_in_range(self):
        """Test that opening a site only opens that site."""
        grid = PercolationGrid(3)
        grid.open(2, 2)
        assert grid.is_open(2, 2)
        for row, col in [(1, 2), (2, 1), (2, 3), (3, 2)]:
            assert not grid.is_open(row, col)
        assert grid.number_of_open_sites() == 1

    def test_open_is_idempotent(self):
        """Test that opening the same site twice matches opening it once."""
        once = PercolationGrid(3)
        twice = PercolationGrid(3)
        for grid in (once, twice):
            grid.open(1, 2)
            grid.open(2, 2)
        twice.open(2, 2)

        assert twice.number_of_open_sites() == once.number_of_open_sites()
        assert twice._uf.count == once._uf.count
        assert twice.is_full(2, 2) == once.is_full(2, 2)

    def test_open_is_monotonic(self):
        """Test that open sites stay open as more sites are opened."""
        n = 4
        grid = PercolationGrid(n)
        opened = []
        for row in range(1, n + 1):
            for col in range(1, n + 1, 2):
                grid.open(row, col)
                opened.append((row, col))
                assert all(grid.is_open(r, c) for r, c in opened)

    def test_top_row_site_is_full(self):
        """Test that any opened top-row site is full."""
        grid = PercolationGrid(4)
        grid.open(1, 3)
        assert grid.is_full(1, 3)

    def test_full_implies_open(self):
        """Test that is_full is never true for a closed site."""
        n = 4
        grid = PercolationGrid(n)
        for row, col in [(1, 1), (2, 1), (2, 2), (4, 4), (3, 3)]:
            grid.open(row, col)
        for row in range(1, n + 1):
            for col in range(1, n + 1):
                if grid.is_full(row, col):
                    assert grid.is_open(row, col)

    def test_is_full_in_range(self):
        """Test that fullness follows connection to the top row."""
        grid = PercolationGrid(3)
        grid.open(2, 2)
        assert grid.is_open(2, 2)
        assert not grid.is_full(2, 2)
        grid.open(1, 2)
        assert grid.is_full(2, 2)


class TestPercolates:
    """End-to-end percolation scenarios."""

    def test_single_site(self):
        """Test that a 1 x 1 grid percolates once its site is open."""
        grid = PercolationGrid(1)
        assert not grid.percolates()
        grid.open(1, 1)
        assert grid.percolates()
        assert grid.is_full(1, 1)

    def test_vertical_line(self):
        """Test that the grid percolates only once the line reaches the bottom."""
        grid = PercolationGrid(3)
        grid.open(1, 1)
        assert grid.is_full(1, 1)
        assert not grid.percolates()
        grid.open(2, 1)
        assert grid.is_full(1, 1)
        assert not grid.percolates()
        grid.open(3, 1)
        assert grid.is_full(1, 1)
        assert grid.percolates()

    def test_no_shared_column(self):
        """Test that diagonal sites are not connected."""
        grid = PercolationGrid(2)
        grid.open(1, 2)
        grid.open(2, 1)
        assert not grid.percolates()
        assert not grid.is_full(2, 1)

    def test_percolate_when_join_in_middle(self):
        """Test percolation through a site opened last between top and bottom."""
        grid = PercolationGrid(3)
        grid.open(1, 2)
        grid.open(3, 2)
        assert not grid.percolates()
        grid.open(2, 2)
        assert grid.percolates()
        assert grid.is_full(3, 2)

    def test_winding_path(self):
        """Test percolation along a path using every neighbour direction."""
        grid = PercolationGrid(4)
        for row, col in [(4, 2), (3, 2), (2, 2), (2, 3), (2, 4)]:
            grid.open(row, col)
        assert not grid.percolates()
        grid.open(1, 4)
        assert grid.percolates()
        assert grid.is_full(4, 2)

    def test_can_avoid_backfill_on_percolation(self):
        """Test that bottom sites connected only along the bottom row are not full."""
        grid = PercolationGrid(3)
        for row, col in [(1, 1), (2, 1), (3, 1), (3, 3)]:
            grid.open(row, col)
        assert grid.percolates()
        assert grid.is_open(3, 3)
        assert not grid.is_full(3, 3)

        # Bottom node is reserved but never joined
        assert not grid._uf.connected(grid.index(3, 3), grid.bottom)
        assert grid._uf.component_size(grid.bottom) == 1

    def test_percolation_is_not_undone(self):
        """Test that opening more sites after percolation keeps it percolating."""
        grid = PercolationGrid(3)
        for row in (1, 2, 3):
            grid.open(row, 2)
        assert grid.percolates()
        for row in (1, 2, 3):
            for col in (1, 3):
                grid.open(row, col)
                assert grid.percolates()

    def test_repr(self):
        """Test the repr summary."""
        grid = PercolationGrid(1)
        grid.open(1, 1)
        assert repr(grid) == "PercolationGrid(n=1, open_sites=1, percolates=True)"
