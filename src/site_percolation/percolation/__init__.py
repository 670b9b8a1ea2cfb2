"""Percolation model on N-by-N site grids."""

from .errors import PercolationError, InvalidSize, SizeOverflow, OutOfRange, ERROR_KINDS
from .union_find import WeightedQuickUnion
from .grid import PercolationGrid

__all__ = [
    'PercolationGrid', 'WeightedQuickUnion',
    'PercolationError', 'InvalidSize', 'SizeOverflow', 'OutOfRange', 'ERROR_KINDS',
]
