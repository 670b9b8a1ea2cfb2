"""
Site Percolation - Union-find percolation model on N-by-N grids.

This package provides tools for:
- Opening sites on a grid and querying open/full state
- Deciding whether the grid percolates from top to bottom
- Replaying YAML-described scenarios against fresh grids
- Running the built-in self-check suite from the command line
"""

__version__ = "1.0.0"
