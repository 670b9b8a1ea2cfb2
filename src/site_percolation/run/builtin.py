"""
Built-in self-check suite.

The checks are scenario entries in the same shape as a scenario YAML file,
plus the linear indexing check which has no scenario form.
"""

from typing import List

from ..percolation.grid import PercolationGrid
from .harness import ScenarioResult, run_scenarios
from .scenario import parse_scenario

# (row, col) -> expected linear index on a 10 x 10 grid
INDEXING_CASES = {
    (1, 1): 0,
    (1, 10): 9,
    (2, 10): 19,
    (5, 1): 40,
    (5, 10): 49,
    (10, 1): 90,
    (10, 10): 99,
}

BUILTIN_SCENARIOS = [
    {
        'name': 'at_startup_all_closed',
        'size': 3,
        'expect': {
            'percolates': False,
            'closed': [[r, c] for r in range(1, 4) for c in range(1, 4)],
            'not_full': [[r, c] for r in range(1, 4) for c in range(1, 4)],
        },
    },
    {
        'name': 'can_avoid_backfill_on_percolation',
        'size': 3,
        'open': [[1, 1], [2, 1], [3, 1], [3, 3]],
        'expect': {
            'percolates': True,
            'percolates_after': 3,
            'full': [[1, 1], [2, 1], [3, 1]],
            'not_full': [[3, 3]],
        },
    },
    {'name': 'can_create_single_site', 'size': 1, 'expect': {'percolates': False}},
    {'name': 'can_create_large_grid', 'size': 200, 'expect': {'percolates': False}},
    {'name': 'can_not_create_n_is_0', 'size': 0, 'expect_error': 'InvalidSize'},
    {'name': 'can_not_create_n_is_negative', 'size': -1, 'expect_error': 'InvalidSize'},
    {'name': 'can_not_create_n_is_too_big', 'size': 46341, 'expect_error': 'SizeOverflow'},
    {'name': 'can_not_create_n_is_max_int', 'size': 2147483647, 'expect_error': 'SizeOverflow'},
    {
        'name': 'single_site_percolates',
        'size': 1,
        'open': [[1, 1]],
        'expect': {'percolates': True, 'percolates_after': 1, 'full': [[1, 1]]},
    },
    {
        'name': 'percolate_when_join_in_middle',
        'size': 3,
        'open': [[1, 2], [3, 2], [2, 2]],
        'expect': {'percolates': True, 'percolates_after': 3, 'full': [[3, 2]]},
    },
    {
        'name': 'diagonal_does_not_percolate',
        'size': 2,
        'open': [[1, 2], [2, 1]],
        'expect': {'percolates': False, 'percolates_after': None, 'not_full': [[2, 1]]},
    },
    {
        'name': 'is_full_in_range',
        'size': 3,
        'open': [[1, 3], [2, 3]],
        'expect': {'full': [[1, 3], [2, 3]], 'not_full': [[3, 3], [1, 1]]},
    },
    {'name': 'is_full_out_of_range', 'size': 3, 'expect': {'full': [[4, 1]]},
     'expect_error': 'OutOfRange'},
    {'name': 'is_open_out_of_range', 'size': 3, 'expect': {'open': [[1, 0]]},
     'expect_error': 'OutOfRange'},
    {
        'name': 'open_in_range',
        'size': 3,
        'open': [[2, 2], [2, 2]],
        'expect': {'open': [[2, 2]], 'closed': [[1, 2], [2, 1], [2, 3], [3, 2]]},
    },
    {'name': 'open_out_of_range_low_col', 'size': 3, 'open': [[1, 0]],
     'expect_error': 'OutOfRange'},
    {'name': 'open_out_of_range_low_row', 'size': 3, 'open': [[0, 1]],
     'expect_error': 'OutOfRange'},
    {'name': 'open_out_of_range_up_col', 'size': 3, 'open': [[1, 4]],
     'expect_error': 'OutOfRange'},
    {'name': 'open_out_of_range_up_row', 'size': 3, 'open': [[4, 1]],
     'expect_error': 'OutOfRange'},
]


def check_indexing() -> ScenarioResult:
    """Check the 1-based to linear index conversion on a 10 x 10 grid."""
    result = ScenarioResult(name='indexing')
    grid = PercolationGrid(10)
    for (row, col), expected in INDEXING_CASES.items():
        actual = grid.index(row, col)
        if actual != expected:
            result.failures.append(f"index({row}, {col}) is {actual}, expected {expected}")
    return result


def run_builtin_checks() -> List[ScenarioResult]:
    """Run the indexing check followed by every built-in scenario."""
    scenarios = [parse_scenario(entry, i) for i, entry in enumerate(BUILTIN_SCENARIOS)]
    return [check_indexing()] + run_scenarios(scenarios)
