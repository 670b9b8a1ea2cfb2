"""
Scenario harness.

Replays scenarios against fresh PercolationGrid instances and collects every
expectation mismatch, so a whole scenario file can be checked in one pass.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from ..percolation.errors import PercolationError, ERROR_KINDS
from ..percolation.grid import PercolationGrid
from .scenario import Scenario


@dataclass
class ScenarioResult:
    """Outcome of one scenario run: mismatches found and when it percolated."""
    name: str
    failures: List[str] = field(default_factory=list)
    percolated_after: Optional[int] = None   # 1-based open step, None if never
    error: Optional[str] = None              # Error kind raised, if any

    @property
    def passed(self) -> bool:
        return not self.failures


def _check_expectations(grid: PercolationGrid, scenario: Scenario, result: ScenarioResult) -> None:
    expect = scenario.expect

    if 'percolates' in expect:
        percolates = grid.percolates()
        if percolates != expect['percolates']:
            result.failures.append(
                f"percolates() is {percolates}, expected {expect['percolates']}"
            )

    if 'percolates_after' in expect and result.percolated_after != expect['percolates_after']:
        result.failures.append(
            f"percolated after open #{result.percolated_after}, "
            f"expected #{expect['percolates_after']}"
        )

    for row, col in expect.get('open', []):
        if not grid.is_open(row, col):
            result.failures.append(f"site ({row}, {col}) is closed, expected open")

    for row, col in expect.get('closed', []):
        if grid.is_open(row, col):
            result.failures.append(f"site ({row}, {col}) is open, expected closed")

    for row, col in expect.get('full', []):
        if not grid.is_full(row, col):
            result.failures.append(f"site ({row}, {col}) is not full, expected full")

    for row, col in expect.get('not_full', []):
        if grid.is_full(row, col):
            result.failures.append(f"site ({row}, {col}) is full, expected not full")


def run_scenario(scenario: Scenario) -> ScenarioResult:
    """
    Build a grid, open the scenario's sites in order and check expectations.

    percolates() is evaluated after every open to find the first step at which
    the grid percolates. A PercolationError raised anywhere in the run ends the
    scenario; it counts as a pass only if it matches expect_error.

    Args:
        scenario: Scenario to replay

    Returns:
        ScenarioResult with all mismatches found
    """
    result = ScenarioResult(name=scenario.name)

    try:
        grid = PercolationGrid(scenario.size)
        for step, (row, col) in enumerate(scenario.opens, start=1):
            grid.open(row, col)
            if result.percolated_after is None and grid.percolates():
                result.percolated_after = step
        _check_expectations(grid, scenario, result)
    except PercolationError as e:
        result.error = type(e).__name__
        if scenario.expect_error is None:
            result.failures.append(f"unexpected {result.error}: {e}")
        elif not isinstance(e, ERROR_KINDS[scenario.expect_error]):
            result.failures.append(f"expected {scenario.expect_error}, got {result.error}: {e}")
        return result

    if scenario.expect_error is not None:
        result.failures.append(f"expected {scenario.expect_error}, nothing was raised")

    return result


def run_scenarios(scenarios: List[Scenario]) -> List[ScenarioResult]:
    """Run each scenario on its own grid."""
    return [run_scenario(scenario) for scenario in scenarios]
