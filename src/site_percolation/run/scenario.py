"""
Scenario configuration.

A ScenarioConfig loads a YAML file describing grids to build, the sites to
open on each, and the state expected afterwards. Each entry becomes a Scenario
that the harness replays against a fresh PercolationGrid.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple
from dataclasses import dataclass, field

from ..percolation.errors import ERROR_KINDS

Site = Tuple[int, int]

# Expectation keys holding lists of sites
SITE_EXPECTATIONS = ('open', 'closed', 'full', 'not_full')


@dataclass
class Scenario:
    """A single grid to build, sites to open and state to check."""
    name: str
    size: int
    opens: List[Site] = field(default_factory=list)
    expect: Dict[str, Any] = field(default_factory=dict)
    expect_error: Optional[str] = None   # Name from ERROR_KINDS


def _parse_site(value: Any, where: str) -> Site:
    if (not isinstance(value, (list, tuple)) or len(value) != 2
            or not all(isinstance(v, int) and not isinstance(v, bool) for v in value)):
        raise ValueError(f"{where}: expected a [row, col] pair of integers, got {value!r}")
    return (value[0], value[1])


def _parse_sites(values: Any, where: str) -> List[Site]:
    if values is None:
        return []
    if not isinstance(values, list):
        raise ValueError(f"{where}: expected a list of [row, col] pairs")
    return [_parse_site(v, f"{where}[{i}]") for i, v in enumerate(values)]


def parse_scenario(entry: Dict[str, Any], position: int = 0) -> Scenario:
    """
    Build a Scenario from one entry of a scenario file.

    Args:
        entry: Mapping with 'name', 'size' and optional 'open', 'expect',
            'expect_error'
        position: Index of the entry in the file, used in error messages

    Returns:
        Parsed Scenario
    """
    if not isinstance(entry, dict):
        raise ValueError(f"Scenario #{position} must be a mapping")
    for key in ('name', 'size'):
        if key not in entry:
            raise ValueError(f"Scenario #{position} is missing required key: '{key}'")

    name = str(entry['name'])
    size = entry['size']
    if not isinstance(size, int) or isinstance(size, bool):
        raise ValueError(f"Scenario '{name}': size must be an integer, got {size!r}")

    opens = _parse_sites(entry.get('open'), f"Scenario '{name}' open")

    expect_raw = entry.get('expect') or {}
    if not isinstance(expect_raw, dict):
        raise ValueError(f"Scenario '{name}': expect must be a mapping")
    expect = {}
    for key, value in expect_raw.items():
        if key in SITE_EXPECTATIONS:
            expect[key] = _parse_sites(value, f"Scenario '{name}' expect.{key}")
        elif key == 'percolates':
            if not isinstance(value, bool):
                raise ValueError(f"Scenario '{name}': percolates must be true or false")
            expect[key] = value
        elif key == 'percolates_after':
            if value is not None and (not isinstance(value, int) or isinstance(value, bool)):
                raise ValueError(f"Scenario '{name}': percolates_after must be an integer or null")
            expect[key] = value
        else:
            raise ValueError(f"Scenario '{name}': unknown expectation '{key}'")

    expect_error = entry.get('expect_error')
    if expect_error is not None and expect_error not in ERROR_KINDS:
        raise ValueError(
            f"Scenario '{name}': unknown error kind '{expect_error}' "
            f"(expected one of {sorted(ERROR_KINDS)})"
        )

    return Scenario(name=name, size=size, opens=opens, expect=expect, expect_error=expect_error)


class ScenarioConfig:
    """
    Loads and validates a scenario YAML file.

    Example:
        config = ScenarioConfig.from_yaml('config/scenarios.yaml')
        for scenario in config.scenarios:
            print(scenario.name, scenario.size)
    """

    def __init__(self, data: Dict[str, Any]):
        self._data = data
        self._validate()
        self._scenarios = [parse_scenario(entry, i)
                           for i, entry in enumerate(self._data['scenarios'])]

    @classmethod
    def from_yaml(cls, path: str) -> 'ScenarioConfig':
        """Load scenario config from YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Scenario config not found: {path}")

        with open(path, 'r') as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Scenario config is not valid YAML: {path}\n{e}") from e

        return cls(data)

    def _validate(self):
        """Validate required config sections."""
        if not isinstance(self._data, dict):
            raise ValueError("Scenario config must be a mapping")
        if 'scenarios' not in self._data:
            raise ValueError("Missing required config section: 'scenarios'")
        if not isinstance(self._data['scenarios'], list):
            raise ValueError("Config section 'scenarios' must be a list")

    @property
    def description(self) -> str:
        return self._data.get('description', '')

    @property
    def scenarios(self) -> List[Scenario]:
        return list(self._scenarios)

    def get(self, name: str) -> Scenario:
        """Return the scenario with the given name."""
        for scenario in self._scenarios:
            if scenario.name == name:
                return scenario
        raise KeyError(f"No scenario named '{name}'")
