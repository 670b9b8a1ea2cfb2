"""Scenario definitions, the scenario harness and built-in self-checks."""

from .scenario import Scenario, ScenarioConfig
from .harness import ScenarioResult, run_scenario, run_scenarios
from .builtin import run_builtin_checks

__all__ = ['Scenario', 'ScenarioConfig', 'ScenarioResult', 'run_scenario', 'run_scenarios',
           'run_builtin_checks']
