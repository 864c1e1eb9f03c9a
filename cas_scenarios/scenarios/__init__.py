"""Scenario registry and scenario implementations."""
from .registry import DEFAULT_SCENARIO, SCENARIO_REGISTRY, get_scenario, list_scenarios

__all__ = ["DEFAULT_SCENARIO", "SCENARIO_REGISTRY", "get_scenario", "list_scenarios"]
