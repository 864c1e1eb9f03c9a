"""Registry of runnable scenarios."""
import logging
from typing import Callable

from ..core.config import Settings
from ..core.errors import ScenarioNotFoundError
from . import service_access_strategy_groovy

logger = logging.getLogger(__name__)

Scenario = Callable[[Settings], None]

SCENARIO_REGISTRY: dict[str, Scenario] = {
    service_access_strategy_groovy.NAME: service_access_strategy_groovy.run,
}

DEFAULT_SCENARIO = service_access_strategy_groovy.NAME


def get_scenario(name: str) -> Scenario:
    """Look up a scenario by name.

    Raises:
        ScenarioNotFoundError: If no scenario is registered under name.
    """
    scenario = SCENARIO_REGISTRY.get(name)
    if scenario is None:
        raise ScenarioNotFoundError(name)
    logger.debug(f"Resolved scenario {name}")
    return scenario


def list_scenarios() -> list[str]:
    return sorted(SCENARIO_REGISTRY)
