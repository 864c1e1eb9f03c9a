"""Core utilities: configuration, logging and errors."""
from .config import ArtifactConfig, BrowserConfig, CasConfig, Settings
from .errors import ScenarioAssertionError, ScenarioNotFoundError
from .logging import setup_logging

__all__ = [
    "Settings",
    "BrowserConfig",
    "CasConfig",
    "ArtifactConfig",
    "ScenarioAssertionError",
    "ScenarioNotFoundError",
    "setup_logging",
]
