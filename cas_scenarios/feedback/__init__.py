"""Ledger of failed scenario runs."""
from .failure_logger import FailureLogger, ScenarioFailure

__all__ = ["FailureLogger", "ScenarioFailure"]
