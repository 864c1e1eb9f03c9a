"""Scenario error types."""
from typing import Any


class ScenarioAssertionError(AssertionError):
    """Raised when an observed value does not match the expected one."""

    def __init__(self, message: str, expected: Any = None, actual: Any = None) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class ScenarioNotFoundError(KeyError):
    """Raised when a scenario name is not registered."""
