"""JSON-lines ledger of failed scenario runs."""
import logging
from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_LOG_PATH = Path("data/failures.jsonl")


class ScenarioFailure(BaseModel):
    """One failed scenario run."""

    timestamp: str
    scenario: str
    failure_type: Literal["assertion", "automation"]
    message: str
    page_url: str = ""
    details: dict[str, Any] = {}
    screenshot: Optional[str] = None
    addressed: bool = False


class FailureLogger:
    """Appends failures to a ledger and lets an operator acknowledge them."""

    def __init__(self, log_path: Optional[Path] = None) -> None:
        self.log_path = log_path or DEFAULT_LOG_PATH

    def log(self, failure: ScenarioFailure) -> None:
        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.log_path, "a", encoding="utf-8") as f:
            f.write(failure.model_dump_json() + "\n")
        logger.info(f"Recorded {failure.failure_type} failure for {failure.scenario}")

    def _load(self) -> list[ScenarioFailure]:
        if not self.log_path.exists():
            return []
        failures = []
        lines = self.log_path.read_text(encoding="utf-8").splitlines()
        for line_num, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                failures.append(ScenarioFailure.model_validate_json(line))
            except ValidationError as e:
                logger.warning(f"Skipping malformed line {line_num}: {e.error_count()} error(s)")
        return failures

    def read_all(self, include_addressed: bool = False) -> list[ScenarioFailure]:
        """Failures in the ledger, oldest first; acknowledged ones only on request."""
        return [f for f in self._load() if include_addressed or not f.addressed]

    def mark_addressed(self, timestamps: Optional[list[str]] = None) -> int:
        """Acknowledge failures by timestamp, or every open one when None.

        Malformed lines are dropped when the ledger is rewritten.

        Returns:
            Number of failures newly acknowledged.
        """
        failures = self._load()
        if not failures:
            return 0

        count = 0
        for failure in failures:
            if failure.addressed:
                continue
            if timestamps is None or failure.timestamp in timestamps:
                failure.addressed = True
                count += 1

        self.log_path.write_text(
            "".join(f.model_dump_json() + "\n" for f in failures),
            encoding="utf-8",
        )
        return count
