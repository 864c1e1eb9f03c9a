"""Tests for the CLI entry point."""
from pathlib import Path
from unittest.mock import Mock, patch

import pytest
from playwright.sync_api import Error as PlaywrightError

from cas_scenarios import cli
from cas_scenarios.feedback.failure_logger import FailureLogger, ScenarioFailure


@pytest.fixture
def scenario() -> Mock:
    with patch.object(cli, "get_scenario") as get_scenario:
        scenario = Mock()
        get_scenario.return_value = scenario
        yield scenario


def config_args(tmp_path: Path) -> list[str]:
    return ["--config", str(tmp_path / "absent.yaml")]


class TestExitCodes:
    def test_success(self, scenario: Mock, tmp_path: Path) -> None:
        assert cli.main(config_args(tmp_path)) == 0
        scenario.assert_called_once()

    def test_assertion_failure(self, scenario: Mock, tmp_path: Path) -> None:
        scenario.side_effect = AssertionError("expected 403")
        assert cli.main(config_args(tmp_path)) == 1

    def test_automation_failure(self, scenario: Mock, tmp_path: Path) -> None:
        scenario.side_effect = PlaywrightError("Timeout 30000ms exceeded")
        assert cli.main(config_args(tmp_path)) == 1

    def test_unknown_scenario(self, tmp_path: Path) -> None:
        assert cli.main(["no-such-scenario", *config_args(tmp_path)]) == 2


class TestOptions:
    def test_default_scenario(self, scenario: Mock, tmp_path: Path) -> None:
        cli.main(config_args(tmp_path))
        cli.get_scenario.assert_called_once_with("service-access-strategy-groovy")

    def test_headed(self, scenario: Mock, tmp_path: Path) -> None:
        cli.main(["--headed", *config_args(tmp_path)])
        settings = scenario.call_args[0][0]
        assert settings.browser.headless is False

    def test_headless_by_default(self, scenario: Mock, tmp_path: Path) -> None:
        cli.main(config_args(tmp_path))
        settings = scenario.call_args[0][0]
        assert settings.browser.headless is True

    def test_list(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.main(["--list"]) == 0
        assert "service-access-strategy-groovy" in capsys.readouterr().out


def write_config(tmp_path: Path, failure_log: Path) -> list[str]:
    path = tmp_path / "settings.yaml"
    path.write_text(f"artifacts:\n  failure_log: {failure_log}\n")
    return ["--config", str(path)]


def record(failure_log: Path, timestamp: str) -> None:
    FailureLogger(failure_log).log(
        ScenarioFailure(
            timestamp=timestamp,
            scenario="service-access-strategy-groovy",
            failure_type="assertion",
            message="Expected HTTP 401 but got 200 OK",
            screenshot="data/screenshots/shot.png",
        )
    )


class TestFailureLedger:
    def test_no_open_failures(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        args = write_config(tmp_path, tmp_path / "failures.jsonl")

        assert cli.main(["--failures", *args]) == 0
        assert "No open failures" in capsys.readouterr().out

    def test_lists_open_failures(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        failure_log = tmp_path / "failures.jsonl"
        record(failure_log, "2024-01-01T12:00:00")

        assert cli.main(["--failures", *write_config(tmp_path, failure_log)]) == 1
        out = capsys.readouterr().out
        assert "2024-01-01T12:00:00" in out
        assert "Expected HTTP 401 but got 200 OK" in out
        assert "data/screenshots/shot.png" in out

    def test_ack_all(self, tmp_path: Path) -> None:
        failure_log = tmp_path / "failures.jsonl"
        record(failure_log, "2024-01-01T12:00:00")
        record(failure_log, "2024-01-01T12:00:01")

        assert cli.main(["--ack", *write_config(tmp_path, failure_log)]) == 0
        assert FailureLogger(failure_log).read_all() == []

    def test_ack_one(self, tmp_path: Path) -> None:
        failure_log = tmp_path / "failures.jsonl"
        record(failure_log, "2024-01-01T12:00:00")
        record(failure_log, "2024-01-01T12:00:01")

        args = write_config(tmp_path, failure_log)
        assert cli.main(["--ack", "2024-01-01T12:00:00", *args]) == 0

        remaining = FailureLogger(failure_log).read_all()
        assert [f.timestamp for f in remaining] == ["2024-01-01T12:00:01"]

    def test_ledger_commands_do_not_run_scenarios(self, scenario: Mock, tmp_path: Path) -> None:
        cli.main(["--failures", *write_config(tmp_path, tmp_path / "failures.jsonl")])
        scenario.assert_not_called()
