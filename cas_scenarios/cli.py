"""CLI entry point for CAS browser scenarios."""
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from playwright.sync_api import Error as PlaywrightError

from .core.config import Settings
from .core.errors import ScenarioNotFoundError
from .core.logging import setup_logging
from .feedback.failure_logger import FailureLogger
from .scenarios import DEFAULT_SCENARIO, get_scenario, list_scenarios

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run a browser scenario against a CAS server"
    )
    parser.add_argument(
        "scenario",
        nargs="?",
        default=DEFAULT_SCENARIO,
        help=f"Scenario name (default: {DEFAULT_SCENARIO})"
    )
    parser.add_argument(
        "--config", "-c",
        default="config/settings.yaml",
        help="Path to settings YAML file"
    )
    parser.add_argument(
        "--headed",
        action="store_true",
        help="Show the browser window"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List available scenarios and exit"
    )
    parser.add_argument(
        "--failures",
        action="store_true",
        help="Show unacknowledged failures from the ledger and exit"
    )
    parser.add_argument(
        "--ack",
        nargs="*",
        metavar="TIMESTAMP",
        help="Acknowledge ledger failures (all open ones when no timestamp is given) and exit"
    )
    return parser


def show_failures(ledger: FailureLogger) -> int:
    """Print open failures, one per line. Returns 1 when any are open."""
    failures = ledger.read_all()
    if not failures:
        print("No open failures")
        return 0
    for failure in failures:
        print(f"{failure.timestamp}  {failure.scenario}  [{failure.failure_type}] {failure.message}")
        if failure.screenshot:
            print(f"    screenshot: {failure.screenshot}")
    return 1


def main(argv: Optional[list[str]] = None) -> int:
    """Run one scenario. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    setup_logging("DEBUG" if args.debug else "INFO")

    if args.list:
        for name in list_scenarios():
            print(name)
        return 0

    settings = Settings.from_yaml(Path(args.config))
    ledger = FailureLogger(settings.artifacts.failure_log)

    if args.failures:
        return show_failures(ledger)

    if args.ack is not None:
        count = ledger.mark_addressed(args.ack or None)
        logger.info(f"Acknowledged {count} failure(s)")
        return 0

    try:
        scenario = get_scenario(args.scenario)
    except ScenarioNotFoundError:
        logger.error(f"Unknown scenario: {args.scenario}")
        logger.error(f"Available: {', '.join(list_scenarios())}")
        return 2

    if args.headed:
        settings.browser.headless = False

    try:
        scenario(settings)
    except AssertionError as e:
        logger.error(f"Assertion failed: {e}")
        return 1
    except PlaywrightError as e:
        logger.error(f"Browser automation failed: {e}")
        return 1

    return 0


def main_exit() -> None:
    sys.exit(main())
