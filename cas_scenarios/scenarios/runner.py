"""Run a scenario body inside a browser session, recording failures."""
import logging
from datetime import datetime
from typing import Callable, Optional

from playwright.sync_api import Error as PlaywrightError

from ..browser.page import CasPage
from ..browser.session import BrowserSession
from ..core.config import Settings
from ..core.errors import ScenarioAssertionError
from ..feedback.failure_logger import FailureLogger, ScenarioFailure

logger = logging.getLogger(__name__)


def _capture_screenshot(page: CasPage, settings: Settings, name: str, stamp: str) -> Optional[str]:
    if not settings.artifacts.screenshot_on_failure:
        return None
    path = settings.artifacts.screenshot_dir / f"{name}-{stamp}.png"
    try:
        return str(page.screenshot(path))
    except (PlaywrightError, OSError) as e:
        logger.warning(f"Screenshot failed: {e}")
        return None


def _record_failure(page: CasPage, settings: Settings, name: str, error: BaseException) -> None:
    now = datetime.now()
    details: dict = {"error": type(error).__name__}
    if isinstance(error, ScenarioAssertionError):
        details["expected"] = error.expected
        details["actual"] = error.actual

    failure = ScenarioFailure(
        timestamp=now.isoformat(),
        scenario=name,
        failure_type="assertion" if isinstance(error, AssertionError) else "automation",
        message=str(error),
        page_url=page.url,
        details=details,
        screenshot=_capture_screenshot(page, settings, name, now.strftime("%Y%m%d-%H%M%S")),
    )
    FailureLogger(settings.artifacts.failure_log).log(failure)


def run_in_browser(settings: Settings, name: str, body: Callable[[CasPage], None]) -> None:
    """Open one page, run body on it, close the browser whatever happens.

    Failures are recorded to the failure ledger and re-raised. A ledger that
    cannot be written is reported as a warning; the scenario's own error is
    what propagates.
    """
    logger.info(f"=== Scenario {name} ===")
    with BrowserSession(settings.browser, settings.cas) as session:
        page = session.new_page()
        try:
            body(page)
        except (AssertionError, PlaywrightError) as e:
            logger.error(f"Scenario {name} failed: {e}")
            try:
                _record_failure(page, settings, name, e)
            except OSError as record_error:
                logger.warning(f"Could not record failure: {record_error}")
            raise
    logger.info(f"Scenario {name} passed")
