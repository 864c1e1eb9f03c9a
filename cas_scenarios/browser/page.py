"""CAS-aware page wrapper with navigation, login and DOM assertions."""
import logging
from pathlib import Path
from typing import Optional
from urllib.parse import urlencode

from playwright.sync_api import Locator, Page as PlaywrightPage, Response

from ..core.config import CasConfig
from ..core.errors import ScenarioAssertionError

logger = logging.getLogger(__name__)

SUBMIT_SELECTOR = "button[name=submitBtn]"
FALLBACK_SUBMIT_SELECTOR = "#fm1 button[type=submit]"


def assert_status(response: Optional[Response], expected: int) -> None:
    """Assert a navigation response carries the expected HTTP status.

    Raises:
        ScenarioAssertionError: If there is no response or the status differs.
    """
    if response is None:
        raise ScenarioAssertionError(
            f"Expected HTTP {expected} but no response was captured",
            expected=expected,
            actual=None,
        )
    if response.status != expected:
        raise ScenarioAssertionError(
            f"Expected HTTP {expected} but got {response.status} {response.status_text}",
            expected=expected,
            actual=response.status,
        )


class CasPage:
    """Wrapper around a Playwright Page bound to one CAS server."""

    def __init__(self, page: PlaywrightPage, cas: CasConfig) -> None:
        """Initialize page wrapper.

        Args:
            page: Playwright Page instance.
            cas: CAS login endpoint and default credentials.
        """
        self._page = page
        self._cas = cas

    @property
    def url(self) -> str:
        """Get current page URL."""
        return self._page.url

    @property
    def raw(self) -> PlaywrightPage:
        """Access underlying Playwright page for advanced operations."""
        return self._page

    def login_url(self, service: Optional[str] = None) -> str:
        """Build the CAS login URL, optionally for a target service."""
        if not service:
            return self._cas.login_url
        return f"{self._cas.login_url}?{urlencode({'service': service})}"

    def goto_login(self, service: Optional[str] = None) -> Optional[Response]:
        """Open the CAS login page, optionally on behalf of a service.

        Returns:
            The main-frame response, or None if the navigation produced none.
        """
        url = self.login_url(service)
        logger.info(f"Navigating to: {url}")
        return self._page.goto(url, wait_until="domcontentloaded")

    def _submit_button(self) -> Locator:
        return (
            self._page.locator(SUBMIT_SELECTOR)
            .or_(self._page.locator(FALLBACK_SUBMIT_SELECTOR))
            .first
        )

    def login_with(
        self,
        username: Optional[str] = None,
        password: Optional[str] = None,
    ) -> Optional[Response]:
        """Fill the CAS login form, submit it and return the resulting response.

        Credentials default to the configured test account.
        """
        if username is None:
            username = self._cas.username
        if password is None:
            password = self._cas.password
        logger.info(f"Logging in as {username}")

        self._page.fill("#username", username)
        self._page.fill("#password", password)
        with self._page.expect_navigation(wait_until="domcontentloaded") as navigation:
            self._submit_button().click()
        return navigation.value

    def log_page(self) -> None:
        """Log the URL the page is currently on."""
        logger.info(f"Page URL: {self._page.url}")

    def log(self, message: str) -> None:
        """Write a scenario message to the helper log."""
        logger.info(message)

    def log_response(self, response: Optional[Response]) -> None:
        """Log status and status text of a response."""
        if response is None:
            logger.info("No response")
            return
        logger.info(f"{response.status} {response.status_text}")

    def wait_for_element(self, selector: str, timeout: Optional[int] = None) -> None:
        """Wait until the selector is attached and visible.

        Args:
            selector: CSS selector.
            timeout: Milliseconds; the context default applies when omitted.
        """
        logger.debug(f"Waiting for {selector}")
        self._page.wait_for_selector(selector, state="visible", timeout=timeout)

    def inner_text(self, selector: str) -> str:
        """Get trimmed rendered text of the first element matching selector."""
        return self._page.inner_text(selector).strip()

    def assert_inner_text(self, selector: str, expected: str) -> None:
        """Assert the rendered text of an element equals expected exactly.

        Raises:
            ScenarioAssertionError: If the text differs.
        """
        self.wait_for_element(selector)
        actual = self.inner_text(selector)
        logger.info(f"Text of {selector}: {actual!r}")
        if actual != expected:
            raise ScenarioAssertionError(
                f"Text of {selector} was {actual!r}, expected {expected!r}",
                expected=expected,
                actual=actual,
            )

    def screenshot(self, path: Path) -> Path:
        """Take a full-page screenshot.

        Args:
            path: File path to save screenshot.
        """
        path.parent.mkdir(parents=True, exist_ok=True)
        self._page.screenshot(path=str(path), full_page=True)
        logger.info(f"Screenshot saved: {path}")
        return path
