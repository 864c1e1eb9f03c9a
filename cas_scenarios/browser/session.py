"""Chromium launch and lifetime management."""
import logging
from types import TracebackType
from typing import Any, Optional

from playwright.sync_api import Browser, Playwright, sync_playwright

from ..core.config import BrowserConfig, CasConfig
from .page import CasPage

logger = logging.getLogger(__name__)


def browser_options(config: BrowserConfig) -> dict[str, Any]:
    """Build Chromium launch keyword arguments from configuration."""
    return {
        "headless": config.headless,
        "slow_mo": config.slow_mo,
        "args": list(config.args),
    }


class BrowserSession:
    """Owns one launched browser and guarantees it is closed on exit.

    Usage:
        with BrowserSession(settings.browser, settings.cas) as session:
            page = session.new_page()
    """

    def __init__(self, config: BrowserConfig, cas: CasConfig) -> None:
        """Initialize session settings.

        Args:
            config: Browser launch configuration.
            cas: CAS endpoint and credentials handed to each page.
        """
        self.config = config
        self.cas = cas
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None

    @property
    def browser(self) -> Browser:
        """Get the launched browser instance.

        Raises:
            RuntimeError: If not launched.
        """
        if not self._browser:
            raise RuntimeError("Browser not launched. Call launch() first.")
        return self._browser

    def launch(self) -> Browser:
        """Start Playwright and launch Chromium."""
        options = browser_options(self.config)
        logger.debug(f"Launching Chromium with {options}")
        self._playwright = sync_playwright().start()
        try:
            self._browser = self._playwright.chromium.launch(**options)
        except Exception:
            self._cleanup()
            raise
        logger.info(f"Browser launched (headless={self.config.headless})")
        return self._browser

    def new_page(self) -> CasPage:
        """Open a page in a fresh context.

        Returns:
            CasPage wrapper bound to the configured CAS server.
        """
        context = self.browser.new_context(
            ignore_https_errors=self.config.ignore_https_errors,
            viewport={
                "width": self.config.viewport_width,
                "height": self.config.viewport_height,
            },
        )
        context.set_default_timeout(self.config.timeout)
        return CasPage(context.new_page(), self.cas)

    def _cleanup(self) -> None:
        """Close the browser and stop Playwright, logging close errors."""
        if self._browser:
            try:
                self._browser.close()
            except Exception as e:
                logger.warning(f"Browser close failed: {e}")
        if self._playwright:
            try:
                self._playwright.stop()
            except Exception as e:
                logger.warning(f"Playwright stop failed: {e}")
        self._playwright = None
        self._browser = None

    def close(self) -> None:
        """Release the browser."""
        logger.info("Closing browser")
        self._cleanup()

    def __enter__(self) -> "BrowserSession":
        self.launch()
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()
