"""Browser automation: Chromium session and CAS page helpers."""
from .page import CasPage, assert_status
from .session import BrowserSession, browser_options

__all__ = ["BrowserSession", "CasPage", "assert_status", "browser_options"]
