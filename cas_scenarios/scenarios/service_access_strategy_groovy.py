"""Service access strategy: one unregistered service, one lacking privileges."""
from ..browser.page import CasPage, assert_status
from ..core.config import Settings
from .runner import run_in_browser

NAME = "service-access-strategy-groovy"

DENIED_SERVICE = "https://localhost:9859/anything/denied"
ALLOWED_SERVICE = "https://localhost:9859/anything/allowed"

UNAUTHORIZED_SERVICE_SELECTOR = "#content h2"
UNAUTHORIZED_SERVICE_TEXT = "Application Not Authorized to Use CAS"

LOGIN_ERROR_SELECTOR = "#loginErrorsPanel p"
MISSING_PRIVILEGES_TEXT = "Service access denied due to missing privileges."


def verify(page: CasPage) -> None:
    """Drive both service checks on an open page."""
    response = page.goto_login(DENIED_SERVICE)
    page.log_response(response)
    assert_status(response, 403)
    page.assert_inner_text(UNAUTHORIZED_SERVICE_SELECTOR, UNAUTHORIZED_SERVICE_TEXT)

    page.goto_login(ALLOWED_SERVICE)
    response = page.login_with()
    page.log_page()
    page.wait_for_element(LOGIN_ERROR_SELECTOR)
    page.assert_inner_text(LOGIN_ERROR_SELECTOR, MISSING_PRIVILEGES_TEXT)
    page.log_response(response)
    assert_status(response, 401)


def run(settings: Settings) -> None:
    run_in_browser(settings, NAME, verify)
