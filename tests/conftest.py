"""
Shared pytest fixtures for the Practice Form test suite.

The browser session is suite-scoped: it is opened once before the first
test that needs it and closed once after the last, whatever the test
outcomes.  Setup failures error every dependent test; step failures stay
local to their own test.

Key Concepts Demonstrated:
- Session-scoped fixtures for expensive browser setup
- Guaranteed teardown via yield fixtures
- Screenshot capture on failure
"""

import os

import pytest
from playwright.sync_api import Error as PlaywrightError

# Run against the bundled copy of the form unless told otherwise
os.environ.setdefault("FORM_ENV", "testing")

from practice_form import close_session, get_config, open_session


# -----------------------------------------------------------------------------
# Session Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def form_config():
    """
    Select the configuration class for this run.

    Returns:
        Configuration class chosen by FORM_ENV.
    """
    return get_config()


@pytest.fixture(scope="session")
def form_session(form_config):
    """
    Open the browser on the practice form for the whole suite.

    ConfigurationError and PageNotReadyError propagate, so no step runs
    against a half-initialised session.  A missing Playwright browser
    install skips instead.

    Yields:
        FormSession shared by all e2e tests.
    """
    try:
        session = open_session(form_config)
    except PlaywrightError as exc:
        if "Executable doesn't exist" in str(exc):
            pytest.skip("Playwright browser is not installed; run `playwright install chromium`")
        raise

    yield session

    close_session(session)


# -----------------------------------------------------------------------------
# Screenshot on Failure
# -----------------------------------------------------------------------------

@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Capture a screenshot of the form when a browser test fails."""
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        session = item.funcargs.get("form_session")
        if session and not session.closed:
            screenshot_dir = session.config.SCREENSHOT_DIR
            os.makedirs(screenshot_dir, exist_ok=True)
            test_name = item.name.replace("/", "_").replace("::", "_")
            screenshot_path = f"{screenshot_dir}/{test_name}.png"
            try:
                session.page.screenshot(path=screenshot_path)
                print(f"\nScreenshot saved: {screenshot_path}")
            except PlaywrightError as exc:
                print(f"\nFailed to capture screenshot: {exc}")
