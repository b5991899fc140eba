"""
Browser session bootstrap and teardown.

A ``FormSession`` owns one Playwright instance, one Chromium process and
the single page the steps act on.  It is created once per suite and
passed explicitly to every step.

Synchronization is two-layered:
- the implicit wait is the context's default timeout, applied to every
  element query and action;
- the explicit wait is a one-off, longer wait for the anchor text at
  setup, so the first step never races the initial page load.
"""

from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass

from playwright.sync_api import Browser, BrowserContext, Page, Playwright, sync_playwright
from playwright.sync_api import Error as PlaywrightError

from practice_form import locators
from practice_form.config import Config, get_config
from practice_form.driver_path import resolve_from_config
from practice_form.errors import PageNotReadyError

logger = logging.getLogger(__name__)


@dataclass
class FormSession:
    """Live browser state for one suite run."""

    playwright: Playwright
    browser: Browser
    context: BrowserContext
    page: Page
    config: type[Config]
    closed: bool = False


def _launch_args(config: type[Config], executable_path) -> dict:
    args = {
        "headless": config.HEADLESS,
        "args": ["--start-maximized"],
    }
    if executable_path is not None:
        args["executable_path"] = str(executable_path)
    return args


def _wait_until_ready(page: Page, config: type[Config]) -> None:
    """Navigate to the target and block until the anchor text is visible."""
    timeout_ms = config.PAGE_READY_TIMEOUT_SECONDS * 1000
    try:
        page.goto(config.TARGET_URL, timeout=timeout_ms)
        anchor = locators.xpath_locator(page, locators.ANCHOR).first
        anchor.wait_for(state="visible", timeout=timeout_ms)
    except PlaywrightError as exc:
        raise PageNotReadyError(
            config.TARGET_URL, config.ANCHOR_TEXT, config.PAGE_READY_TIMEOUT_SECONDS
        ) from exc


def open_session(config: type[Config] | None = None) -> FormSession:
    """
    Start a browser on the target page, ready for the first step.

    Args:
        config: Configuration class.  If None, selected by FORM_ENV.

    Returns:
        A session whose page shows the form with the anchor visible.

    Raises:
        ConfigurationError: The browser executable could not be resolved.
            Raised before any process is started.
        PageNotReadyError: Navigation or the anchor wait timed out.
    """
    config = config or get_config()
    executable_path = resolve_from_config(config)

    playwright = sync_playwright().start()
    browser = None
    context = None
    try:
        browser = playwright.chromium.launch(**_launch_args(config, executable_path))
        context = browser.new_context(no_viewport=True)
        context.set_default_timeout(config.IMPLICIT_WAIT_SECONDS * 1000)
        page = context.new_page()

        logger.info("Opening %s", config.TARGET_URL)
        _wait_until_ready(page, config)
        page.evaluate("window.scrollTo(0, 0);")
    except BaseException:
        _release(playwright, browser, context)
        raise

    logger.info("Session ready: '%s' is visible", config.ANCHOR_TEXT)
    return FormSession(
        playwright=playwright,
        browser=browser,
        context=context,
        page=page,
        config=config,
    )


def _release(playwright, browser, context) -> None:
    """Close context, browser and Playwright, attempting each even if one fails."""
    errors = []
    for resource in (context, browser):
        if resource is None:
            continue
        try:
            resource.close()
        except PlaywrightError as exc:
            errors.append(exc)
    try:
        playwright.stop()
    except PlaywrightError as exc:
        errors.append(exc)
    for exc in errors:
        logger.warning("Error while releasing browser session: %s", exc)


def close_session(session: FormSession) -> None:
    """Release the session's browser process.  Safe to call twice."""
    if session.closed:
        return
    session.closed = True
    _release(session.playwright, session.browser, session.context)
    logger.info("Browser session closed")


@contextmanager
def form_session(config: type[Config] | None = None) -> Generator[FormSession, None, None]:
    """Open a session and guarantee it is closed on every exit path."""
    session = open_session(config)
    try:
        yield session
    finally:
        close_session(session)
