"""
Locator strings and strict resolution.

The XPath strings are data: attribute-based or label-relative queries
that survive layout changes on the practice form.  ``resolve_unique``
turns one into a Playwright locator and enforces that it matches exactly
one node at the moment of use.
"""

from __future__ import annotations

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page

from practice_form.errors import LocatorResolutionError

ANCHOR = "//*[contains(text(), 'First Name')]"
FIRST_NAME_INPUT = "//label[contains(text(), 'First Name')]/following::input[1]"
GENDER_RADIO = "//input[@type='radio' and @value='{value}']"
DATE_OF_BIRTH_INPUT = "//label[contains(text(), 'Date of Birth')]/following::input[1]"
SUBMIT_BUTTON = "//button[text()='Submit']"


def xpath_locator(page: Page, xpath: str) -> Locator:
    """Build a (lazy) Playwright locator for an XPath expression."""
    return page.locator(f"xpath={xpath}")


def gender_radio(value: str) -> str:
    """XPath for the gender radio input carrying ``value``."""
    return GENDER_RADIO.format(value=value)


def resolve_unique(page: Page, xpath: str, step: str) -> Locator:
    """
    Resolve ``xpath`` to a locator matching exactly one node.

    The wait for the first match uses the context's default timeout,
    i.e. the implicit wait.  Callers resolve again on every step rather
    than holding on to the result.

    Args:
        page: Page to query.
        xpath: XPath expression.
        step: Step name, reported in the error.

    Returns:
        Locator matching a single node.

    Raises:
        LocatorResolutionError: Zero or multiple nodes matched.
    """
    locator = xpath_locator(page, xpath)
    try:
        locator.first.wait_for(state="attached")
    except PlaywrightError as exc:
        raise LocatorResolutionError(step, xpath, 0) from exc

    count = locator.count()
    if count != 1:
        raise LocatorResolutionError(step, xpath, count)
    return locator
