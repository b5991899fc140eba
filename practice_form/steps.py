"""
Form interaction steps.

Each step takes the session handle, resolves its element fresh (the form
may re-render between steps), performs one interaction and returns the
observed post-condition so the calling test can assert on it.
"""

from __future__ import annotations

import logging

from practice_form import locators
from practice_form.session import FormSession

logger = logging.getLogger(__name__)

DEFAULT_FIRST_NAME = "SuperMan"
DEFAULT_GENDER = "Male"
DEFAULT_DATE_OF_BIRTH = "01/05/2000"


def enter_first_name(session: FormSession, value: str = DEFAULT_FIRST_NAME) -> str:
    """Replace the text of the input after the First Name label; return its value."""
    logger.info("Starting step: Enter First Name")
    field = locators.resolve_unique(session.page, locators.FIRST_NAME_INPUT, "enter_first_name")
    field.clear()
    field.press_sequentially(value)
    actual = field.input_value()
    logger.info("Entered '%s' into First Name field", value)
    return actual


def select_gender(session: FormSession, value: str = DEFAULT_GENDER) -> bool:
    """Click the gender radio with ``value``; return its checked state."""
    logger.info("Starting step: Select Gender (%s)", value)
    radio = locators.resolve_unique(session.page, locators.gender_radio(value), "select_gender")
    radio.click()
    selected = radio.is_checked()
    logger.info("Selected '%s' radio button", value)
    return selected


def is_gender_selected(session: FormSession, value: str) -> bool:
    """Return the checked state of the gender radio with ``value``."""
    radio = locators.resolve_unique(
        session.page, locators.gender_radio(value), "is_gender_selected"
    )
    return radio.is_checked()


def enter_date_of_birth(session: FormSession, value: str = DEFAULT_DATE_OF_BIRTH) -> str:
    """
    Type ``value`` into the Date of Birth input and commit it with Enter.

    The field may reformat the literal on commit, so callers should check
    for the year rather than the exact string.

    Returns:
        The field value after commit.
    """
    logger.info("Starting step: Enter Date of Birth")
    field = locators.resolve_unique(
        session.page, locators.DATE_OF_BIRTH_INPUT, "enter_date_of_birth"
    )
    field.press_sequentially(value)
    field.press("Enter")
    actual = field.input_value()
    logger.info("Entered '%s' into Date of Birth field", value)
    return actual


def submit_form(session: FormSession) -> None:
    """Click the Submit button."""
    logger.info("Starting step: Submit Form")
    button = locators.resolve_unique(session.page, locators.SUBMIT_BUTTON, "submit_form")
    button.click()
    logger.info("Clicked the 'Submit' button")


STEP_SEQUENCE = (
    enter_first_name,
    select_gender,
    enter_date_of_birth,
    submit_form,
)
