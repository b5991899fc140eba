"""Fixtures for browser-free unit tests."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from practice_form.config import TestingConfig


@pytest.fixture
def unit_config():
    """Testing configuration with no driver directory and known timeouts."""
    return type(
        "UnitConfig",
        (TestingConfig,),
        {
            "TARGET_URL": "http://form.test/practice",
            "DRIVER_BASE_DIR": None,
            "IMPLICIT_WAIT_SECONDS": 5,
            "PAGE_READY_TIMEOUT_SECONDS": 30,
            "HEADLESS": True,
        },
    )


@pytest.fixture
def fake_page():
    """MagicMock page whose XPath locators resolve to exactly one node."""
    page = MagicMock(name="page")
    page.locator.return_value.count.return_value = 1
    return page


@pytest.fixture
def fake_session(fake_page, unit_config):
    """Stand-in for FormSession exposing only what steps use."""
    return SimpleNamespace(page=fake_page, config=unit_config, closed=False)
