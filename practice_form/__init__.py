"""
Practice Form UI regression harness.

Drives a real browser (via Playwright) against the CloudQA automation
practice form: a session is bootstrapped once, then a fixed sequence of
field-fill and submit steps runs against it, each step resolving its
element fresh and returning the observed state for the test to assert.

Key Concepts Demonstrated:
- Explicit session handle instead of a process-wide driver singleton
- Ordered executable resolution with one aggregated failure message
- Implicit (per query) and explicit (setup-only) wait layering
"""

from __future__ import annotations

import logging

from practice_form.config import Config, get_config
from practice_form.errors import (
    ConfigurationError,
    HarnessError,
    LocatorResolutionError,
    PageNotReadyError,
)
from practice_form.session import FormSession, close_session, form_session, open_session

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

__all__ = [
    "Config",
    "ConfigurationError",
    "FormSession",
    "HarnessError",
    "LocatorResolutionError",
    "PageNotReadyError",
    "close_session",
    "form_session",
    "get_config",
    "open_session",
]
