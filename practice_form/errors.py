"""
Harness error taxonomy.

Setup-phase errors (``ConfigurationError``, ``PageNotReadyError``) are
fatal to the whole suite; ``LocatorResolutionError`` is local to the step
that issued the query.  Post-condition mismatches stay plain
``AssertionError`` so pytest reports them with its usual diff.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class HarnessError(Exception):
    """Base exception for all harness failures."""


class ConfigurationError(HarnessError):
    """The browser executable was not found in any candidate location."""

    def __init__(self, executable_name: str, checked_paths: Sequence[Path]):
        self.executable_name = executable_name
        self.checked_paths = list(checked_paths)
        listing = ", ".join(f"'{path}'" for path in self.checked_paths)
        super().__init__(
            f"Driver not found: '{executable_name}' is not present in any checked "
            f"path: {listing}. Set FORM_DRIVER_DIR to the directory holding the "
            f"browser executable."
        )


class PageNotReadyError(HarnessError):
    """Navigation or the anchor wait did not complete within the bound."""

    def __init__(self, url: str, anchor_text: str, timeout: float):
        self.url = url
        self.anchor_text = anchor_text
        self.timeout = timeout
        super().__init__(
            f"Page not ready: '{anchor_text}' did not appear at {url} "
            f"within {timeout}s"
        )


class LocatorResolutionError(HarnessError):
    """A locator matched zero or several nodes when exactly one was required."""

    def __init__(self, step: str, xpath: str, count: int):
        self.step = step
        self.xpath = xpath
        self.count = count
        super().__init__(
            f"[{step}] expected exactly one element for {xpath!r}, found {count}"
        )
