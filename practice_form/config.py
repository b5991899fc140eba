"""
Harness configuration module.

Defines configuration classes for the environments the suite runs
against (the live CloudQA site, or a bundled offline copy of the form).
Values are loaded from environment variables with sensible defaults.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent.parent

_ON_WINDOWS = sys.platform.startswith("win")


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_path(name: str) -> Path | None:
    value = os.environ.get(name)
    return Path(value) if value else None


class Config:
    """Base configuration with default settings."""

    TARGET_URL: str = os.environ.get(
        "FORM_TARGET_URL", "http://app.cloudqa.io/home/AutomationPracticeForm"
    )

    # Directory holding the browser executable.  None means the browser
    # bundled with Playwright is used and no resolution is performed.
    DRIVER_BASE_DIR: Path | None = _env_path("FORM_DRIVER_DIR")
    EXECUTABLE_NAME: str = os.environ.get(
        "FORM_EXECUTABLE_NAME", "chrome.exe" if _ON_WINDOWS else "chrome"
    )
    NESTED_DIR_NAME: str | None = os.environ.get(
        "FORM_NESTED_DIR", "chrome-win64" if _ON_WINDOWS else "chrome-linux64"
    )

    # Implicit wait applies to every element query; the page-ready wait
    # is applied once, at setup, for the anchor element.
    IMPLICIT_WAIT_SECONDS: float = float(os.environ.get("FORM_IMPLICIT_WAIT", "5"))
    PAGE_READY_TIMEOUT_SECONDS: float = float(
        os.environ.get("FORM_PAGE_READY_TIMEOUT", "30")
    )
    ANCHOR_TEXT: str = "First Name"

    HEADLESS: bool = _env_bool("FORM_HEADLESS", False)
    SCREENSHOT_DIR: str = "test-results/screenshots"


class LiveConfig(Config):
    """Live site configuration."""


class TestingConfig(Config):
    """Offline configuration against the bundled copy of the form."""

    __test__ = False

    TARGET_URL: str = os.environ.get(
        "FORM_TARGET_URL",
        (BASE_DIR / "tests" / "fixtures" / "practice_form.html").as_uri(),
    )
    HEADLESS: bool = _env_bool("FORM_HEADLESS", True)
    PAGE_READY_TIMEOUT_SECONDS: float = float(
        os.environ.get("FORM_PAGE_READY_TIMEOUT", "10")
    )


# Configuration mapping for easy access
config = {
    "live": LiveConfig,
    "testing": TestingConfig,
    "default": LiveConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (live, testing).
             If None, uses FORM_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("FORM_ENV", "live")
    return config.get(env, config["default"])
