"""
Browser executable resolution.

Candidate locations are checked in priority order (the base directory,
then one known nested subdirectory) and the first existing file wins.
When none exists, a single ``ConfigurationError`` names every path that
was checked.
"""

from __future__ import annotations

import logging
from pathlib import Path

from practice_form.config import Config
from practice_form.errors import ConfigurationError

logger = logging.getLogger(__name__)


def candidate_paths(
    base_dir: Path, executable_name: str, nested_dir_name: str | None = None
) -> list[Path]:
    """Return the ordered list of locations where the executable may live."""
    base_dir = Path(base_dir)
    candidates = [base_dir / executable_name]
    if nested_dir_name:
        candidates.append(base_dir / nested_dir_name / executable_name)
    return candidates


def resolve_executable(
    base_dir: Path, executable_name: str, nested_dir_name: str | None = None
) -> Path:
    """
    Locate the browser executable.

    Args:
        base_dir: Primary directory to search.
        executable_name: File name of the executable.
        nested_dir_name: Optional subdirectory of ``base_dir`` checked second.

    Returns:
        Path of the first candidate that exists as a file.

    Raises:
        ConfigurationError: No candidate exists.
    """
    checked = candidate_paths(base_dir, executable_name, nested_dir_name)
    for path in checked:
        if path.is_file():
            logger.info("Using browser executable at %s", path)
            return path
    raise ConfigurationError(executable_name, checked)


def resolve_from_config(config: type[Config]) -> Path | None:
    """Resolve the executable for ``config``, or None for the bundled browser."""
    if config.DRIVER_BASE_DIR is None:
        logger.info("No driver directory configured; using Playwright's bundled browser")
        return None
    return resolve_executable(
        config.DRIVER_BASE_DIR, config.EXECUTABLE_NAME, config.NESTED_DIR_NAME
    )
