"""Command-line entry points for imview.

``imview`` prompts for a filename, loads the image and shows it in a window,
then exits. ``imview-about`` prints the installed version, location, and
interpreter/runtime details to stderr.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from pathlib import Path

from . import _about  # pyright: ignore[reportPrivateUsage]
from .constants import (
    ENV_LOG_LEVEL,
    EXIT_DISPLAY_FAILURE,
    EXIT_LOAD_FAILURE,
    EXIT_SUCCESS,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
)
from .loader import open_image
from .models import DisplayError, DisplaySettings, LoadError
from .prompt import prompt_filename

__all__ = ("about", "configure_logging", "load_and_show", "main", "run")

logger = logging.getLogger(__name__)


def configure_logging(level: str | int | None = None) -> None:
    """Send log records to stderr.

    Args:
        level: Logging level. Falls back to ``IMVIEW_LOG_LEVEL``, then ``WARNING``.

    Raises:
        ValueError: If the level is a name the logging module does not know.
    """
    if level is None:
        level = os.environ.get(ENV_LOG_LEVEL, "").strip().upper() or logging.WARNING
    if isinstance(level, str) and level not in logging.getLevelNamesMapping():
        msg = f"Unknown log level {level!r}; set {ENV_LOG_LEVEL} to DEBUG, INFO, WARNING, ERROR or CRITICAL."
        raise ValueError(msg)
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)


def load_and_show(filename: str, settings: DisplaySettings | None = None) -> None:
    """Load ``filename`` and display it once.

    The handle is released when this function returns, on success and on
    failure alike.

    Raises:
        LoadError: If ``filename`` cannot be loaded. Nothing is displayed.
        DisplayError: If the display backend rejects the image.
    """
    with open_image(filename) as handle:
        logger.info("Loaded %r.", handle)
        handle.display(settings)


def main() -> int:
    """Prompt for a filename, show the image, and return the process exit code.

    Returns:
        int: ``0`` on success, ``1`` if the image could not be loaded, ``2`` if
        it could not be displayed.
    """
    configure_logging()
    settings = DisplaySettings.from_env()

    filename = prompt_filename()
    try:
        load_and_show(filename, settings)
    except LoadError as exc:
        logger.debug("Load failed.", exc_info=exc)
        sys.stderr.write(f"{exc}\n")
        return EXIT_LOAD_FAILURE
    except DisplayError as exc:
        logger.debug("Display failed.", exc_info=exc)
        sys.stderr.write(f"{exc}\n")
        return EXIT_DISPLAY_FAILURE
    return EXIT_SUCCESS


def run() -> None:
    """Console-script wrapper around :func:`main`."""
    sys.exit(main())


def about() -> None:
    """Print package info to stderr and return."""
    about_file = _about.__file__
    path = Path(about_file).resolve().parent if about_file else Path.cwd()
    sha1 = _about.__git_sha1__[:8]
    version = _about.__version__
    python_summary = f"{platform.python_implementation()} {platform.python_version()} {platform.python_compiler()}"
    uname_summary = " ".join(part.strip() for part in platform.uname() if part and part.strip())

    sys.stderr.write(f"imview ({version}) [{sha1}]\n")
    sys.stderr.write(f"located at {path}\n")
    sys.stderr.write(f"{python_summary}\n")
    sys.stderr.write(f"{uname_summary}\n")
