"""Shared constants.

The :mod:`imview.constants` module centralizes the prompt text, display
defaults, environment variable names, and process exit codes used throughout
the codebase.
"""

from __future__ import annotations

from typing import Final

__all__ = (
    "DEFAULT_WAIT_MS",
    "DEFAULT_WINDOW_NAME",
    "ENV_LOG_LEVEL",
    "ENV_WAIT_MS",
    "ENV_WINDOW_NAME",
    "EXIT_DISPLAY_FAILURE",
    "EXIT_LOAD_FAILURE",
    "EXIT_SUCCESS",
    "LOG_DATE_FORMAT",
    "LOG_FORMAT",
    "PROMPT",
)

PROMPT: Final[str] = "Please enter image filename: "

# Display defaults
DEFAULT_WINDOW_NAME: Final[str] = "imview"
DEFAULT_WAIT_MS: Final[int] = 0  # block until a key press

# Environment overrides
ENV_WINDOW_NAME: Final[str] = "IMVIEW_WINDOW_NAME"
ENV_WAIT_MS: Final[str] = "IMVIEW_WAIT_MS"
ENV_LOG_LEVEL: Final[str] = "IMVIEW_LOG_LEVEL"

LOG_FORMAT: Final[str] = "%(asctime)s.%(msecs)03d %(levelname)s %(module)s - %(funcName)s: %(message)s"
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

# Process exit codes
EXIT_SUCCESS: Final[int] = 0
EXIT_LOAD_FAILURE: Final[int] = 1
EXIT_DISPLAY_FAILURE: Final[int] = 2
