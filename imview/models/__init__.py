"""Data structures and domain exceptions used by imview.

This package holds the result values returned by the loader, display
settings, and the project-specific exception types raised throughout the
codebase.
"""

from __future__ import annotations

__all__ = (
    "DisplayError",
    "DisplaySettings",
    "Err",
    "InvalidImageError",
    "LoadError",
    "Ok",
    "Result",
)

from .display_settings import DisplaySettings
from .exceptions import DisplayError, InvalidImageError, LoadError
from .result import Err, Ok, Result
