"""Exception classes used across imview.

These lightweight subclasses report load and display failures, and operations
attempted on an empty or released image buffer.
"""

from __future__ import annotations

__all__ = (
    "DisplayError",
    "InvalidImageError",
    "LoadError",
)

import os
from typing import Final

from typing_extensions import Self

_LOAD_ERROR_MESSAGE: Final[str] = "Could not load image {path!r}: {reason}"
_DISPLAY_ERROR_MESSAGE: Final[str] = "Could not display image in window {window_name!r}: {reason}"
_INVALID_IMAGE_MESSAGE: Final[str] = "Invalid image. The image buffer is empty or has already been released."


class LoadError(Exception):
    """Raised when a path does not resolve to a readable, decodable image.

    A missing file and an undecodable one are reported through this one
    error; ``reason`` carries the detail for diagnostics.

    Attributes:
        path: Path exactly as supplied by the caller.
        reason: Human-readable description of the failure.
    """

    def __init__(self: Self, path: str | os.PathLike[str], reason: str) -> None:
        """Initialise the error with the offending path.

        Args:
            path: Path that failed to load.
            reason: Why the path could not be loaded.
        """
        self.path: str = os.fspath(path)
        self.reason: str = reason
        super().__init__(_LOAD_ERROR_MESSAGE.format(path=self.path, reason=reason))


class DisplayError(Exception):
    """Raised when the display backend fails to render an image.

    Attributes:
        window_name: Name of the window the image was submitted to.
        reason: Human-readable description of the failure.
    """

    def __init__(self: Self, window_name: str, reason: str) -> None:
        """Initialise the error with the target window.

        Args:
            window_name: Window that could not be created or drawn.
            reason: Backend message describing the failure.
        """
        self.window_name: str = window_name
        self.reason: str = reason
        super().__init__(_DISPLAY_ERROR_MESSAGE.format(window_name=window_name, reason=reason))


class InvalidImageError(Exception):
    """Raised when an image buffer is empty, unset, or already released."""

    def __init__(self: Self) -> None:
        """Initialise the error for a missing or empty image buffer."""
        super().__init__(_INVALID_IMAGE_MESSAGE)
