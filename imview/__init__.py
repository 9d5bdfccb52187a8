"""Prompt for an image file, decode it, and show it in a window.

The package re-exports the loader, the image handle, and the domain
exceptions alongside project metadata.
"""

from __future__ import annotations

from ._about import (
    __author__,
    __copyright__,
    __git_sha1__,
    __issue_tracker__,
    __license__,
    __maintainer__,
    __url__,
    __version__,
)
from .image_handle import ImageHandle
from .loader import load_image, open_image
from .models import DisplayError, DisplaySettings, Err, InvalidImageError, LoadError, Ok, Result

__all__ = (
    "DisplayError",
    "DisplaySettings",
    "Err",
    "ImageHandle",
    "InvalidImageError",
    "LoadError",
    "Ok",
    "Result",
    "__author__",
    "__copyright__",
    "__git_sha1__",
    "__issue_tracker__",
    "__license__",
    "__maintainer__",
    "__url__",
    "__version__",
    "load_image",
    "open_image",
)
