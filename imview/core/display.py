"""OpenCV HighGUI display helpers.

:func:`show_image` submits a buffer to a named window and waits for a key
press (or a fixed delay); :func:`close_window` tears the window down again.
Backend failures surface as :class:`~imview.models.exceptions.DisplayError`.
"""

from __future__ import annotations

__all__ = ("close_window", "show_image")

import logging
from typing import TYPE_CHECKING

import cv2 as cv

from imview.models.display_settings import DisplaySettings
from imview.models.exceptions import DisplayError

if TYPE_CHECKING:
    import numpy as np
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def show_image(
    image: npt.NDArray[np.uint8],
    settings: DisplaySettings | None = None,
    *,
    window_name: str | None = None,
) -> str:
    """Display ``image`` in an OpenCV window.

    Args:
        image: BGR (or single-channel) image to render.
        settings: Window title and key-wait behaviour. Defaults to :class:`DisplaySettings`.
        window_name: Overrides ``settings.window_name`` when given.

    Returns:
        str: Name of the window the image was drawn in.

    Raises:
        DisplayError: If OpenCV cannot create the window or draw the image.
    """
    settings = settings or DisplaySettings()
    name = window_name or settings.window_name

    logger.debug("Showing %s image in window %r (wait_ms=%d).", image.shape, name, settings.wait_ms)
    try:
        cv.namedWindow(name, cv.WINDOW_AUTOSIZE)
        cv.imshow(name, image)
        cv.waitKey(settings.wait_ms)
    except cv.error as exc:
        close_window(name)
        raise DisplayError(name, str(exc).strip()) from exc
    return name


def close_window(window_name: str) -> None:
    """Destroy ``window_name`` if it is still open."""
    try:
        cv.destroyWindow(window_name)
    except cv.error as exc:
        # Already closed by the user, or never created on this backend.
        logger.debug("Window %r was not open: %s", window_name, exc)
    else:
        logger.debug("Destroyed window %r.", window_name)
