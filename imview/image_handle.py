"""Decoded image handle.

An :class:`ImageHandle` owns one decoded OpenCV buffer and the display window
it may have opened. Handles are produced by :func:`imview.loader.load_image`;
constructing one directly performs no I/O.
"""

from __future__ import annotations

__all__ = ("ImageHandle",)

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Final, cast

from typing_extensions import Self

from .core import check_valid_image, close_window, show_image, validate_image

if TYPE_CHECKING:
    import os
    from types import TracebackType

    import numpy as np
    import numpy.typing as npt

    from .models import DisplaySettings

_COLOR_NDIMS: Final[int] = 3


class ImageHandle:
    """A decoded image and the resources needed to display it.

    The handle is a context manager: leaving the ``with`` block releases the
    pixel buffer and destroys any window opened by :meth:`display`, whether
    the block exited normally or by an exception.
    """

    def __init__(self: Self, path: str | os.PathLike[str], opencv_image: npt.NDArray[np.uint8]) -> None:
        """Wrap an already-decoded buffer.

        Args:
            path: File the image was decoded from.
            opencv_image: Non-empty BGR (or single-channel) ``uint8`` buffer.

        Raises:
            InvalidImageError: If ``opencv_image`` is empty.
        """
        self.path: Path = Path(path)
        self.opencv_image: npt.NDArray[np.uint8] | None = opencv_image
        validate_image(self)

        self._window_name: str | None = None
        self._instance_logger: logging.Logger = (
            logging.getLogger(__name__).getChild(self.__class__.__name__).getChild(str(id(self)))
        )

    def __repr__(self: Self) -> str:
        if self.opencv_image is None:
            return f"{self.__class__.__name__}(path={str(self.path)!r}, closed=True)"
        return f"{self.__class__.__name__}(path={str(self.path)!r}, size={self.width}x{self.height})"

    def __enter__(self: Self) -> Self:
        return self

    def __exit__(
        self: Self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def closed(self: Self) -> bool:
        """``True`` once :meth:`close` has released the buffer."""
        return self.opencv_image is None

    @property
    def width(self: Self) -> int:
        return int(validate_image(self).shape[1])

    @property
    def height(self: Self) -> int:
        return int(validate_image(self).shape[0])

    @property
    def channels(self: Self) -> int:
        image = validate_image(self)
        return int(image.shape[2]) if image.ndim == _COLOR_NDIMS else 1

    @check_valid_image
    def display(self: Self, settings: DisplaySettings | None = None) -> None:
        """Render the image in an OpenCV window.

        Blocks until a key press unless ``settings.wait_ms`` is positive. The
        window stays registered with the handle and is destroyed on :meth:`close`.

        Args:
            settings: Window title and key-wait behaviour.

        Raises:
            InvalidImageError: If the handle has been closed.
            DisplayError: If the display backend rejects the image.
        """
        self._instance_logger.debug("Displaying %s.", self.path)
        self._window_name = show_image(cast("npt.NDArray[np.uint8]", self.opencv_image), settings)

    def close(self: Self) -> None:
        """Release the pixel buffer and destroy the display window. Safe to call twice."""
        if self._window_name is not None:
            close_window(self._window_name)
            self._window_name = None
        if self.opencv_image is not None:
            self._instance_logger.debug("Releasing buffer for %s.", self.path)
            self.opencv_image = None
