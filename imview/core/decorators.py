"""Validation decorator for image buffers.

Guards methods that require a populated OpenCV image buffer, raising
:class:`~imview.models.exceptions.InvalidImageError` early when the buffer is
missing, empty, or has been released.
"""

from __future__ import annotations

__all__ = ("check_valid_image", "validate_image")

import functools
from typing import TYPE_CHECKING, Concatenate, ParamSpec, Protocol, TypeVar, cast

from imview.models.exceptions import InvalidImageError

if TYPE_CHECKING:
    from collections.abc import Callable

    import numpy as np
    import numpy.typing as npt


class _HasImageBuffer(Protocol):
    """Protocol for objects exposing an OpenCV-compatible image buffer."""

    opencv_image: npt.NDArray[np.uint8] | None


P = ParamSpec("P")
R = TypeVar("R")
ImageOwner = TypeVar("ImageOwner", bound=_HasImageBuffer)


def validate_image(instance: object) -> npt.NDArray[np.uint8]:
    """Return the ``opencv_image`` buffer or raise ``InvalidImageError`` when empty.

    Args:
        instance: Object that exposes an ``opencv_image`` NumPy buffer.

    Returns:
        npt.NDArray[np.uint8]: Non-empty image buffer.

    Raises:
        InvalidImageError: If the buffer is missing or empty.
    """
    opencv_image = getattr(instance, "opencv_image", None)
    if opencv_image is None or getattr(opencv_image, "size", 0) == 0:
        raise InvalidImageError
    return cast("npt.NDArray[np.uint8]", opencv_image)


def check_valid_image(
    func: Callable[Concatenate[ImageOwner, P], R],
) -> Callable[Concatenate[ImageOwner, P], R]:
    """Ensure the bound instance contains a populated image buffer before calling.

    Args:
        func: Method that expects a non-empty ``opencv_image`` on ``self``.

    Returns:
        Callable[..., R]: Wrapped callable that validates ``opencv_image`` first.
    """

    @functools.wraps(func)
    def wrapper(self: ImageOwner, *args: P.args, **kwargs: P.kwargs) -> R:
        validate_image(self)
        return func(self, *args, **kwargs)

    return cast("Callable[Concatenate[ImageOwner, P], R]", wrapper)
