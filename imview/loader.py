"""Image loading.

:func:`load_image` is the two-step factory for :class:`~imview.image_handle.ImageHandle`:
it reads and decodes a file and returns ``Ok(handle)`` or ``Err(LoadError)``
without raising. :func:`open_image` wraps it for callers that prefer
exceptions and a ``with`` block.
"""

from __future__ import annotations

__all__ = ("load_image", "open_image")

import contextlib
import logging
import os
from typing import TYPE_CHECKING

from .core import decode_bytes, decode_with_pillow, read_bytes
from .image_handle import ImageHandle
from .models import Err, LoadError, Ok

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .models import Result

logger = logging.getLogger(__name__)


def load_image(path: str | os.PathLike[str]) -> Result[ImageHandle, LoadError]:
    """Read and decode ``path`` into an :class:`ImageHandle`.

    OpenCV decodes first; Pillow is tried when OpenCV does not recognise the
    data. The file is fully read and closed before decoding starts.

    Args:
        path: Path to the image file. Not validated beyond what decoding requires.

    Returns:
        Result[ImageHandle, LoadError]: ``Ok`` with a loaded handle, or ``Err``
        describing why the path could not be turned into an image.
    """
    if not os.fspath(path):
        return Err(LoadError(path, "no filename given"))

    try:
        data = read_bytes(path)
    except OSError as exc:
        logger.debug("Reading %s failed: %s", path, exc)
        return Err(LoadError(path, exc.strerror or str(exc)))
    except ValueError as exc:
        # Paths the OS cannot represent, such as ones with an embedded NUL.
        logger.debug("Rejected path %r: %s", path, exc)
        return Err(LoadError(path, str(exc)))

    image = decode_bytes(data)
    if image is None:
        image = decode_with_pillow(data)
        if image is None:
            return Err(LoadError(path, "unrecognised or corrupt image data"))
        logger.warning("OpenCV could not decode %s; decoded with Pillow instead.", path)

    logger.debug("Decoded %s with shape %s.", path, image.shape)
    return Ok(ImageHandle(path, image))


@contextlib.contextmanager
def open_image(path: str | os.PathLike[str]) -> Iterator[ImageHandle]:
    """Load ``path`` and yield the handle, closing it when the block exits.

    Raises:
        LoadError: If the path cannot be loaded. Nothing is yielded in that case.
    """
    with load_image(path).unwrap() as handle:
        yield handle
