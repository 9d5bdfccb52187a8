"""Helpers for turning encoded image bytes into OpenCV buffers.

OpenCV is the primary decoder. Pillow covers formats OpenCV's ``imdecode``
cannot read (PCX, or GIF on builds without a GIF codec). Both decoders
return a three-channel BGR ``uint8`` array.
"""

from __future__ import annotations

__all__ = ("decode_bytes", "decode_with_pillow", "pil_to_bgr", "read_bytes")

import io
import logging
import os
from typing import TypeAlias, cast

import cv2 as cv
import numpy as np
import numpy.typing as npt
from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)

ImageU8: TypeAlias = npt.NDArray[np.uint8]


def read_bytes(path: str | os.PathLike[str]) -> ImageU8:
    """Read a whole file into a flat ``uint8`` array.

    The underlying file descriptor is closed before this function returns, so
    decoding never holds the file open.

    Raises:
        OSError: If the file is missing or cannot be read.
    """
    data = np.fromfile(os.fspath(path), dtype=np.uint8)
    logger.debug("Read %d byte(s) from %s.", data.size, path)
    return data


def decode_bytes(data: ImageU8) -> ImageU8 | None:
    """Decode encoded image bytes with OpenCV.

    Args:
        data: Flat ``uint8`` array holding the encoded file contents.

    Returns:
        BGR image, or ``None`` if OpenCV does not recognise the data.
    """
    if data.size == 0:
        return None
    try:
        decoded = cv.imdecode(data, cv.IMREAD_COLOR)
    except cv.error as exc:
        logger.debug("OpenCV rejected %d byte(s): %s", data.size, exc)
        return None
    if decoded is None or decoded.size == 0:
        return None
    return cast("ImageU8", decoded)


def pil_to_bgr(image: Image.Image) -> ImageU8:
    """Convert a PIL image to an OpenCV-compatible BGR array."""
    rgb = np.array(image.convert("RGB"), dtype=np.uint8)
    return cast("ImageU8", cv.cvtColor(rgb, cv.COLOR_RGB2BGR))


def decode_with_pillow(data: ImageU8) -> ImageU8 | None:
    """Decode encoded image bytes with Pillow, keeping the first frame only.

    Args:
        data: Flat ``uint8`` array holding the encoded file contents.

    Returns:
        BGR image, or ``None`` if Pillow does not recognise the data either.
    """
    if data.size == 0:
        return None
    try:
        with Image.open(io.BytesIO(data.tobytes())) as image:
            image.seek(0)
            bgr = pil_to_bgr(image)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as exc:
        logger.debug("Pillow rejected %d byte(s): %s", data.size, exc)
        return None
    return bgr
