"""Low-level building blocks shared by the loader and the image handle.

Modules:
- decorators: Guards for methods that need a populated image buffer.
- display: OpenCV window helpers used to render an image.
- image_processing: Byte reading and OpenCV/Pillow decoding helpers.
"""

__all__ = (
    "check_valid_image",
    "close_window",
    "decode_bytes",
    "decode_with_pillow",
    "pil_to_bgr",
    "read_bytes",
    "show_image",
    "validate_image",
)


from .decorators import check_valid_image, validate_image
from .display import close_window, show_image
from .image_processing import decode_bytes, decode_with_pillow, pil_to_bgr, read_bytes
