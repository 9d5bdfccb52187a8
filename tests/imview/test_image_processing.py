import struct

import cv2 as cv
import numpy as np
import pytest
from mock import patch
from PIL import Image

from imview.core import image_processing
from imview.core.image_processing import decode_bytes, decode_with_pillow, pil_to_bgr, read_bytes


@pytest.fixture
def png_bytes():
    # 1x2 BGR image: red, blue
    image = np.array([[[0, 0, 255], [255, 0, 0]]], dtype=np.uint8)
    ok, encoded = cv.imencode(".png", image)
    assert ok
    return encoded.reshape(-1)


def test_read_bytes_returns_file_contents(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"\x00\x01\x02")

    data = read_bytes(path)
    assert data.dtype == np.uint8
    assert data.tolist() == [0, 1, 2]


def test_read_bytes_missing_file_raises_os_error(tmp_path):
    with pytest.raises(OSError):
        read_bytes(tmp_path / "missing.png")


def test_decode_bytes_decodes_png(png_bytes):
    image = decode_bytes(png_bytes)
    assert image is not None
    assert image.shape == (1, 2, 3)
    assert image[0, 0].tolist() == [0, 0, 255]
    assert image[0, 1].tolist() == [255, 0, 0]


def test_decode_bytes_returns_none_for_garbage():
    assert decode_bytes(np.frombuffer(b"not an image", dtype=np.uint8)) is None


def test_decode_bytes_returns_none_for_empty_buffer():
    assert decode_bytes(np.array([], dtype=np.uint8)) is None


@patch("imview.core.image_processing.cv.imdecode", side_effect=cv.error("boom"))
def test_decode_bytes_treats_opencv_error_as_undecodable(mock_imdecode, png_bytes):
    assert decode_bytes(png_bytes) is None
    mock_imdecode.assert_called_once()


def test_pil_to_bgr_swaps_channels():
    image = Image.new("RGB", (1, 1), (255, 0, 0))
    bgr = pil_to_bgr(image)
    assert bgr.shape == (1, 1, 3)
    assert bgr[0, 0].tolist() == [0, 0, 255]


def test_pil_to_bgr_expands_grayscale():
    bgr = pil_to_bgr(Image.new("L", (2, 1), 128))
    assert bgr.shape == (1, 2, 3)
    assert bgr[0, 0].tolist() == [128, 128, 128]


def test_decode_with_pillow_reads_format_opencv_does_not(tmp_path):
    path = tmp_path / "sample.pcx"
    Image.new("RGB", (4, 2), (0, 255, 0)).save(path, format="PCX")

    image = decode_with_pillow(read_bytes(path))
    assert image is not None
    assert image.shape == (2, 4, 3)
    assert image[0, 0].tolist() == [0, 255, 0]


def test_decode_with_pillow_keeps_first_frame_of_animation(tmp_path):
    path = tmp_path / "anim.gif"
    frames = [Image.new("RGB", (2, 2), (255, 0, 0)), Image.new("RGB", (2, 2), (0, 0, 255))]
    frames[0].save(path, format="GIF", save_all=True, append_images=frames[1:])

    image = decode_with_pillow(read_bytes(path))
    assert image is not None
    assert image.shape == (2, 2, 3)
    assert image[0, 0].tolist() == [0, 0, 255]  # red in BGR order


def _oversized_pcx_header():
    # 8-bit RGB PCX header claiming 20000x20000 pixels, with no pixel data.
    header = struct.pack("<BBBBHHHHHH48sBBH", 10, 5, 1, 8, 0, 0, 19999, 19999, 72, 72, b"\0" * 48, 0, 3, 20000)
    return np.frombuffer(header.ljust(128, b"\0"), dtype=np.uint8)


def test_decode_with_pillow_returns_none_for_decompression_bomb():
    assert decode_with_pillow(_oversized_pcx_header()) is None


def test_decode_with_pillow_returns_none_for_garbage():
    assert decode_with_pillow(np.frombuffer(b"still not an image", dtype=np.uint8)) is None


def test_decode_with_pillow_returns_none_for_empty_buffer():
    assert decode_with_pillow(np.array([], dtype=np.uint8)) is None


def test_module_logger_is_namespaced():
    assert image_processing.logger.name == "imview.core.image_processing"
