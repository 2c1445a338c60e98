import dataclasses
import math

import numpy as np
import pytest
from PIL import Image

from ppmdecode.models.image_model import Pixel, PpmImage
from ppmdecode.services.decoder_service import decode_ppm


def _blank(width: int, height: int) -> PpmImage:
    return PpmImage(width, height, np.zeros(width * height * 3, dtype=np.uint8), 255, "P6")


def test_get_pixel_uses_row_major_offset(p6_bytes):
    image = decode_ppm(p6_bytes)

    assert image.get_pixel(0, 0) == Pixel(10, 20, 30)
    pixel = image.get_pixel(1, 0)
    assert (pixel.r, pixel.g, pixel.b) == (40, 50, 60)


def test_get_pixel_second_row():
    data = np.arange(12, dtype=np.uint8)
    image = PpmImage(2, 2, data, 255, "P3")

    assert image.get_pixel(0, 1) == (6, 7, 8)
    assert image.get_pixel(1, 1) == (9, 10, 11)


@pytest.mark.parametrize("x, y", [(2, 0), (0, 1), (-1, 0)])
def test_get_pixel_out_of_bounds(p6_bytes, x, y):
    image = decode_ppm(p6_bytes)
    with pytest.raises(IndexError):
        image.get_pixel(x, y)


def test_derived_metrics():
    image = _blank(4, 2)
    assert image.aspect_ratio() == 2.0
    assert image.pixel_count == 8


def test_aspect_ratio_zero_height():
    assert _blank(4, 0).aspect_ratio() == math.inf
    assert math.isnan(_blank(0, 0).aspect_ratio())


def test_image_is_frozen(p3_bytes):
    image = decode_ppm(p3_bytes)
    with pytest.raises(dataclasses.FrozenInstanceError):
        image.width = 3


def test_to_array_shape(p6_bytes):
    arr = decode_ppm(p6_bytes).to_array()

    assert arr.shape == (1, 2, 3)
    assert arr[0, 1].tolist() == [40, 50, 60]
    assert not arr.flags.writeable


def test_to_pil(p3_bytes):
    pil = decode_ppm(p3_bytes).to_pil()

    assert isinstance(pil, Image.Image)
    assert pil.mode == "RGB"
    assert pil.size == (2, 1)
    assert pil.getpixel((1, 0)) == (40, 50, 60)


def test_same_bytes_decode_to_equal_images(p6_bytes):
    first = decode_ppm(p6_bytes)
    second = decode_ppm(bytes(bytearray(p6_bytes)))

    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1


def test_images_with_different_pixels_are_not_equal(p6_bytes):
    other = b"P6\n2 1\n255\n" + bytes(6)

    assert decode_ppm(p6_bytes) != decode_ppm(other)
    assert decode_ppm(p6_bytes) != decode_ppm(b"P3 2 1 255 10 20 30 40 50 60")
