import numpy as np
import pytest
from PIL import Image

from complexcolor import complex_color
from complexcolor.image import save_image, to_pil_image, to_uint8
from .samples import EXAMPLE_FIELD


def test_to_uint8():
    rgb = complex_color(EXAMPLE_FIELD)
    out = to_uint8(rgb)
    assert out.dtype == np.uint8
    expected = [[[0, 0, 0], [0, 128, 255]], [[255, 0, 255], [255, 128, 0]]]
    # 0.5 * 255 sits on a rounding boundary
    np.testing.assert_allclose(out.astype(int), expected, atol=1)


def test_to_uint8_sanitizes():
    out = to_uint8(np.array([[[np.nan, -1.0, 2.0]]]))
    np.testing.assert_array_equal(out, [[[255, 0, 255]]])


def test_pil_image_size():
    rgb = complex_color(np.ones((3, 5), dtype=complex))
    img = to_pil_image(rgb)
    assert img.mode == "RGB"
    assert img.size == (5, 3)


def test_rejects_non_rgb_shape():
    with pytest.raises(ValueError):
        to_pil_image(np.zeros((3, 5)))


def test_save_image_round_trip(tmp_path):
    rgb = complex_color(EXAMPLE_FIELD)
    path = tmp_path / "example.png"
    save_image(rgb, path)
    with Image.open(path) as img:
        np.testing.assert_array_equal(np.asarray(img.convert("RGB")), to_uint8(rgb))
