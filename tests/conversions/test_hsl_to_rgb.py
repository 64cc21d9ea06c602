import numpy as np
from complexcolor.conversions import np_hsl_to_unit_rgb
from ..samples import samples_hsl_rgb


def test_hsl_to_unit_rgb_samples():
    for (h, s, l), expected in samples_hsl_rgb.items():
        r, g, b = np_hsl_to_unit_rgb(h, s, l)
        assert abs(float(r) - expected[0]) < 1/255
        assert abs(float(g) - expected[1]) < 1/255
        assert abs(float(b) - expected[2]) < 1/255


def test_hsl_to_unit_rgb_numpy():
    the_matrix = np.array(list(samples_hsl_rgb.keys()))
    expected = np.array(list(samples_hsl_rgb.values()))
    result = np_hsl_to_unit_rgb(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert result.shape == expected.shape
    assert np.allclose(result, expected, atol=1/255)


def test_hue_wraps():
    base = np_hsl_to_unit_rgb(30.0, 1.0, 0.5)
    np.testing.assert_allclose(np_hsl_to_unit_rgb(390.0, 1.0, 0.5), base)
    np.testing.assert_allclose(np_hsl_to_unit_rgb(-330.0, 1.0, 0.5), base)
    np.testing.assert_allclose(np_hsl_to_unit_rgb(360.0, 1.0, 0.5), [1.0, 0.0, 0.0])


def test_broadcasts_scalar_channels():
    h = np.array([[0.0, 120.0], [240.0, 300.0]])
    result = np_hsl_to_unit_rgb(h, 1.0, 0.5)
    assert result.shape == (2, 2, 3)
    np.testing.assert_allclose(result[1, 0], [0.0, 0.0, 1.0])


def test_nan_propagates_to_every_channel():
    result = np_hsl_to_unit_rgb(np.array([np.nan, 0.0, 0.0]), 1.0, np.array([0.5, np.nan, 0.5]))
    assert np.isnan(result[0]).all()
    assert np.isnan(result[1]).all()
    np.testing.assert_allclose(result[2], [1.0, 0.0, 0.0])


def test_black_and_white_at_lightness_extremes():
    hues = np.linspace(0, 359, 13)
    np.testing.assert_allclose(np_hsl_to_unit_rgb(hues, 1.0, 0.0), 0.0)
    np.testing.assert_allclose(np_hsl_to_unit_rgb(hues, 1.0, 1.0), 1.0)
