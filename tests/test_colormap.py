import numpy as np
import pytest
from complexcolor import COLORMAP_SIZE, colormap, complex_color
from complexcolor.colormap import colormap_phases


def test_size_and_range(mode):
    table = colormap(mode)
    assert COLORMAP_SIZE == 1024
    assert table.shape == (COLORMAP_SIZE, 3)
    assert (table >= 0).all() and (table <= 1).all()


def test_built_once_and_read_only(mode):
    table = colormap(mode)
    assert colormap(mode) is table
    assert colormap(mode.value) is table
    with pytest.raises(ValueError):
        table[0, 0] = 0.5


def test_endpoints_wrap_around(mode):
    table = colormap(mode)
    np.testing.assert_allclose(table[0], table[-1], atol=1e-12)


def test_hsl_has_no_interior_duplicates():
    table = colormap("hsl")
    assert len(np.unique(table[:-1], axis=0)) == COLORMAP_SIZE - 1


def test_oklch_covers_the_hue_circle():
    table = colormap("oklch")
    dominant = np.argmax(table[:-1], axis=1)
    assert set(dominant.tolist()) == {0, 1, 2}
    assert len(np.unique(table[:-1], axis=0)) > 1000


def test_oklch_repeats_only_inside_clamped_runs():
    # Chroma 0.35 is outside the sRGB gamut, so clamped neighbours can coincide
    table = colormap("oklch")[:-1]
    repeated = (table[1:] == table[:-1]).all(axis=1)
    clamped = ((table == 0.0) | (table == 1.0)).all(axis=1)
    assert clamped[1:][repeated].all()


def test_hsl_negative_real_axis_is_magenta():
    np.testing.assert_allclose(colormap("hsl")[0], [1.0, 0.0, 1.0], atol=1e-12)


def test_matches_unit_circle_colors(mode):
    phases = colormap_phases()
    expected = complex_color(np.exp(1j * phases)[np.newaxis, :], mode)[0]
    np.testing.assert_allclose(colormap(mode), expected, atol=1e-9)
