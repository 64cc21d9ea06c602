import numpy as np
import pytest
from complexcolor import (
    MODULUS_LEVELS,
    PHASE_LEVELS,
    ColorSpaceMode,
    ShapeMismatchError,
    colormap,
    complex_color,
    plot_data,
)
from complexcolor.grid import half_open_range, sample_grid
from complexcolor.plotdata import PHASE_TICKS, axis_ticks


def _field(rows=12, cols=8):
    x = half_open_range(-2, 2, rows)
    y = half_open_range(-1, 1, cols)
    return x, y, sample_grid(lambda z: z ** 2 - 1, x, y)


def test_plot_data_contents(mode):
    x, y, field = _field()
    data = plot_data(x, y, field, mode, title="z^2 - 1")
    assert data.title == "z^2 - 1"
    assert data.mode is ColorSpaceMode(mode)
    np.testing.assert_array_equal(data.image, complex_color(field, mode))
    np.testing.assert_allclose(data.modulus, np.abs(field))
    np.testing.assert_allclose(data.phase, np.angle(field, deg=True))
    assert data.colormap is colormap(mode)
    assert data.modulus_levels is MODULUS_LEVELS
    assert data.phase_levels is PHASE_LEVELS
    assert data.phase_ticks == PHASE_TICKS


def test_ticks():
    x, y, field = _field()
    data = plot_data(x, y, field)
    np.testing.assert_allclose(data.xticks.positions, np.linspace(1, 12, 5))
    np.testing.assert_allclose(data.xticks.values, np.linspace(x[0], x[-1], 5))
    np.testing.assert_allclose(data.yticks.positions, np.linspace(1, 8, 5))
    np.testing.assert_allclose(data.yticks.values[-1], 1.0)


def test_nticks():
    ticks = axis_ticks([0.0, 10.0], 100, nticks=3)
    np.testing.assert_allclose(ticks.positions, [1.0, 50.5, 100.0])
    np.testing.assert_allclose(ticks.values, [0.0, 5.0, 10.0])
    with pytest.raises(ValueError):
        axis_ticks([0.0, 1.0], 10, nticks=1)


def test_discontinuous_image():
    x, y, field = _field()
    data = plot_data(x, y, field, discontinuous=True)
    np.testing.assert_array_equal(data.image, complex_color(field, discontinuous=True))


def test_axis_mismatch_fails_before_rendering():
    x, y, field = _field()
    with pytest.raises(ShapeMismatchError):
        plot_data(y, x, field)
    with pytest.raises(ShapeMismatchError):
        plot_data(x[:-1], y, field)


def test_is_frozen():
    x, y, field = _field()
    data = plot_data(x, y, field)
    with pytest.raises(AttributeError):
        data.title = "other"


def test_empty_axes_are_rejected():
    with pytest.raises(ShapeMismatchError):
        plot_data([], [], np.zeros((0, 0), dtype=complex))
    with pytest.raises(ShapeMismatchError):
        plot_data([], [0.0, 1.0], np.zeros((0, 2), dtype=complex))
    with pytest.raises(ShapeMismatchError):
        axis_ticks([], 0)
