"""
Everything a viewer needs to draw a domain-colored plot, computed up front.

The viewer itself (figure layout, widgets, event handling) lives outside this
package; it receives a PlotData and draws it.
"""
from dataclasses import dataclass, field as dataclass_field
from typing import Sequence, Tuple
import numpy as np
from numpy import ndarray as NDArray

from .colormap import colormap
from .complex_color import complex_color
from .contours import MODULUS_LEVELS, PHASE_LEVELS
from .errors import ShapeMismatchError
from .grid import validate_axes
from .polar import as_complex_field, polar_parts
from .types.color_types import ColorSpaceMode, ModeLike, to_mode

DEFAULT_NTICKS = 5

# Colorbar ticks for arg(s), in radians, with plain-text labels
PHASE_TICKS: Tuple[Tuple[float, ...], Tuple[str, ...]] = (
    (-np.pi, 0.0, np.pi),
    ("-π", "0", "π"),
)


@dataclass(frozen=True)
class Ticks:
    """Pixel positions (1-based, along one image axis) and the axis values there."""
    positions: NDArray
    values: NDArray


@dataclass(frozen=True)
class PlotData:
    title: str
    mode: ColorSpaceMode
    image: NDArray
    modulus: NDArray
    phase: NDArray
    xticks: Ticks
    yticks: Ticks
    colormap: NDArray
    phase_ticks: Tuple[Tuple[float, ...], Tuple[str, ...]] = PHASE_TICKS
    modulus_levels: NDArray = dataclass_field(default_factory=lambda: MODULUS_LEVELS)
    phase_levels: NDArray = dataclass_field(default_factory=lambda: PHASE_LEVELS)


def axis_ticks(axis: Sequence[float], length: int, nticks: int = DEFAULT_NTICKS) -> Ticks:
    """
    ``nticks`` evenly spaced ticks spanning an axis of ``length`` pixels,
    labelled with values from ``axis[0]`` to ``axis[-1]``.
    """
    if len(axis) == 0 or length < 1:
        raise ShapeMismatchError(f"Cannot place ticks on an empty axis (length {length})")
    if nticks < 2:
        raise ValueError(f"nticks must be at least 2, got {nticks}")
    return Ticks(
        positions=np.linspace(1, length, nticks),
        values=np.linspace(axis[0], axis[-1], nticks),
    )


def plot_data(
    x: Sequence[float],
    y: Sequence[float],
    field,
    mode: ModeLike = ColorSpaceMode.HSL,
    *,
    discontinuous: bool = False,
    nticks: int = DEFAULT_NTICKS,
    title: str = "s",
) -> PlotData:
    """
    Validate axes against ``field`` and compute the image, polar grids, ticks,
    colormap and contour levels for a plot.

    Args:
        x: sample positions along the real axis, one per row of ``field``
        y: sample positions along the imaginary axis, one per column
        field: 2-D complex grid
        mode: color space
        discontinuous: banded rendering, see ``complex_color``
        nticks: ticks per axis
        title: plot title

    Raises:
        ShapeMismatchError: axis lengths disagree with the field shape,
            or the field has no samples along an axis
        UnsupportedColorSpaceError: unknown mode
    """
    mode = to_mode(mode)
    z = as_complex_field(field)
    validate_axes(x, y, z)
    rows, cols = z.shape
    xticks = axis_ticks(x, rows, nticks)
    yticks = axis_ticks(y, cols, nticks)
    polar = polar_parts(z)
    return PlotData(
        title=title,
        mode=mode,
        image=complex_color(z, mode, discontinuous=discontinuous),
        modulus=polar.modulus,
        phase=polar.phase,
        xticks=xticks,
        yticks=yticks,
        colormap=colormap(mode),
    )
