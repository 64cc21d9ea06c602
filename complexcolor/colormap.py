"""Phase colormap tables for colorbars, one per color space."""
from functools import lru_cache
import numpy as np
from numpy import ndarray as NDArray

from .complex_color import polar_color
from .types.color_types import ColorSpaceMode, ModeLike, to_mode

COLORMAP_SIZE = 2 ** 10


def colormap_phases(size: int = COLORMAP_SIZE) -> NDArray:
    """Phases (radians) sampled by the colormap: linspace(-pi, pi, size)."""
    return np.linspace(-np.pi, np.pi, size)


@lru_cache(maxsize=None)
def _build_colormap(mode: ColorSpaceMode) -> NDArray:
    phases = colormap_phases()[np.newaxis, :]
    table = polar_color(np.ones_like(phases), phases, mode)[0]
    table.setflags(write=False)
    return table


def colormap(mode: ModeLike = ColorSpaceMode.HSL) -> NDArray:
    """
    Colors of the unit circle e^{i phi}, phi from -pi to pi, in ``mode``.

    The table is built once per mode and shared; it is read-only. First and
    last rows are the same color (phase -pi and pi). The HSL table has no other
    repeated rows. OKLCH at chroma 0.35 is out of the sRGB gamut, and clamping
    can give adjacent phases the same row where every channel sits at 0 or 1.

    Returns:
        Array of shape (COLORMAP_SIZE, 3)
    """
    return _build_colormap(to_mode(mode))
