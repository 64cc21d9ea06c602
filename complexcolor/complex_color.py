"""
Domain coloring entry points.

A complex field is turned into an RGB image by mapping phase to hue and
modulus to lightness (``r^2 / (1 + r^2)``), with the saturation (HSL) or
chroma (OKLCH) held constant.

In HSL the grid [[0, 1j], [-1, -1j]] renders as black, azure (0, 0.5, 1),
magenta (1, 0, 1) and orange (1, 0.5, 0).
"""
from typing import NamedTuple
import numpy as np
from numpy import ndarray as NDArray

from .assemble import assemble, grayscale
from .colors.triple import ColorTriple
from .hue import HUE_360, phase_to_hue, round_hue, threshold_hue
from .lightness import banded_lightness, chroma_or_saturation, lightness
from .polar import as_complex_field, cartesian_parts, polar_parts
from .types.color_types import ColorSpaceMode, ModeLike, to_mode
from .utils import require_2d, require_same_shape


class SeptaphaseVariants(NamedTuple):
    """Seven renderings of one field, for viewers that switch between them."""
    continuous: NDArray
    rounded: NDArray
    thresholded: NDArray
    lightness: NDArray
    phase: NDArray
    real: NDArray
    imag: NDArray


def color_triple(
    modulus: NDArray,
    phase_deg: NDArray,
    mode: ModeLike = ColorSpaceMode.HSL,
    discontinuous: bool = False,
) -> ColorTriple:
    """
    Build the channel triple for polar data.

    Args:
        modulus: grid of |z|
        phase_deg: grid of arg(z) in degrees
        mode: target color space
        discontinuous: floor hue to 60 degree bands and band the lightness
            at each doubling of ``|z| + 1``

    Returns:
        ColorTriple in ``mode``
    """
    mode = to_mode(mode)
    hue = phase_to_hue(phase_deg, mode)
    light = lightness(modulus)
    if discontinuous:
        hue = threshold_hue(hue, mode)
        light = banded_lightness(light, modulus)
    return ColorTriple(mode, hue, chroma_or_saturation(hue.shape, mode), light)


def complex_color(field, mode: ModeLike = ColorSpaceMode.HSL, *, discontinuous: bool = False) -> NDArray:
    """
    Convert a 2-D array of complex numbers into an RGB image.

    Args:
        field: 2-D array-like of complex values
        mode: "hsl" or "oklch"
        discontinuous: see ``color_triple``

    Returns:
        Float array of shape (rows, cols, 3), every channel in [0, 1]

    Raises:
        UnsupportedColorSpaceError: unknown mode
        ShapeMismatchError: field is not 2-D
    """
    mode = to_mode(mode)
    polar = polar_parts(field)
    return assemble(color_triple(polar.modulus, polar.phase, mode, discontinuous))


def polar_color(
    modulus,
    phase,
    mode: ModeLike = ColorSpaceMode.HSL,
    *,
    discontinuous: bool = False,
) -> NDArray:
    """
    Same as ``complex_color`` for callers that already hold polar data.

    Args:
        modulus: 2-D grid of |z|
        phase: 2-D grid of arg(z) in radians, same shape as ``modulus``
    """
    mode = to_mode(mode)
    modulus = require_2d(np.asarray(modulus, dtype=float), "modulus")
    phase = np.asarray(phase, dtype=float)
    require_same_shape(modulus=modulus, phase=phase)
    return assemble(color_triple(modulus, np.degrees(phase), mode, discontinuous))


def axis_grayscale(u: NDArray) -> NDArray:
    """Map a real grid to gray levels with 0.5 * (1 + u / (1 + |u|)); u = 0 is mid-gray."""
    u = np.asarray(u, dtype=float)
    with np.errstate(invalid="ignore"):
        return grayscale(0.5 * (1 + u / (1 + np.abs(u))))


def septaphase(field, mode: ModeLike = ColorSpaceMode.HSL) -> SeptaphaseVariants:
    """
    Render a field seven ways: continuous, hue rounded to the nearest 60 degree
    band, hue floored to its band, and grayscales of lightness, phase, real
    part and imaginary part.
    """
    mode = to_mode(mode)
    z = as_complex_field(field)
    polar = polar_parts(z)
    real, imag = cartesian_parts(z)
    triple = color_triple(polar.modulus, polar.phase, mode)

    return SeptaphaseVariants(
        continuous=assemble(triple),
        rounded=assemble(triple.with_hue(round_hue(triple.hue, mode))),
        thresholded=assemble(triple.with_hue(threshold_hue(triple.hue, mode))),
        lightness=grayscale(triple.lightness),
        phase=grayscale(triple.hue / HUE_360),
        real=axis_grayscale(real),
        imag=axis_grayscale(imag),
    )
