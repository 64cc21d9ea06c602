"""Modulus -> lightness mapping and the constant second channel of each mode."""
import numpy as np
from numpy import ndarray as NDArray

from .types.color_types import ColorSpaceMode, ModeLike, to_mode

HSL_SATURATION = 1.0
OKLCH_CHROMA = 0.35

second_channel_values: dict[ColorSpaceMode, float] = {
    ColorSpaceMode.HSL: HSL_SATURATION,
    ColorSpaceMode.OKLCH: OKLCH_CHROMA,
}


def lightness(modulus: NDArray) -> NDArray:
    """
    Map modulus to lightness with L = r^2 / (1 + r^2).

    L(0) = 0 and L -> 1 as r -> inf. NaN modulus gives NaN, and so does an
    infinite one (inf / inf); both are left for the assembler to sanitize.
    """
    r2 = np.square(np.asarray(modulus, dtype=float))
    with np.errstate(invalid="ignore", divide="ignore"):
        return r2 / (r2 + 1)


def chroma_or_saturation(shape: tuple[int, ...], mode: ModeLike) -> NDArray:
    """Constant saturation (HSL) or chroma (OKLCH) grid of the given shape."""
    return np.full(shape, second_channel_values[to_mode(mode)], dtype=float)


def banded_lightness(lightness_grid: NDArray, modulus: NDArray) -> NDArray:
    """
    Scale lightness into bands that restart at every doubling of ``|z| + 1``.

    Each band ramps the factor ``2 ** (frac(log2(r + 1)) - 1)`` from 1/2 up to 1,
    so iso-modulus steps show up as sharp edges in the image.
    """
    modulus = np.asarray(modulus, dtype=float)
    with np.errstate(invalid="ignore"):
        octave = np.log2(modulus + 1)
        return lightness_grid * np.exp2(np.mod(octave, 1.0) - 1)
