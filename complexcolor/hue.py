"""
Hue normalization and septaphase discretization.

Phase (degrees) is rotated by a per-mode offset and wrapped into [0, 360).
The offset only rotates the color wheel: distinct phases stay distinct.

Septaphase splits the hue circle into six 60 degree bands. Two variants are
produced from one hue grid:

- rounded: nearest multiple of 60, ties rounded up (``floor(x + 0.5)``)
- thresholded: ``floor`` to a multiple of 60, bands are ``[k*60, (k+1)*60)``

For OKLCH the bands are laid out on a grid shifted by -30 degrees, then
shifted back, so band colors sit at 30 + k*60 in OKLCH hue.
"""
import numpy as np
from numpy import ndarray as NDArray

from .types.color_types import ColorSpaceMode, ModeLike, to_mode

HUE_360 = 360.0
SEPTAPHASE_STEP = 60.0

HUE_OFFSETS: dict[ColorSpaceMode, float] = {
    ColorSpaceMode.HSL: 120.0,
    ColorSpaceMode.OKLCH: 150.0,
}

SEPTAPHASE_OFFSETS: dict[ColorSpaceMode, float] = {
    ColorSpaceMode.HSL: 0.0,
    ColorSpaceMode.OKLCH: -30.0,
}


def normalize_hue(h: NDArray) -> NDArray:
    """Wrap hue to [0, 360)."""
    h = np.mod(h, HUE_360)
    # mod of a tiny negative value can round up to exactly 360
    return np.where(h >= HUE_360, 0.0, h)


def phase_to_hue(phase_deg: NDArray, mode: ModeLike) -> NDArray:
    """
    Rotate phase (degrees) by the mode's hue offset.

    Args:
        phase_deg: phase grid in degrees
        mode: color space the hue is meant for

    Returns:
        Hue grid in [0, 360); NaN phase stays NaN
    """
    offset = HUE_OFFSETS[to_mode(mode)]
    return normalize_hue(np.asarray(phase_deg, dtype=float) + offset)


def _discretize(hue: NDArray, mode: ModeLike, step_fn) -> NDArray:
    offset = SEPTAPHASE_OFFSETS[to_mode(mode)]
    shifted = normalize_hue(np.asarray(hue, dtype=float) + offset)
    stepped = SEPTAPHASE_STEP * step_fn(shifted / SEPTAPHASE_STEP)
    return normalize_hue(stepped - offset)


def round_hue(hue: NDArray, mode: ModeLike = ColorSpaceMode.HSL) -> NDArray:
    """Snap hue to the nearest band center (multiple of 60 in the mode's frame)."""
    return _discretize(hue, mode, lambda x: np.floor(x + 0.5))


def threshold_hue(hue: NDArray, mode: ModeLike = ColorSpaceMode.HSL) -> NDArray:
    """Floor hue to the start of its 60 degree band in the mode's frame."""
    return _discretize(hue, mode, np.floor)


def septaphase_hues(hue: NDArray, mode: ModeLike = ColorSpaceMode.HSL) -> tuple[NDArray, NDArray]:
    """Return (rounded, thresholded) hue grids."""
    return round_hue(hue, mode), threshold_hue(hue, mode)
