"""Channel triple -> sanitized RGB image."""
import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import BoundType, bound_type_to_np_function

from .colors.triple import ColorTriple
from .conversions import np_convert

NAN_FILL = 1.0

_clamp = bound_type_to_np_function[BoundType.CLAMP]


def sanitize(rgb: NDArray) -> NDArray:
    """
    Return a new array with NaN replaced by 1.0 and everything else clamped to [0, 1].

    NaN samples (0/0, inf/inf upstream) render at full intensity rather than black.
    """
    rgb = np.asarray(rgb, dtype=float)
    filled = np.where(np.isnan(rgb), NAN_FILL, rgb)
    return np.asarray(_clamp(filled, 0.0, 1.0), dtype=float)


def assemble(triple: ColorTriple) -> NDArray:
    """Convert a ColorTriple to an RGB image of shape (..., 3) with every channel in [0, 1]."""
    return sanitize(np_convert(triple))


def grayscale(values: NDArray) -> NDArray:
    """Broadcast a single-channel grid to a sanitized (..., 3) gray RGB image."""
    values = np.asarray(values, dtype=float)
    return sanitize(np.repeat(values[..., np.newaxis], 3, axis=-1))
