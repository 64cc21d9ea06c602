"""
Polar extraction: complex field -> (modulus, phase).

Phase is reported in degrees in (-180, 180], matching ``np.angle(..., deg=True)``.
"""
from typing import NamedTuple
import numpy as np
from numpy import ndarray as NDArray

from .utils import require_2d


class PolarField(NamedTuple):
    modulus: NDArray
    phase: NDArray


def as_complex_field(field) -> NDArray:
    """Return ``field`` as a 2-D complex ndarray without touching the caller's data."""
    return require_2d(np.asarray(field, dtype=complex))


def polar_parts(field) -> PolarField:
    """
    Split a complex field into modulus and phase.

    Args:
        field: 2-D array-like of complex values

    Returns:
        PolarField(modulus, phase) where phase is in degrees

    Raises:
        ShapeMismatchError: if the field is not 2-D
    """
    z = as_complex_field(field)
    return PolarField(np.abs(z), np.angle(z, deg=True))


def cartesian_parts(field) -> tuple[NDArray, NDArray]:
    """Return (real, imag) grids of a 2-D complex field."""
    z = as_complex_field(field)
    return z.real.copy(), z.imag.copy()
