"""
Sample grids for evaluating a complex function.

Interval helpers follow the usual conventions:

- ``half_open_range(a, b, n)`` samples (a, b]: n points ending at b, step (b - a) / n
- ``open_range(a, b, n)`` samples (a, b): n points strictly inside, step (b - a) / (n + 1)
"""
from typing import Callable, Sequence
import warnings
import numpy as np
from numpy import ndarray as NDArray

from .utils import require_axis_lengths


def _check_count(n: int) -> None:
    if n < 1:
        raise ValueError(f"Number of samples must be at least 1, got {n}")


def half_open_range(start: float, stop: float, n: int) -> NDArray:
    """n evenly spaced samples of the interval (start, stop]."""
    _check_count(n)
    step = (stop - start) / n
    return stop - step * np.arange(n - 1, -1, -1)


def open_range(start: float, stop: float, n: int) -> NDArray:
    """n evenly spaced samples of the interval (start, stop), endpoints excluded."""
    _check_count(n)
    step = (stop - start) / (n + 1)
    return start + step * np.arange(1, n + 1)


def validate_axes(x: Sequence[float], y: Sequence[float], field: NDArray) -> None:
    """
    Check that ``x`` runs along the rows and ``y`` along the columns of ``field``.

    Raises:
        ShapeMismatchError: if len(x) != rows or len(y) != cols
    """
    require_axis_lengths(np.shape(field), x=x, y=y)


def sample_grid(func: Callable[[NDArray], NDArray], x: Sequence[float], y: Sequence[float]) -> NDArray:
    """
    Evaluate ``func`` on the grid z[i, j] = x[i] + 1j * y[j].

    ``func`` receives the whole complex grid at once and must return an array
    of the same shape. Non-finite results trigger a RuntimeWarning; they are
    kept and render at full brightness.
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    z = x[:, np.newaxis] + 1j * y[np.newaxis, :]
    with np.errstate(all="ignore"):
        field = np.asarray(func(z), dtype=complex)
    if field.ndim == 0:
        field = np.full(z.shape, field)
    validate_axes(x, y, field)

    bad = np.count_nonzero(~np.isfinite(field))
    if bad:
        warnings.warn(
            f"{bad} of {field.size} samples are not finite; they will render saturated",
            RuntimeWarning,
            stacklevel=2,
        )
    return field
