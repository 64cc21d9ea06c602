from typing import Sequence
import numpy as np

from ..errors import ShapeMismatchError


def require_2d(grid: np.ndarray, name: str = "field") -> np.ndarray:
    """Raise ShapeMismatchError unless ``grid`` is two-dimensional."""
    if grid.ndim != 2:
        raise ShapeMismatchError(f"{name} must be 2-D, got shape {grid.shape}")
    return grid


def require_same_shape(**grids: np.ndarray) -> tuple[int, ...]:
    """
    Check that all named grids share one shape.

    Args:
        **grids: grids keyed by the name used in the error message

    Returns:
        The common shape

    Raises:
        ShapeMismatchError: on the first grid whose shape differs from the first one
    """
    items = list(grids.items())
    first_name, first = items[0]
    for name, grid in items[1:]:
        if np.shape(grid) != np.shape(first):
            raise ShapeMismatchError(
                f"{name} has shape {np.shape(grid)}, expected {np.shape(first)} (shape of {first_name})"
            )
    return np.shape(first)


def require_axis_lengths(shape: tuple[int, ...], **axes: Sequence) -> None:
    """
    Check sample axes against the field dimensions, in order.

    ``require_axis_lengths((10, 20), x=x, y=y)`` requires ``len(x) == 10`` and
    ``len(y) == 20``.
    """
    if len(axes) != len(shape):
        raise ShapeMismatchError(
            f"Got {len(axes)} axes for a {len(shape)}-D field of shape {shape}"
        )
    for dim, (name, axis) in enumerate(axes.items()):
        length = len(axis)
        if length != shape[dim]:
            raise ShapeMismatchError(
                f"Axis {name} has length {length}, but field dimension {dim} is {shape[dim]}"
            )
