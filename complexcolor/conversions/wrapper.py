from typing import Callable, Dict
import numpy as np

from ..colors.triple import ColorTriple
from ..errors import UnsupportedColorSpaceError
from ..types.color_types import ColorSpaceMode
from .hsl import np_hsl_to_unit_rgb
from .oklch import np_oklch_to_unit_rgb

# Each converter takes the mode's channels in that mode's positional order
CONVERT_TO_RGB: Dict[ColorSpaceMode, Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]] = {
    ColorSpaceMode.HSL: np_hsl_to_unit_rgb,
    ColorSpaceMode.OKLCH: np_oklch_to_unit_rgb,
}


def np_convert(triple: ColorTriple) -> np.ndarray:
    """
    Convert a tagged channel triple to an unclamped RGB array of shape (..., 3).

    Args:
        triple: ColorTriple carrying the mode and its three channel grids

    Returns:
        RGB array; may contain NaN or values outside [0, 1]
    """
    try:
        converter = CONVERT_TO_RGB[triple.mode]
    except KeyError:
        raise UnsupportedColorSpaceError(f"No RGB conversion for {triple.mode!r}") from None
    return converter(*triple.channels())
