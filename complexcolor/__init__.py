"""complexcolor: domain coloring of complex-valued arrays."""

from .complex_color import (
    complex_color,
    polar_color,
    septaphase,
    color_triple,
    SeptaphaseVariants,
)
from .colormap import colormap, COLORMAP_SIZE
from .contours import MODULUS_LEVELS, PHASE_LEVELS, modulus_levels
from .colors.triple import ColorTriple
from .conversions import np_convert, np_hsl_to_unit_rgb, np_oklch_to_unit_rgb
from .assemble import assemble, sanitize
from .errors import ComplexColorError, ShapeMismatchError, UnsupportedColorSpaceError
from .grid import half_open_range, open_range, sample_grid, validate_axes
from .hue import HUE_OFFSETS, phase_to_hue, round_hue, threshold_hue, septaphase_hues
from .image import save_image, to_pil_image, to_uint8
from .lightness import lightness, HSL_SATURATION, OKLCH_CHROMA
from .plotdata import PlotData, plot_data
from .polar import PolarField, polar_parts
from .types.color_types import ColorSpaceMode

__version__ = "0.1.0"

__all__ = [
    # entry points
    "complex_color",
    "polar_color",
    "septaphase",
    "color_triple",
    "SeptaphaseVariants",
    # tables
    "colormap",
    "COLORMAP_SIZE",
    "MODULUS_LEVELS",
    "PHASE_LEVELS",
    "modulus_levels",
    # pipeline pieces
    "PolarField",
    "polar_parts",
    "lightness",
    "HSL_SATURATION",
    "OKLCH_CHROMA",
    "HUE_OFFSETS",
    "phase_to_hue",
    "round_hue",
    "threshold_hue",
    "septaphase_hues",
    "ColorTriple",
    "np_convert",
    "np_hsl_to_unit_rgb",
    "np_oklch_to_unit_rgb",
    "assemble",
    "sanitize",
    # grids, viewer data, export
    "half_open_range",
    "open_range",
    "sample_grid",
    "validate_axes",
    "PlotData",
    "plot_data",
    "save_image",
    "to_pil_image",
    "to_uint8",
    # types and errors
    "ColorSpaceMode",
    "ComplexColorError",
    "ShapeMismatchError",
    "UnsupportedColorSpaceError",
    "__version__",
]
