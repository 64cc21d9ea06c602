"""
Color space -> RGB conversions
==============================

Vectorized (numpy) conversions from the two supported color spaces to unit
sRGB. Outputs are unclamped; see ``complexcolor.assemble`` for sanitizing.

HSL -> RGB:
    np_hsl_to_unit_rgb(h, s, l)

OKLCH -> RGB:
    np_oklch_to_unit_rgb(l, c, h)
    np_oklch_to_oklab(l, c, h)
    np_oklab_to_linear_rgb(lab)
    np_linear_to_srgb(rgb_lin)

High-level API:
    np_convert(triple)
        Dispatch on a ColorTriple's mode
"""

from .hsl import np_hsl_to_unit_rgb
from .oklch import (
    np_oklch_to_unit_rgb,
    np_oklch_to_oklab,
    np_oklab_to_linear_rgb,
    np_linear_to_srgb,
)
from .wrapper import np_convert, CONVERT_TO_RGB

__all__ = [
    'np_hsl_to_unit_rgb',
    'np_oklch_to_unit_rgb',
    'np_oklch_to_oklab',
    'np_oklab_to_linear_rgb',
    'np_linear_to_srgb',
    'np_convert',
    'CONVERT_TO_RGB',
]
