from __future__ import annotations
from enum import Enum
from typing import Tuple, Union
from ..errors import UnsupportedColorSpaceError

ChannelOrder = Tuple[str, str, str]


class ColorSpaceMode(str, Enum):
    HSL = "hsl"
    OKLCH = "oklch"


ModeLike = Union[ColorSpaceMode, str]

# Positional channel order of each mode, by field name
channel_orders: dict[ColorSpaceMode, ChannelOrder] = {
    ColorSpaceMode.HSL: ("hue", "chroma_or_saturation", "lightness"),
    ColorSpaceMode.OKLCH: ("lightness", "chroma_or_saturation", "hue"),
}


def to_mode(mode: ModeLike) -> ColorSpaceMode:
    """
    Resolve a mode name or enum member to a ColorSpaceMode.

    Args:
        mode: ColorSpaceMode member or its string value ("hsl", "oklch")

    Returns:
        The matching ColorSpaceMode

    Raises:
        UnsupportedColorSpaceError: if the mode is not one of the known spaces
    """
    if isinstance(mode, ColorSpaceMode):
        return mode
    if isinstance(mode, str):
        try:
            return ColorSpaceMode(mode.lower())
        except ValueError:
            pass
    raise UnsupportedColorSpaceError(
        f"Unsupported color space: {mode!r}; expected one of "
        f"{[m.value for m in ColorSpaceMode]}"
    )

