from __future__ import annotations
import numpy as np
from numpy import ndarray

from ..types.color_types import ColorSpaceMode, ModeLike, channel_orders, to_mode
from ..utils import require_same_shape


class ColorTriple:
    """
    Three same-shape channel grids tagged with the color space they belong to.

    Channels are stored by name (hue, chroma_or_saturation, lightness), so the
    positional order of a mode (HSL: H, S, L; OKLCH: L, C, H) is only applied
    when asking for ``channels()``. Instances are immutable; the grids are
    stored read-only.
    """
    __slots__ = ('mode', 'hue', 'chroma_or_saturation', 'lightness', '_is_frozen')

    mode: ColorSpaceMode
    hue: ndarray
    chroma_or_saturation: ndarray
    lightness: ndarray

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(
        self,
        mode: ModeLike,
        hue: ndarray,
        chroma_or_saturation: ndarray,
        lightness: ndarray,
    ) -> None:
        grids = {
            "hue": np.array(hue, dtype=float),
            "chroma_or_saturation": np.array(chroma_or_saturation, dtype=float),
            "lightness": np.array(lightness, dtype=float),
        }
        require_same_shape(**grids)
        self.mode = to_mode(mode)
        for name, grid in grids.items():
            grid.setflags(write=False)
            setattr(self, name, grid)
        self._is_frozen = True

    @classmethod
    def from_channels(cls, mode: ModeLike, a: ndarray, b: ndarray, c: ndarray) -> ColorTriple:
        """
        Build a triple from positional channels in the mode's order.

        ``from_channels("oklch", L, C, H)`` and ``from_channels("hsl", H, S, L)``.
        """
        mode = to_mode(mode)
        named = dict(zip(channel_orders[mode], (a, b, c)))
        return cls(mode, **named)

    @property
    def shape(self) -> tuple[int, ...]:
        return self.hue.shape

    def channels(self) -> tuple[ndarray, ndarray, ndarray]:
        """Channels in this mode's positional order."""
        return tuple(getattr(self, name) for name in channel_orders[self.mode])

    def reversed_channels(self) -> tuple[ndarray, ndarray, ndarray]:
        """
        Channels in the reverse of this mode's order, which is the positional
        order of the other mode (H, S, L <-> L, C, H).
        """
        return self.channels()[::-1]

    def with_hue(self, hue: ndarray) -> ColorTriple:
        """Copy with the hue grid replaced."""
        return ColorTriple(self.mode, hue, self.chroma_or_saturation, self.lightness)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(mode={self.mode.value!r}, shape={self.shape})"
