"""Exceptions raised by complexcolor."""


class ComplexColorError(Exception):
    """Base class for complexcolor errors."""


class ShapeMismatchError(ComplexColorError, ValueError):
    """Input grids or sample axes do not have matching dimensions."""


class UnsupportedColorSpaceError(ComplexColorError, ValueError):
    """A color space outside ColorSpaceMode was requested."""
