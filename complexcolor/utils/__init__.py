from .shapes import require_2d, require_same_shape, require_axis_lengths

__all__ = ["require_2d", "require_same_shape", "require_axis_lengths"]
