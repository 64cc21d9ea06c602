"""
OKLCH -> sRGB conversion.

OKLCH is the polar form of OKLab (Bjorn Ottosson, 2020):
L in [0, 1], chroma C >= 0, hue H in degrees. Output is gamma-encoded sRGB,
unclamped; out-of-gamut colors come back outside [0, 1].
"""
import numpy as np
from numpy import ndarray as NDArray

# OKLab -> cube roots of LMS
_LAB_TO_LMS_CBRT = np.array(
    [
        [1.0, 0.3963377774, 0.2158037573],
        [1.0, -0.1055613458, -0.0638541728],
        [1.0, -0.0894841775, -1.2914855480],
    ]
)

# LMS -> linear sRGB
_LMS_TO_LINEAR_RGB = np.array(
    [
        [4.0767416621, -3.3077115913, 0.2309699292],
        [-1.2684380046, 2.6097574011, -0.3413193965],
        [-0.0041960863, -0.7034186147, 1.7076147010],
    ]
)

for _matrix in (_LAB_TO_LMS_CBRT, _LMS_TO_LINEAR_RGB):
    _matrix.setflags(write=False)


def np_oklch_to_oklab(l: NDArray, c: NDArray, h: NDArray) -> NDArray:
    """Polar -> rectangular: returns (..., 3) array of (L, a, b)."""
    l = np.asarray(l, dtype=float)
    c = np.asarray(c, dtype=float)
    h_rad = np.radians(np.asarray(h, dtype=float))
    l, c, h_rad = np.broadcast_arrays(l, c, h_rad)
    return np.stack([l, c * np.cos(h_rad), c * np.sin(h_rad)], axis=-1)


def np_oklab_to_linear_rgb(lab: NDArray) -> NDArray:
    """OKLab (..., 3) -> linear-light sRGB (..., 3)."""
    lms_ = lab @ _LAB_TO_LMS_CBRT.T
    lms = lms_ ** 3
    return lms @ _LMS_TO_LINEAR_RGB.T


def np_linear_to_srgb(rgb_lin: NDArray) -> NDArray:
    """
    sRGB transfer function, applied symmetrically around zero so that
    negative (out-of-gamut) values stay negative instead of becoming NaN.
    """
    magnitude = np.abs(rgb_lin)
    encoded = np.where(
        magnitude <= 0.0031308,
        12.92 * magnitude,
        1.055 * np.power(magnitude, 1 / 2.4) - 0.055,
    )
    return np.copysign(encoded, rgb_lin)


def np_oklch_to_unit_rgb(l: NDArray, c: NDArray, h: NDArray) -> NDArray:
    """
    Vectorized: Convert OKLCH to gamma-encoded sRGB.

    Args:
        l: lightness in [0, 1]
        c: chroma (roughly [0, 0.4] for displayable colors)
        h: hue in degrees

    Returns:
        rgb: array of shape (..., 3), not clamped
    """
    lab = np_oklch_to_oklab(l, c, h)
    return np_linear_to_srgb(np_oklab_to_linear_rgb(lab))
