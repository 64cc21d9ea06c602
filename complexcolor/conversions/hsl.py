import numpy as np
from numpy import ndarray as NDArray

from ..hue import normalize_hue


def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB (CSS Color 4 algorithm).
    Based on: https://en.wikipedia.org/wiki/HSL_and_HSV#Converting_to_RGB

    NaN in any channel yields NaN in every output channel of that sample;
    nothing is clamped here.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, saturation in [0, 1]
        l: array-like or scalar, lightness in [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = normalize_hue(np.asarray(h, dtype=float))
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    # flatten so 0-d input still supports masked assignment
    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape).reshape(-1)
    s = np.broadcast_to(s, out_shape).reshape(-1)
    l = np.broadcast_to(l, out_shape).reshape(-1)

    # m1 is the largest channel, 2l - m1 the smallest, m2 the one in between
    m1 = l + s * np.where(l < 0.5, l, 1 - l)
    m2 = m1 - (m1 - l) * 2 * np.abs(((h / 60) % 2) - 1)
    m0 = 2 * l - m1

    # kept as float: NaN hue must not be cast to int
    hue_section = np.floor(h / 60)

    # (r, g, b) sources per hue section
    sections = (
        (m1, m2, m0),
        (m2, m1, m0),
        (m0, m1, m2),
        (m0, m2, m1),
        (m2, m0, m1),
        (m1, m0, m2),
    )

    # Default case covers NaN hue: every channel is NaN there
    r = m0.copy()
    g = m0.copy()
    b = m0.copy()
    nan_mask = np.isnan(h)
    r[nan_mask] = g[nan_mask] = b[nan_mask] = np.nan

    for index, (src_r, src_g, src_b) in enumerate(sections):
        mask = hue_section == index
        r[mask] = src_r[mask]
        g[mask] = src_g[mask]
        b[mask] = src_b[mask]

    return np.stack([r, g, b], axis=-1).reshape(out_shape + (3,))
