"""Level sets for iso-modulus and iso-phase contour overlays."""
import numpy as np
from numpy import ndarray as NDArray

MODULUS_EXPONENTS = (-7, 15)


def modulus_levels(kmin: int = MODULUS_EXPONENTS[0], kmax: int = MODULUS_EXPONENTS[1]) -> NDArray:
    """
    Powers of two 2**kmin ... 2**kmax (inclusive) for log-scale modulus contours.

    Raises:
        ValueError: if kmin > kmax
    """
    if kmin > kmax:
        raise ValueError(f"kmin ({kmin}) must not exceed kmax ({kmax})")
    levels = np.exp2(np.arange(kmin, kmax + 1, dtype=float))
    levels.setflags(write=False)
    return levels


MODULUS_LEVELS = modulus_levels()

# degrees
PHASE_LEVELS: NDArray = np.array([-180.0, -90.0, 0.0, 90.0, 180.0])
PHASE_LEVELS.setflags(write=False)
