"""Export of RGB images through Pillow."""
from os import PathLike
from typing import Union
import numpy as np
from numpy import ndarray as NDArray
from PIL import Image

from .assemble import sanitize


def to_uint8(rgb: NDArray) -> NDArray:
    """Scale a float RGB image in [0, 1] to uint8 (0..255), sanitizing first."""
    return np.round(sanitize(rgb) * 255).astype(np.uint8)


def to_pil_image(rgb: NDArray) -> Image.Image:
    """
    Wrap an RGB image of shape (rows, cols, 3) in a PIL image.

    Rows of the array become image rows, so ``x`` runs downward.
    """
    rgb = np.asarray(rgb)
    if rgb.ndim != 3 or rgb.shape[-1] != 3:
        raise ValueError(f"Expected an image of shape (rows, cols, 3), got {rgb.shape}")
    return Image.fromarray(to_uint8(rgb))


def save_image(rgb: NDArray, output_path: Union[str, PathLike]) -> None:
    """Write an RGB image to ``output_path``; the format follows the file extension."""
    to_pil_image(rgb).save(output_path)
