# renderer/image.py
import os
from typing import TextIO

import numpy as np
from PIL import Image

PPM_MAX_VALUE = 255


def _check_image(image: np.ndarray) -> np.ndarray:
    image = np.asarray(image)
    if image.ndim != 3 or image.shape[2] != 3 or image.dtype != np.uint8:
        raise ValueError(f"expected an (h, w, 3) uint8 image, got {image.dtype} {image.shape}")
    return image


def write_ppm(image: np.ndarray, out: TextIO):
    """Write the image as plain-text PPM (P3), one "r g b" line per pixel."""
    image = _check_image(image)
    height, width, _ = image.shape
    out.write(f"P3\n{width} {height}\n{PPM_MAX_VALUE}\n")
    for row in image:
        out.write("".join(f"{r} {g} {b}\n" for r, g, b in row))


def save_image(image: np.ndarray, path: str):
    """
    Save the image to `path`. ".ppm" files are written as text P3, anything
    else goes through Pillow, which picks the format from the extension.
    """
    image = _check_image(image)
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    if path.lower().endswith(".ppm"):
        with open(path, "w", encoding="ascii") as f:
            write_ppm(image, f)
    else:
        Image.fromarray(image).save(path)
