# renderer/color.py
import math
import numpy as np
from numba import njit

# Channel values are clamped into this range before scaling to bytes.
INTENSITY_MIN = 0.0
INTENSITY_MAX = 0.999


@njit(cache=True)
def linear_to_gamma(linear_component):
    """Gamma 2 transform. Non-positive and NaN inputs map to 0."""
    if linear_component > 0:
        return math.sqrt(linear_component)
    return 0.0


@njit(cache=True)
def encode_channel(linear_component):
    g = linear_to_gamma(linear_component)
    if g < INTENSITY_MIN:
        g = INTENSITY_MIN
    elif g > INTENSITY_MAX:
        g = INTENSITY_MAX
    return int(256 * g)


@njit(cache=True)
def _encode_kernel(linear_image, output_image):
    height, width, _ = linear_image.shape
    for y in range(height):
        for x in range(width):
            for c in range(3):
                output_image[y, x, c] = encode_channel(linear_image[y, x, c])


def encode_pixels(linear_image):
    """
    Convert an (h, w, 3) array of linear colors already scaled by the sample
    count into gamma-corrected 8-bit RGB.
    """
    linear_image = np.ascontiguousarray(linear_image, dtype=np.float64)
    if linear_image.ndim != 3 or linear_image.shape[2] != 3:
        raise ValueError(f"expected an (h, w, 3) array, got shape {linear_image.shape}")
    output_image = np.zeros(linear_image.shape, dtype=np.uint8)
    _encode_kernel(linear_image, output_image)
    return output_image
