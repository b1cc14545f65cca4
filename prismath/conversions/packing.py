import numpy as np
from numpy import ndarray as NDArray
from numpy.typing import ArrayLike

RED_MASK = 0xFF0000
GREEN_MASK = 0x00FF00
BLUE_MASK = 0x0000FF


def pack_rgb(r: int, g: int, b: int) -> int:
    """Pack three 8-bit channels into a ``0xRRGGBB`` integer."""
    return int(r) << 16 | int(g) << 8 | int(b)


def unpack_rgb(color: int) -> tuple[int, int, int]:
    """Split a ``0xRRGGBB`` integer into its (r, g, b) channels."""
    return (
        (color & RED_MASK) >> 16,
        (color & GREEN_MASK) >> 8,
        color & BLUE_MASK,
    )


def np_unpack_rgb(colors: ArrayLike) -> NDArray:
    """
    Vectorized: split packed colors into channels.

    Args:
        colors: array-like of packed ``0xRRGGBB`` integers

    Returns:
        Integer array of shape (..., 3): (r, g, b) in [0, 255]
    """
    colors = np.asarray(colors, dtype=np.int64)
    return np.stack([
        (colors & RED_MASK) >> 16,
        (colors & GREEN_MASK) >> 8,
        colors & BLUE_MASK,
    ], axis=-1)
