import math
import numpy as np
from numpy import ndarray as NDArray
from numpy.typing import ArrayLike

from ..types.format_type import HUE_360


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    return h % HUE_360


def hsl_to_unit_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to RGB using chroma and hue sector.
    Based on: https://en.wikipedia.org/wiki/HSL_and_HSV#HSL_to_RGB

    Args:
        h: Hue in degrees, wrapped into [0, 360)
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = normalize_hue(h)
    chroma = (1 - abs(2 * l - 1)) * s
    h_prime = h / 60
    x = chroma * (1 - abs(h_prime % 2 - 1))
    m = l - chroma / 2

    sector = int(math.floor(h_prime))
    if sector == 0:
        r, g, b = chroma, x, 0.0
    elif sector == 1:
        r, g, b = x, chroma, 0.0
    elif sector == 2:
        r, g, b = 0.0, chroma, x
    elif sector == 3:
        r, g, b = 0.0, x, chroma
    elif sector == 4:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x

    return r + m, g + m, b + m


def np_hsl_to_unit_rgb(h: ArrayLike, s: ArrayLike, l: ArrayLike) -> NDArray:
    """
    Vectorized: Convert HSL to RGB.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, saturation in [0, 1]
        l: array-like or scalar, lightness in [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = np.asarray(h, dtype=float) % HUE_360
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    chroma = (1 - np.abs(2 * l - 1)) * s
    h_prime = h / 60
    x = chroma * (1 - np.abs(h_prime % 2 - 1))
    m = l - chroma / 2
    zero = np.zeros(out_shape)

    sector = np.floor(h_prime).astype(int)
    conditions = [sector == i for i in range(5)]

    r = np.select(conditions, [chroma, x, zero, zero, x], default=chroma)
    g = np.select(conditions, [x, chroma, chroma, x, zero], default=zero)
    b = np.select(conditions, [zero, zero, x, chroma, chroma], default=x)

    return np.stack([r + m, g + m, b + m], axis=-1)
