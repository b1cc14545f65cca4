"""
Scalar math helpers
===================

Clamping, rounding, interpolation, range mapping and randomization helpers
shared by the vector and color types.

Every scalar function has a vectorized ``np_`` counterpart where it makes sense,
following the same argument order and defaults.

Degenerate ranges (``a == b`` in :func:`ilerp`) do not raise. The division is
carried out by numpy, which returns ``nan``/``inf`` and emits a
``RuntimeWarning``.
"""
from __future__ import annotations
import math
from typing import Optional

import numpy as np
from numpy import ndarray as NDArray
from numpy.typing import ArrayLike

from .types.shapes import Number, RoundingFunction

RAD2DEG: float = 360 / (math.pi * 2)
"""Radians to degrees conversion factor."""
DEG2RAD: float = (math.pi * 2) / 360
"""Degrees to radians conversion factor."""

_rng: np.random.Generator = np.random.default_rng()


def default_rng() -> np.random.Generator:
    """Return the generator used when no ``rng`` is passed to :func:`random`."""
    return _rng


def seed(value: Optional[int] = None) -> np.random.Generator:
    """
    Replace the module default generator with a freshly seeded one.

    Args:
        value: Seed for :func:`numpy.random.default_rng`. ``None`` draws fresh
            entropy from the OS.

    Returns:
        The new default generator.
    """
    global _rng
    _rng = np.random.default_rng(value)
    return _rng


def ieee_divide(num: Number, den: Number) -> float:
    """Divide like IEEE floats: ``x/0`` is ``±inf``, ``0/0`` is ``nan``, with a RuntimeWarning."""
    return float(np.divide(num, den))


def clamp(v: Number, a: Number = 1, b: Number = 0) -> Number:
    """
    Restrict ``v`` to the closed interval spanned by ``a`` and ``b``.

    The bounds may be given in either order. ``nan`` is returned unchanged.

    Example:
        >>> clamp(1.5)
        1
        >>> clamp(-3, 10, -2)
        -2
    """
    if v != v:
        return v
    mn = min(a, b)
    mx = max(a, b)
    return max(mn, min(v, mx))


def round_to(v: Number, div: Number = 1, func: RoundingFunction = np.floor) -> float:
    """
    Round ``v`` to a multiple of ``div`` using ``func``.

    With the default ``np.floor``, ``nan``/``inf`` input and ``div == 0``
    give non-finite results instead of raising. ``math.floor`` and
    ``math.ceil`` keep Python's behavior and raise on non-finite values.

    Example:
        >>> round_to(17, 5)
        15.0
        >>> round_to(17, 5, math.ceil)
        20.0
    """
    return float(func(ieee_divide(v, div)) * div)


def round_dec(v: Number, dec: int = 2, func: RoundingFunction = np.floor) -> float:
    """
    Round ``v`` to ``dec`` decimal places using ``func``.

    Non-finite input propagates with the default ``np.floor``; see
    :func:`round_to`.

    Example:
        >>> round_dec(3.14159, 2)
        3.14
    """
    factor = 10 ** dec
    return ieee_divide(func(v * factor), factor)


def ilerp(v: Number, a: Number = 0, b: Number = 1) -> float:
    """
    Inverse linear interpolation.

    Clamps ``v`` to the range ``a``..``b`` and returns its fractional position,
    ``0`` at ``a`` and ``1`` at ``b``.

    Args:
        v: Value to locate
        a: Start of the range
        b: End of the range

    Returns:
        Position in ``[0, 1]``; ``nan`` when ``a == b``.
    """
    v = clamp(v, a, b)
    return ieee_divide(v - a, b - a)


def lerp(t: Number, a: Number = 0, b: Number = 1) -> Number:
    """
    Linear interpolation from ``a`` to ``b``.

    ``t`` is clamped to ``[0, 1]`` first, so the result never leaves the range.

    Example:
        >>> lerp(0.5, 0, 10)
        5.0
        >>> lerp(2, 0, 10)
        10
    """
    t = clamp(t)
    return a + (b - a) * t


def map_range(v: Number, a1: Number, b1: Number, a2: Number, b2: Number) -> Number:
    """
    Remap ``v`` from the range ``a1``..``b1`` to ``a2``..``b2``.

    Both ranges are normalized to ``(min, max)`` before mapping, and values
    outside the source range saturate at the destination bounds.

    Example:
        >>> map_range(5, 0, 10, 0, 100)
        50.0
        >>> map_range(15, 0, 10, 0, 100)
        100.0
    """
    mn1, mx1 = min(a1, b1), max(a1, b1)
    mn2, mx2 = min(a2, b2), max(a2, b2)
    return lerp(ilerp(v, mn1, mx1), mn2, mx2)


def random(
    a: Number = 1,
    b: Number = 0,
    dec: int = 2,
    func: RoundingFunction = np.floor,
    rng: Optional[np.random.Generator] = None,
) -> float:
    """
    Uniform random value between ``a`` and ``b`` (either order).

    Args:
        a: One end of the range
        b: Other end of the range
        dec: Decimal places kept in the result
        func: Rounding function applied by :func:`round_dec`
        rng: Generator to draw from. Defaults to the module generator,
            see :func:`seed`.

    Returns:
        A value in ``[min(a, b), max(a, b)]`` rounded to ``dec`` places.
    """
    rng = rng if rng is not None else _rng
    mn, mx = min(a, b), max(a, b)
    return round_dec(rng.random() * (mx - mn) + mn, dec, func)


def rand_int(
    a: Number = 1,
    b: Number = 0,
    func: RoundingFunction = np.floor,
    rng: Optional[np.random.Generator] = None,
) -> Number:
    """
    Random integer between ``a`` and ``b``; :func:`random` with ``dec=0``.

    Returns an ``int``, or the non-finite float when a bound is ``nan``/``inf``.
    """
    value = random(a, b, 0, func, rng)
    return int(value) if math.isfinite(value) else value


# ---------------------------------------------------------------------------
# Vectorized variants
# ---------------------------------------------------------------------------

def np_clamp(v: ArrayLike, a: ArrayLike = 1, b: ArrayLike = 0) -> NDArray:
    """Vectorized :func:`clamp`. ``nan`` entries stay ``nan``."""
    return np.clip(np.asarray(v, dtype=float), np.minimum(a, b), np.maximum(a, b))


def np_ilerp(v: ArrayLike, a: ArrayLike = 0, b: ArrayLike = 1) -> NDArray:
    """Vectorized :func:`ilerp`."""
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    v = np_clamp(v, a, b)
    return np.divide(v - a, b - a)


def np_lerp(t: ArrayLike, a: ArrayLike = 0, b: ArrayLike = 1) -> NDArray:
    """Vectorized :func:`lerp`."""
    t = np_clamp(t)
    a = np.asarray(a, dtype=float)
    return a + (np.asarray(b, dtype=float) - a) * t


def np_map_range(
    v: ArrayLike,
    a1: ArrayLike,
    b1: ArrayLike,
    a2: ArrayLike,
    b2: ArrayLike,
) -> NDArray:
    """Vectorized :func:`map_range`."""
    t = np_ilerp(v, np.minimum(a1, b1), np.maximum(a1, b1))
    return np_lerp(t, np.minimum(a2, b2), np.maximum(a2, b2))
