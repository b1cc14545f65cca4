from __future__ import annotations
from typing import Callable, NamedTuple, Optional, Protocol, Union

Number = Union[int, float]
RoundingFunction = Callable[[float], Number]


class PointLike(Protocol):
    """Anything with numeric ``x`` and ``y`` (``z`` is read with a 0 fallback)."""
    x: Number
    y: Number


class Point(NamedTuple):
    x: Number
    y: Number
    z: Number = 0


class ColorObject(NamedTuple):
    color: int
    alpha: int


class RGBObject(NamedTuple):
    color: Optional[int]
    r: int
    g: int
    b: int


class HSLObject(NamedTuple):
    color: Optional[int]
    h: float
    s: float
    l: float


class HexObject(NamedTuple):
    color: Optional[int]
    hex: str


def z_of(point: PointLike) -> Number:
    """Return ``point.z``, treating a missing or ``None`` z as 0."""
    z = getattr(point, "z", None)
    return 0 if z is None else z
