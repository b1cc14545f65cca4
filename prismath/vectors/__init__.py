from .vector import Vector, dualmethod
from ..types.shapes import Point, PointLike

__all__ = [
    'Vector',
    'dualmethod',
    'Point',
    'PointLike',
]
