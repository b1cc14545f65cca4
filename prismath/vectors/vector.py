from __future__ import annotations
import math
from numbers import Real
from types import MethodType
from typing import Callable, Iterator, Optional, Union

import numpy as np
from numpy import ndarray as NDArray
from numpy.typing import ArrayLike

from .. import fmath
from ..types.shapes import Number, Point, PointLike, z_of

Operand = Union[Number, PointLike]


class dualmethod:
    """
    A method that behaves differently on the class and on an instance.

    ``obj.name(...)`` calls the decorated instance method, while
    ``Cls.name(...)`` calls the function registered with :meth:`classlevel`,
    which receives the class as its first argument.
    """

    def __init__(self, method: Callable) -> None:
        self.method = method
        self.static: Optional[Callable] = None
        self.__doc__ = method.__doc__

    def classlevel(self, func: Callable) -> dualmethod:
        self.static = func
        return self

    def __get__(self, instance, owner):
        if instance is None:
            if self.static is None:
                return self.method
            return MethodType(self.static, owner)
        return MethodType(self.method, instance)


def _components(a: Operand, b: Optional[Number], c: Optional[Number]) -> Point:
    """
    Resolve the operand of an arithmetic call into x, y, z.

    A point-like ``a`` is used component-wise. A number ``a`` fills any of
    ``b``/``c`` left as ``None``; an explicit 0 is kept.
    """
    if isinstance(a, Real):
        return Point(
            a,
            a if b is None else b,
            a if c is None else c,
        )
    if hasattr(a, "x") and hasattr(a, "y"):
        if b is not None or c is not None:
            raise TypeError("Extra components are not allowed with a vector operand")
        return Point(a.x, a.y, z_of(a))
    raise TypeError(f"Unsupported operand type: {type(a).__name__}")


def _is_operand(value: object) -> bool:
    return isinstance(value, Real) or (hasattr(value, "x") and hasattr(value, "y"))


class Vector:
    """
    A mutable x, y, z vector.

    Instance arithmetic (``add``, ``sub``, ``mult``, ``div``, ``normalize``)
    works in place and returns ``self`` for chaining. The same names called on
    the class take two operands and return a new vector, leaving both intact.

    Example:
        >>> v = Vector(1, 2)
        >>> v.mult(2).add(1, 0, 0)
        Vector(x=3, y=4, z=0)
        >>> Vector.add(v, Vector(1, 1, 1))
        Vector(x=4, y=5, z=1)
    """
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: Number, y: Number, z: Optional[Number] = None) -> None:
        self.x = x
        self.y = y
        self.z = 0 if z is None else z

    # ------------------ VIEWS ------------------
    @property
    def point(self) -> Point:
        return Point(self.x, self.y, self.z)

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.sqr_magnitude)

    @property
    def sqr_magnitude(self) -> Number:
        return self.x * self.x + self.y * self.y + self.z * self.z

    @property
    def normalized(self) -> Vector:
        """A unit-length copy. Zero vectors give nan components."""
        return self.copy().normalize()

    def normalize(self) -> Vector:
        """Scale to unit length in place. A zero vector becomes all nan."""
        return self.div(self.magnitude)

    def copy(self) -> Vector:
        return self.__class__(self.x, self.y, self.z)

    def to_array(self) -> NDArray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    # ------------------ ARITHMETIC ------------------
    @dualmethod
    def add(self, a: Operand, b: Optional[Number] = None, c: Optional[Number] = None) -> Vector:
        """Add a vector, three components, or one broadcast number in place."""
        x, y, z = _components(a, b, c)
        self.x += x
        self.y += y
        self.z += z
        return self

    @add.classlevel
    def add(cls, a: PointLike, b: Operand) -> Vector:
        return cls.from_vector(a).add(b)

    @dualmethod
    def sub(self, a: Operand, b: Optional[Number] = None, c: Optional[Number] = None) -> Vector:
        """Subtract a vector, three components, or one broadcast number in place."""
        x, y, z = _components(a, b, c)
        self.x -= x
        self.y -= y
        self.z -= z
        return self

    @sub.classlevel
    def sub(cls, a: PointLike, b: Operand) -> Vector:
        return cls.from_vector(a).sub(b)

    @dualmethod
    def mult(self, a: Operand, b: Optional[Number] = None, c: Optional[Number] = None) -> Vector:
        """Multiply component-wise in place; ``v.mult(2)`` scales every axis."""
        x, y, z = _components(a, b, c)
        self.x *= x
        self.y *= y
        self.z *= z
        return self

    @mult.classlevel
    def mult(cls, a: PointLike, b: Operand) -> Vector:
        return cls.from_vector(a).mult(b)

    @dualmethod
    def div(self, a: Operand, b: Optional[Number] = None, c: Optional[Number] = None) -> Vector:
        """Divide component-wise in place. Zero divisors give inf/nan."""
        x, y, z = _components(a, b, c)
        self.x = fmath.ieee_divide(self.x, x)
        self.y = fmath.ieee_divide(self.y, y)
        self.z = fmath.ieee_divide(self.z, z)
        return self

    @div.classlevel
    def div(cls, a: PointLike, b: Operand) -> Vector:
        return cls.from_vector(a).div(b)

    # ------------------ CLASS HELPERS ------------------
    @classmethod
    def from_vector(cls, v: PointLike) -> Vector:
        return cls(v.x, v.y, z_of(v))

    @classmethod
    def from_array(cls, arr: ArrayLike) -> Vector:
        """Build from a 2 or 3 element array-like."""
        values = np.asarray(arr, dtype=np.float64).ravel()
        if values.size not in (2, 3):
            raise ValueError(f"Vector expects 2 or 3 components, got {values.size}")
        return cls(*(float(v) for v in values))

    @staticmethod
    def sqr_dist(a: PointLike, b: PointLike) -> Number:
        x = b.x - a.x
        y = b.y - a.y
        z = z_of(b) - z_of(a)
        return x * x + y * y + z * z

    @staticmethod
    def dist(a: PointLike, b: PointLike) -> float:
        return math.sqrt(Vector.sqr_dist(a, b))

    @staticmethod
    def dot(a: PointLike, b: PointLike) -> Number:
        return a.x * b.x + a.y * b.y + z_of(a) * z_of(b)

    @classmethod
    def lerp(cls, a: PointLike, b: PointLike, t: Number) -> Vector:
        """Point between ``a`` and ``b``; ``t`` is clamped to [0, 1]."""
        return cls(
            fmath.lerp(t, a.x, b.x),
            fmath.lerp(t, a.y, b.y),
            fmath.lerp(t, z_of(a), z_of(b)),
        )

    # ------------------ PYTHON PROTOCOL ------------------
    def __iter__(self) -> Iterator[Number]:
        yield self.x
        yield self.y
        yield self.z

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(x={self.x!r}, y={self.y!r}, z={self.z!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.point == other.point

    __hash__ = None  # mutable

    def __neg__(self) -> Vector:
        return self.__class__(-self.x, -self.y, -self.z)

    # Foreign operands return NotImplemented
    def __add__(self, other: Operand) -> Vector:
        if not _is_operand(other):
            return NotImplemented
        return self.copy().add(other)

    __radd__ = __add__

    def __sub__(self, other: Operand) -> Vector:
        if not _is_operand(other):
            return NotImplemented
        return self.copy().sub(other)

    def __rsub__(self, other: Operand) -> Vector:
        if not _is_operand(other):
            return NotImplemented
        return (-self).add(other)

    def __mul__(self, other: Operand) -> Vector:
        if not _is_operand(other):
            return NotImplemented
        return self.copy().mult(other)

    __rmul__ = __mul__

    def __truediv__(self, other: Operand) -> Vector:
        if not _is_operand(other):
            return NotImplemented
        return self.copy().div(other)

    def __iadd__(self, other: Operand) -> Vector:
        if not _is_operand(other):
            return NotImplemented
        return self.add(other)

    def __isub__(self, other: Operand) -> Vector:
        if not _is_operand(other):
            return NotImplemented
        return self.sub(other)

    def __imul__(self, other: Operand) -> Vector:
        if not _is_operand(other):
            return NotImplemented
        return self.mult(other)

    def __itruediv__(self, other: Operand) -> Vector:
        if not _is_operand(other):
            return NotImplemented
        return self.div(other)
