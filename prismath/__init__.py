"""
Prismath - Vector, Color and Scalar Math Utilities
==================================================

A small library of geometry and color helpers for graphics and animation code.

Key Features
------------
- Mutable 3D ``Vector`` with in-place fluent arithmetic and non-mutating
  class-level counterparts
- ``Color`` over a packed ``0xRRGGBB`` integer with alpha, RGB/hex/HSL views
- RGB ↔ HSL conversions with scalar and vectorized (numpy) implementations
- Scalar helpers: clamp, rounding, lerp/inverse lerp, range mapping, random

Quick Start
-----------
>>> from prismath import Vector, Color, map_range
>>>
>>> v = Vector(3, 4)
>>> v.magnitude
5.0
>>> Color.from_hex("#f00").hsl
HSLObject(color=16711680, h=0.0, s=100.0, l=50.0)
>>> map_range(5, 0, 10, 0, 100)
50.0

Modules
-------
- fmath: scalar math helpers and their ``np_`` variants
- vectors: the Vector type
- colors: the Color type
- conversions: RGB/HSL/hex conversion functions
- types: shape contracts and format scales
"""

from .vectors import Vector
from .colors import Color
from .conversions import HexParseError
from .types import (
    FormatType,
    Point,
    PointLike,
    ColorObject,
    RGBObject,
    HSLObject,
    HexObject,
)
from .fmath import (
    RAD2DEG,
    DEG2RAD,
    clamp,
    round_to,
    round_dec,
    map_range,
    ilerp,
    lerp,
    random,
    rand_int,
    seed,
    np_clamp,
    np_ilerp,
    np_lerp,
    np_map_range,
)

__version__ = "1.0.0"

__all__ = [
    # Types
    "Vector", "Color",
    "Point", "PointLike",
    "ColorObject", "RGBObject", "HSLObject", "HexObject",
    "FormatType",

    # Errors
    "HexParseError",

    # Scalar math
    "RAD2DEG", "DEG2RAD",
    "clamp", "round_to", "round_dec", "map_range",
    "ilerp", "lerp", "random", "rand_int", "seed",
    "np_clamp", "np_ilerp", "np_lerp", "np_map_range",

    # Version
    "__version__",
]
