"""
Color Conversions
=================

Scalar and vectorized (numpy) helpers behind :class:`prismath.colors.Color`.

RGB ↔ packed integer:
    pack_rgb(r, g, b), unpack_rgb(color), np_unpack_rgb(colors)

RGB → HSL:
    unit_rgb_to_hsl(r, g, b), np_unit_rgb_to_hsl(r, g, b)

HSL → RGB:
    hsl_to_unit_rgb(h, s, l), np_hsl_to_unit_rgb(h, s, l)

Hex strings:
    parse_hex(text), format_hex(color, alpha=None), HexParseError

All RGB/HSL functions work on unit floats: channels, saturation and
lightness in [0, 1], hue in degrees [0, 360).

Examples
--------
>>> from prismath.conversions import unit_rgb_to_hsl, hsl_to_unit_rgb
>>> unit_rgb_to_hsl(1.0, 0.0, 0.0)
(0.0, 1.0, 0.5)
>>> hsl_to_unit_rgb(120, 1.0, 0.5)
(0.0, 1.0, 0.0)
"""

from .packing import pack_rgb, unpack_rgb, np_unpack_rgb
from .to_hsl import unit_rgb_to_hsl, np_unit_rgb_to_hsl
from .to_rgb import hsl_to_unit_rgb, np_hsl_to_unit_rgb, normalize_hue
from .hex import parse_hex, format_hex, expand_hex, HexParseError

__all__ = [
    'pack_rgb',
    'unpack_rgb',
    'np_unpack_rgb',

    'unit_rgb_to_hsl',
    'np_unit_rgb_to_hsl',

    'hsl_to_unit_rgb',
    'np_hsl_to_unit_rgb',
    'normalize_hue',

    'parse_hex',
    'format_hex',
    'expand_hex',
    'HexParseError',
]
