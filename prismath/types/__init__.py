from .format_type import FormatType, max_non_hue, HUE_360, ALPHA_MAX
from .shapes import (
    Number,
    RoundingFunction,
    PointLike,
    Point,
    ColorObject,
    RGBObject,
    HSLObject,
    HexObject,
    z_of,
)

__all__ = [
    'FormatType', 'max_non_hue', 'HUE_360', 'ALPHA_MAX',
    'Number', 'RoundingFunction', 'PointLike', 'Point',
    'ColorObject', 'RGBObject', 'HSLObject', 'HexObject', 'z_of',
]
