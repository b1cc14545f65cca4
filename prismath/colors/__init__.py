from .color import Color
from ..types.shapes import ColorObject, RGBObject, HSLObject, HexObject

__all__ = [
    'Color',
    'ColorObject',
    'RGBObject',
    'HSLObject',
    'HexObject',
]
