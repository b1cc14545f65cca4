from __future__ import annotations
import warnings
from typing import Any, Optional

from .. import fmath
from ..conversions import (
    pack_rgb,
    unpack_rgb,
    unit_rgb_to_hsl,
    hsl_to_unit_rgb,
    parse_hex,
    format_hex,
)
from ..types.format_type import FormatType, max_non_hue, ALPHA_MAX, HUE_360
from ..types.shapes import ColorObject, RGBObject, HSLObject, HexObject, Number


class Color:
    """
    A packed ``0xRRGGBB`` color with a separate alpha byte.

    ``color`` is fixed at construction; ``alpha`` may be reassigned. Channel,
    hex and HSL views are derived from ``color`` on every access.

    Example:
        >>> c = Color.from_hex("#ff8000")
        >>> c.rgb
        RGBObject(color=16744448, r=255, g=128, b=0)
        >>> c.hex.hex
        '#ff8000ff'
    """
    __slots__ = ('_color', 'alpha')

    _READ_ONLY = frozenset({'color', '_color'})

    def __init__(self, obj: ColorObject | Any) -> None:
        super().__setattr__('_color', obj.color)
        self.alpha = obj.alpha

    def __setattr__(self, name, value):
        """Block writes to the packed color after __init__."""
        if name in self._READ_ONLY:
            raise AttributeError(f"{self.__class__.__name__}.color is read-only")
        super().__setattr__(name, value)

    def __repr__(self) -> str:
        return f"Color(color={format_hex(self._color)!r}, alpha={self.alpha!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._color == other._color and self.alpha == other.alpha

    __hash__ = None  # alpha is mutable

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def color(self) -> int:
        return self._color

    @property
    def red(self) -> int:
        return unpack_rgb(self._color)[0]

    @property
    def green(self) -> int:
        return unpack_rgb(self._color)[1]

    @property
    def blue(self) -> int:
        return unpack_rgb(self._color)[2]

    @property
    def rgb(self) -> RGBObject:
        r, g, b = unpack_rgb(self._color)
        return RGBObject(self._color, r, g, b)

    @property
    def hex(self) -> HexObject:
        """``#rrggbbaa``, zero padded and lowercase."""
        return HexObject(self._color, self.to_hex())

    @property
    def hsl(self) -> HSLObject:
        """Hue in degrees, saturation and lightness in percent."""
        return self.to_hsl(FormatType.PERCENTAGE)

    @property
    def hue(self) -> float:
        return self.hsl.h

    @property
    def saturation(self) -> float:
        return self.hsl.s

    @property
    def lightness(self) -> float:
        return self.hsl.l

    # ------------------ DERIVED VALUES ------------------
    def to_hex(self, include_alpha: bool = True) -> str:
        return format_hex(self._color, self.alpha if include_alpha else None)

    def to_hsl(self, format_type: FormatType = FormatType.PERCENTAGE) -> HSLObject:
        """
        Return the HSL decomposition of the packed color.

        Args:
            format_type: Scale of saturation and lightness. INT values are
                rounded to the nearest integer, hue included.

        Returns:
            HSLObject with hue in degrees [0, 360)
        """
        format_type = FormatType(format_type)
        channel_max = max_non_hue[FormatType.INT]
        r, g, b = (channel / channel_max for channel in unpack_rgb(self._color))
        h, s, l = unit_rgb_to_hsl(r, g, b)

        maxval = max_non_hue[format_type]
        s, l = s * maxval, l * maxval
        if format_type == FormatType.INT:
            h, s, l = round(h) % HUE_360, round(s), round(l)
        return HSLObject(self._color, h, s, l)

    def with_alpha(self, alpha: int) -> Color:
        """Return a new Color with the same packed color and ``alpha``."""
        return Color(ColorObject(self._color, alpha))

    # ------------------ FACTORIES ------------------
    @staticmethod
    def from_rgb(r: int, g: int, b: int, a: int = ALPHA_MAX) -> Color:
        return Color(ColorObject(pack_rgb(r, g, b), a))

    @staticmethod
    def from_hsl(
        h: Number,
        s: Number = 50,
        l: Number = 50,
        a: Optional[Number] = None,
        format_type: FormatType = FormatType.PERCENTAGE,
    ) -> Color:
        """
        Build a Color from hue, saturation and lightness.

        Args:
            h: Hue in degrees, any value (wrapped into [0, 360))
            s: Saturation on the ``format_type`` scale
            l: Lightness on the ``format_type`` scale
            a: Alpha on the ``format_type`` scale, stored as a 0-255 byte.
                ``None`` means fully opaque.
            format_type: Scale of ``s``, ``l`` and ``a`` (percent by default)

        Returns:
            New Color with channels rounded to the nearest integer.
        """
        maxval = max_non_hue[FormatType(format_type)]
        unit_s, unit_l = s / maxval, l / maxval
        unit_a = 1.0 if a is None else a / maxval
        if not all(0.0 <= v <= 1.0 for v in (unit_s, unit_l, unit_a)):
            warnings.warn(
                f"HSL components (s={s}, l={l}, a={a}) outside [0, {maxval}], clamping",
                UserWarning,
                stacklevel=2,
            )
            unit_s, unit_l, unit_a = (fmath.clamp(v) for v in (unit_s, unit_l, unit_a))

        r, g, b = hsl_to_unit_rgb(h, unit_s, unit_l)
        channel_max = max_non_hue[FormatType.INT]
        return Color.from_rgb(
            round(r * channel_max),
            round(g * channel_max),
            round(b * channel_max),
            round(unit_a * ALPHA_MAX),
        )

    @staticmethod
    def from_hex(hex: str) -> Color:
        """
        Parse ``rgb``, ``rgba``, ``rrggbb`` or ``rrggbbaa`` (``#`` optional).

        Raises:
            HexParseError: on malformed input
        """
        color, alpha = parse_hex(hex)
        return Color(ColorObject(color, alpha))
