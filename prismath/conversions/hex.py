from string import hexdigits
from typing import Optional

_HEX_DIGITS = frozenset(hexdigits)
SUPPORTED_LENGTHS = (3, 4, 6, 8)


class HexParseError(ValueError):
    """Raised when a string is not a 3, 4, 6 or 8 digit hex color."""


def expand_hex(digits: str) -> str:
    """
    Expand a hex color body (no ``#``) to its 8-digit ``rrggbbaa`` form.

    3 and 4 digit shorthands double every digit; 3 and 6 digit forms get an
    opaque ``ff`` alpha.
    """
    length = len(digits)
    if length == 3:
        digits += "f"
    if length in (3, 4):
        return "".join(c * 2 for c in digits)
    if length == 6:
        return digits + "ff"
    return digits


def parse_hex(text: str) -> tuple[int, int]:
    """
    Parse a hex color string.

    Args:
        text: ``rgb``, ``rgba``, ``rrggbb`` or ``rrggbbaa``, with or without a leading ``#``

    Returns:
        (packed color, alpha) where color is ``0xRRGGBB`` and alpha is 0-255

    Raises:
        HexParseError: on an unsupported length or a non-hex character
    """
    digits = text.removeprefix("#")
    if len(digits) not in SUPPORTED_LENGTHS:
        raise HexParseError(
            f"Hex color must have {SUPPORTED_LENGTHS} digits, got {len(digits)} in {text!r}"
        )
    if not _HEX_DIGITS.issuperset(digits):
        raise HexParseError(f"Invalid hex color {text!r}")

    full = expand_hex(digits)
    return int(full[:-2], 16), int(full[-2:], 16)


def format_hex(color: int, alpha: Optional[int] = None) -> str:
    """Format as ``#rrggbb``, or ``#rrggbbaa`` when ``alpha`` is given."""
    out = f"#{int(color) & 0xFFFFFF:06x}"
    if alpha is not None:
        out += f"{int(alpha) & 0xFF:02x}"
    return out
