import pytest

from prismath.colors import Color, ColorObject, RGBObject, HSLObject, HexObject
from prismath.conversions import HexParseError
from prismath.types import FormatType
from ..samples import samples_rgb_hsl, samples_hex


def test_from_rgb_channels():
    red = Color.from_rgb(255, 0, 0)
    assert red.red == 255
    assert red.green == 0
    assert red.blue == 0
    assert red.alpha == 255
    assert red.color == 0xFF0000


def test_constructor_takes_color_object():
    c = Color(ColorObject(color=0x102030, alpha=7))
    assert c.rgb == RGBObject(0x102030, 0x10, 0x20, 0x30)
    assert c.alpha == 7


def test_color_is_read_only_alpha_is_not():
    c = Color.from_rgb(1, 2, 3)
    with pytest.raises(AttributeError):
        c.color = 0
    c.alpha = 128
    assert c.alpha == 128
    assert c.color == 0x010203


def test_from_hex_shorthand():
    c = Color.from_hex("f00")
    r, g, b = c.rgb.r, c.rgb.g, c.rgb.b
    assert (r, g, b) == (255, 0, 0)
    assert c.alpha == 0xFF


def test_from_hex_appends_opaque_alpha():
    assert Color.from_hex("ff0000").alpha == 0xFF
    assert Color.from_hex("#ff000080").alpha == 0x80
    assert Color.from_hex("#0f08").alpha == 0x88


def test_from_hex_rejects_garbage():
    with pytest.raises(HexParseError):
        Color.from_hex("#xyz")


def test_hex_is_zero_padded():
    for color, expected in samples_hex.items():
        c = Color(ColorObject(color, 255))
        assert c.hex == HexObject(color, expected)
    assert Color.from_rgb(0, 0, 255, 0).hex.hex == "#0000ff00"
    assert Color.from_rgb(0, 0, 255).to_hex(include_alpha=False) == "#0000ff"


def test_hex_round_trip():
    c = Color.from_hex("#0a0b0c0d")
    assert Color.from_hex(c.hex.hex) == c


def test_hsl_pure_red():
    hsl = Color.from_rgb(255, 0, 0).hsl
    assert hsl == HSLObject(0xFF0000, 0.0, 100.0, 50.0)


def test_hsl_accessors():
    c = Color.from_rgb(128, 64, 32)
    assert abs(c.hue - 20.0) < 1e-9
    assert abs(c.saturation - 60.0) < 1e-9
    assert abs(c.lightness - 100 * (128 + 32) / 2 / 255) < 1e-9


def test_hsl_matches_samples():
    for (r, g, b), (h_exp, s_exp, l_exp) in samples_rgb_hsl.items():
        c = Color.from_rgb(round(r * 255), round(g * 255), round(b * 255))
        h, s, l = c.to_hsl(FormatType.FLOAT)[1:]
        assert abs(h - h_exp) < .5
        assert abs(s - s_exp) < 1/255
        assert abs(l - l_exp) < 1/255


def test_to_hsl_int_format():
    hsl = Color.from_rgb(0, 255, 0).to_hsl(FormatType.INT)
    assert hsl.h == 120
    assert hsl.s == 255
    assert hsl.l == 128


def test_to_hsl_accepts_format_string():
    assert Color.from_rgb(0, 0, 255).to_hsl("float").s == 1.0
    with pytest.raises(ValueError):
        Color.from_rgb(0, 0, 255).to_hsl("degrees")


def test_from_hsl_primary_colors():
    assert Color.from_hsl(0, 100, 50).rgb[1:] == (255, 0, 0)
    assert Color.from_hsl(120, 100, 50).rgb[1:] == (0, 255, 0)
    assert Color.from_hsl(240, 100, 50).rgb[1:] == (0, 0, 255)
    assert Color.from_hsl(360, 100, 50).rgb[1:] == (255, 0, 0)


def test_from_hsl_defaults():
    c = Color.from_hsl(0)
    # s=50%, l=50%: chroma 0.5 around a 0.5 midpoint
    assert c.rgb[1:] == (191, 64, 64)
    assert c.alpha == 255


def test_from_hsl_alpha_scale():
    assert Color.from_hsl(0, 100, 50, 50).alpha == 128
    assert Color.from_hsl(0, 1.0, 0.5, 0.0, format_type=FormatType.FLOAT).alpha == 0


def test_from_hsl_round_trip():
    original = Color.from_rgb(128, 64, 32)
    hsl = original.hsl
    assert Color.from_hsl(hsl.h, hsl.s, hsl.l) == original


def test_from_hsl_out_of_range_warns_and_clamps():
    with pytest.warns(UserWarning):
        c = Color.from_hsl(0, 150, 50)
    assert c.rgb[1:] == (255, 0, 0)


def test_with_alpha_returns_new_color():
    c = Color.from_rgb(1, 2, 3)
    d = c.with_alpha(9)
    assert d.alpha == 9
    assert d.color == c.color
    assert c.alpha == 255


def test_equality_and_repr():
    assert Color.from_rgb(1, 2, 3) == Color.from_hex("010203")
    assert Color.from_rgb(1, 2, 3) != Color.from_rgb(1, 2, 3, 0)
    assert repr(Color.from_rgb(255, 0, 0)) == "Color(color='#ff0000', alpha=255)"


def test_from_hsl_default_alpha_is_opaque_on_every_scale():
    assert Color.from_hsl(0, 100, 50).alpha == 255
    assert Color.from_hsl(0, 1.0, 0.5, format_type=FormatType.FLOAT).alpha == 255
    assert Color.from_hsl(0, 255, 128, format_type=FormatType.INT).alpha == 255
    assert Color.from_hsl(0, 255, 128, 0, format_type=FormatType.INT).alpha == 0


def test_from_hsl_out_of_range_alpha_warns_and_clamps():
    with pytest.warns(UserWarning):
        c = Color.from_hsl(0, 100, 50, 200)
    assert c.alpha == 255
    with pytest.warns(UserWarning):
        c = Color.from_hsl(0, 100, 50, -10)
    assert c.alpha == 0


def test_to_hsl_int_hue_wraps_below_360():
    hsl = Color.from_rgb(255, 0, 1).to_hsl(FormatType.INT)
    assert hsl.h == 0
    assert 359 < Color.from_rgb(255, 0, 1).hue < 360
