import pytest

from prismath.conversions import parse_hex, format_hex, expand_hex, HexParseError
from prismath.conversions import pack_rgb, unpack_rgb, np_unpack_rgb
from ..samples import samples_hex


def test_expand_hex_shorthand():
    assert expand_hex("f00") == "ff0000ff"
    assert expand_hex("f008") == "ff000088"
    assert expand_hex("123456") == "123456ff"
    assert expand_hex("12345678") == "12345678"


def test_parse_hex_forms():
    assert parse_hex("#f00") == (0xFF0000, 0xFF)
    assert parse_hex("f008") == (0xFF0000, 0x88)
    assert parse_hex("#00ff00") == (0x00FF00, 0xFF)
    assert parse_hex("0000ff80") == (0x0000FF, 0x80)


def test_parse_hex_uppercase():
    assert parse_hex("#ABCDEF") == (0xABCDEF, 0xFF)


@pytest.mark.parametrize("text", ["", "#ff", "#12345", "1234567", "#ggg", "12 456", "#0000zz"])
def test_parse_hex_rejects_malformed(text):
    with pytest.raises(HexParseError):
        parse_hex(text)


def test_hex_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_hex("nope")


def test_format_hex_pads():
    for color, expected in samples_hex.items():
        assert format_hex(color, 0xFF) == expected
    assert format_hex(0xFF) == "#0000ff"
    assert format_hex(0xFF, 0) == "#0000ff00"


def test_pack_unpack_rgb():
    assert pack_rgb(255, 0, 0) == 0xFF0000
    assert pack_rgb(0x12, 0x34, 0x56) == 0x123456
    assert unpack_rgb(0x123456) == (0x12, 0x34, 0x56)


def test_np_unpack_rgb():
    out = np_unpack_rgb([0xFF0000, 0x00FF00, 0x123456])
    assert out.shape == (3, 3)
    assert out.tolist() == [[255, 0, 0], [0, 255, 0], [0x12, 0x34, 0x56]]


@pytest.mark.parametrize("text", ["ff#000", "##f00", "f0#0"])
def test_parse_hex_only_strips_leading_hash(text):
    with pytest.raises(HexParseError):
        parse_hex(text)
