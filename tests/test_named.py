import pytest

from tincture import named
from tincture.colors import RgbU8
from tincture.named import SVG_COLORS


def test_table_size_and_types():
    assert len(SVG_COLORS) == 139
    assert all(isinstance(color, RgbU8) for color in SVG_COLORS.values())
    assert all(name == name.lower() for name in SVG_COLORS)


def test_literal_values():
    assert SVG_COLORS["aliceblue"] == RgbU8(0xF0, 0xF8, 0xFF)
    assert SVG_COLORS["lightgrey"] == RgbU8(0xD3, 0xD3, 0xD3)
    assert SVG_COLORS["yellowgreen"] == RgbU8(0x9A, 0xCD, 0x32)
    assert named.CORNFLOWERBLUE == RgbU8(0x64, 0x95, 0xED)


def test_constants_match_mapping():
    for name, color in SVG_COLORS.items():
        assert getattr(named, name.upper()) is color


def test_aliases_share_values():
    assert named.AQUA == named.CYAN
    assert named.FUCHSIA == named.MAGENTA


def test_mapping_is_read_only():
    with pytest.raises(TypeError):
        SVG_COLORS["red"] = RgbU8(0, 0, 0)


def test_named_colors_convert():
    assert named.RED.to_hsv() == named.RED.to_hsv("f32")
    assert named.RED.to_hsv().h == 0.0
    assert named.WHITE.to_hsv().s == 0.0
