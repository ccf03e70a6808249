import pytest

from tincture.colors import RgbU8, RgbU16, RgbF64
from tincture.conversions import rgb_from_u32, rgb_from_u64, rgb_to_u32, rgb_to_u64
from tincture.named import SVG_COLORS


def test_rgb_from_u32():
    assert rgb_from_u32(0xFF8000) == RgbU8(0xFF, 0x80, 0x00)
    assert rgb_from_u32(0) == RgbU8(0, 0, 0)


def test_rgb_from_u32_ignores_top_byte():
    assert rgb_from_u32(0xAB112233) == RgbU8(0x11, 0x22, 0x33)


def test_rgb_from_u32_target_channel():
    assert rgb_from_u32(0x112233, "u16") == RgbU16(0x1111, 0x2222, 0x3333)
    unit = rgb_from_u32(0xFF0000, "f64")
    assert unit == RgbF64(1.0, 0.0, 0.0)


def test_rgb_from_u64():
    assert rgb_from_u64(0x0000FFFF80000000) == RgbU16(0xFFFF, 0x8000, 0x0000)
    assert rgb_from_u64(0xDEAD000100020003) == RgbU16(1, 2, 3)
    assert rgb_from_u64(0xA0A0A0A0A0A0, "u8") == RgbU8(0xA0, 0xA0, 0xA0)


def test_rejects_values_outside_width():
    with pytest.raises(ValueError):
        rgb_from_u32(-1)
    with pytest.raises(ValueError):
        rgb_from_u32(0x100000000)
    with pytest.raises(ValueError):
        rgb_from_u64(1 << 64)


def test_rgb_to_u32():
    assert rgb_to_u32(RgbU8(0x11, 0x22, 0x33)) == 0x112233
    assert rgb_to_u32(RgbU16(0xFFFF, 0, 0x8080)) == 0xFF0080


def test_rgb_to_u64():
    assert rgb_to_u64(RgbU16(1, 2, 3)) == 0x000100020003
    assert rgb_to_u64(RgbU8(0xA0, 0, 0xFF)) == 0xA0A00000FFFF


def test_named_colors_round_trip():
    for color in SVG_COLORS.values():
        assert rgb_from_u32(rgb_to_u32(color)) == color
        assert rgb_from_u64(rgb_to_u64(color), "u8") == color
