import numpy as np
import pytest

from tincture.colors import (
    Rgb, RgbU8, RgbU16, RgbU32, RgbF32, RgbF64, HsvF32,
    rgb, rgb_registry, get_color_class,
)
from tincture.types.channel_type import ChannelType
from tincture.errors import ChannelRangeError


def test_construct_and_components():
    color = RgbU8(0x10, 0x20, 0x30)
    assert (color.r, color.g, color.b) == (0x10, 0x20, 0x30)
    assert all(isinstance(c, np.uint8) for c in color.value)
    assert list(color) == [0x10, 0x20, 0x30]
    assert color.channel_type == ChannelType.U8


def test_float_channels_accept_out_of_range():
    color = RgbF32(1.5, -0.25, 0.5)
    assert color.r == np.float32(1.5)
    assert color.g == np.float32(-0.25)


def test_integral_channels_reject_unrepresentable():
    with pytest.raises(ChannelRangeError):
        RgbU8(256, 0, 0)
    with pytest.raises(ChannelRangeError):
        RgbU16(0, -1, 0)


def test_immutability():
    color = RgbU8(1, 2, 3)
    with pytest.raises(AttributeError):
        color._value = (0, 0, 0)
    with pytest.raises(AttributeError):
        color.r = 5
    with pytest.raises(AttributeError):
        color.extra = 1
    assert color == RgbU8(1, 2, 3)


def test_equality_and_hash():
    assert RgbU8(1, 2, 3) == RgbU8(1, 2, 3)
    assert RgbU8(1, 2, 3) != RgbU8(1, 2, 4)
    assert RgbU8(1, 2, 3) != RgbU16(1, 2, 3)
    assert RgbU8(0, 0, 0) != HsvF32(0, 0, 0)
    assert len({RgbU8(1, 2, 3), RgbU8(1, 2, 3), RgbU8(3, 2, 1)}) == 2


def test_repr():
    assert repr(RgbU8(1, 2, 3)) == "RgbU8(r=1, g=2, b=3)"
    assert repr(RgbF64(0.5, 0.0, 1.0)) == "RgbF64(r=0.5, g=0.0, b=1.0)"


def test_clamp_scalar():
    assert RgbU8(0, 128, 255).clamp_scalar(10, 200) == RgbU8(10, 128, 200)
    assert RgbF32(-0.5, 0.5, 1.5).clamp_scalar(0.0, 1.0) == RgbF32(0.0, 0.5, 1.0)


def test_clamp_scalar_containment():
    for lo, hi in ((0, 255), (30, 60), (100, 100)):
        for v in range(0, 256, 15):
            out = RgbU8(v, 255 - v, v // 2).clamp_scalar(lo, hi)
            assert all(lo <= c <= hi for c in out)


def test_clamp_scalar_swapped_bounds_warns():
    with pytest.warns(RuntimeWarning):
        out = RgbU8(0, 50, 255).clamp_scalar(200, 10)
    assert out == RgbU8(10, 50, 200)


def test_clamp_componentwise():
    lo = RgbU8(10, 20, 30)
    hi = RgbU8(100, 40, 60)
    assert RgbU8(0, 50, 45).clamp_componentwise(lo, hi) == RgbU8(10, 40, 45)


def test_clamp_componentwise_converts_bounds():
    lo = RgbF64(0.0, 0.5, 0.0)
    hi = RgbF64(1.0, 1.0, 0.0)
    out = RgbU8(0x80, 0x10, 0xFF).clamp_componentwise(lo, hi)
    assert out == RgbU8(0x80, 0x80, 0x00)


def test_inverse():
    assert RgbU8(0x99, 0x00, 0xFF).inverse() == RgbU8(0x66, 0xFF, 0x00)
    assert RgbU16(0, 0x1234, 0xFFFF).inverse() == RgbU16(0xFFFF, 0xEDCB, 0)


def test_inverse_is_involution():
    for v in range(0, 256, 3):
        color = RgbU8(v, 255 - v, (v * 7) % 256)
        assert color.inverse().inverse() == color
    color = RgbF32(0.1, 0.5, 0.9)
    assert np.allclose(color.inverse().inverse().to_array(), color.to_array())


def test_normalize():
    assert RgbF32(1.5, -0.5, 0.25).normalize() == RgbF32(1.0, 0.0, 0.25)
    color = RgbU8(0, 128, 255)
    assert color.normalize() == color


def test_to_array():
    arr = RgbU16(1, 2, 3).to_array()
    assert isinstance(arr, np.ndarray)
    assert arr.shape == (3,)
    assert arr.dtype == np.uint16
    assert arr.tolist() == [1, 2, 3]


def test_convert_to_self_is_identity():
    for color in (RgbU8(0xA0, 0x00, 0xFF), RgbU16(1, 0x8000, 0xFFFF),
                  RgbU32(0, 7, 0xFFFFFFFF), RgbF32(0.1, 1.5, -0.2), RgbF64(0.3, 0.6, 0.9)):
        assert color.convert_to(color.channel_type) == color


def test_convert_to_other_representation():
    wide = RgbU8(0xA0, 0xA0, 0xA0).convert_to("u16")
    assert isinstance(wide, RgbU16)
    assert wide == RgbU16(0xA0A0, 0xA0A0, 0xA0A0)
    assert wide.convert_to(ChannelType.U8) == RgbU8(0xA0, 0xA0, 0xA0)

    unit = RgbU8(0x00, 0xFF, 0x99).convert_to(np.float64)
    assert isinstance(unit, RgbF64)
    assert np.allclose(unit.to_array(), [0.0, 1.0, 0.6])


def test_to_rgb_matches_convert_to():
    color = RgbU8(0x12, 0x34, 0x56)
    assert color.to_rgb("u16") == color.convert_to("u16")
    assert color.to_rgb() == color


def test_rgb_factory_and_registry():
    assert rgb(1, 2, 3) == RgbU8(1, 2, 3)
    assert isinstance(rgb(0.1, 0.2, 0.3, "f32"), RgbF32)
    assert set(rgb_registry) == set(ChannelType)
    assert all(issubclass(cls, Rgb) for cls in rgb_registry.values())


def test_get_color_class():
    assert get_color_class("rgb", "u16") is RgbU16
    assert get_color_class("HSV", "f32") is HsvF32
    with pytest.raises(ValueError):
        get_color_class("hsv", "u8")
