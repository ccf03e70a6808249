"""
Packed integer ↔ RGB.

32-bit values use ``0x??RRGGBB`` (8 bits per channel, top byte ignored).
64-bit values use ``0x????RRRRGGGGBBBB`` (16 bits per channel, top 16 bits
ignored).
"""
from __future__ import annotations

from ..colors.rgb import Rgb, RgbU8, RgbU16
from ..types.channel_type import ChannelType

U32_MAX = 0xFFFFFFFF
U64_MAX = 0xFFFFFFFFFFFFFFFF


def _check_width(value, limit: int, width: int) -> int:
    ivalue = int(value)
    if not 0 <= ivalue <= limit:
        raise ValueError(f"{value!r} does not fit in an unsigned {width}-bit integer")
    return ivalue


def rgb_from_u32(value, channel=ChannelType.U8) -> Rgb:
    packed = _check_width(value, U32_MAX, 32)
    color = RgbU8((packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF)
    return color.convert_to(channel)


def rgb_from_u64(value, channel=ChannelType.U16) -> Rgb:
    packed = _check_width(value, U64_MAX, 64)
    color = RgbU16((packed >> 32) & 0xFFFF, (packed >> 16) & 0xFFFF, packed & 0xFFFF)
    return color.convert_to(channel)


def rgb_to_u32(color: Rgb) -> int:
    r, g, b = (int(c) for c in color.convert_to(ChannelType.U8))
    return (r << 16) | (g << 8) | b


def rgb_to_u64(color: Rgb) -> int:
    r, g, b = (int(c) for c in color.convert_to(ChannelType.U16))
    return (r << 32) | (g << 16) | b
