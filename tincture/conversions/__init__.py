"""
tincture color space conversions
================================

Scalar algorithms:
    unit_rgb_to_hsv(r, g, b)
        Unit RGB to HSV, arithmetic in the inputs' dtype
    hsv_to_unit_rgb(h, s, v)
        HSV to unit RGB, double precision

Packed integers:
    rgb_from_u32(value, channel)   0x??RRGGBB
    rgb_from_u64(value, channel)   0x????RRRRGGGGBBBB
    rgb_to_u32(color) / rgb_to_u64(color)

Capability entry point:
    to_rgb(value, channel)
        Delegates to ``value.to_rgb`` or unpacks np.uint32 / np.uint64
"""

from .to_hsv import unit_rgb_to_hsv
from .to_rgb import hsv_to_unit_rgb
from .packed import rgb_from_u32, rgb_from_u64, rgb_to_u32, rgb_to_u64
from .wrapper import SupportsToRgb, to_rgb

__all__ = [
    'unit_rgb_to_hsv',
    'hsv_to_unit_rgb',
    'rgb_from_u32',
    'rgb_from_u64',
    'rgb_to_u32',
    'rgb_to_u64',
    'SupportsToRgb',
    'to_rgb',
]
