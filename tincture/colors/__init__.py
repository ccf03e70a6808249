"""
tincture color classes
======================

Immutable RGB and HSV values over a channel representation.

>>> from tincture.colors import RgbU8
>>> red = RgbU8(0x99, 0x00, 0x00)
>>> red.to_hsv().value
(np.float32(0.0), np.float32(1.0), np.float32(0.6))
>>> red.convert_to("u16").value
(np.uint16(39321), np.uint16(0), np.uint16(0))
>>> red.inverse()
RgbU8(r=102, g=255, b=255)

RGB variants: RgbU8, RgbU16, RgbU32 (integral) and RgbF32, RgbF64 (floating).
HSV variants: HsvF32, HsvF64 (floating only).

Importing this package attaches ``Rgb.to_hsv`` and ``Hsv.to_rgb``.
"""

from .color_base import ColorBase
from .rgb import Rgb, RgbU8, RgbU16, RgbU32, RgbF32, RgbF64, rgb, rgb_registry
from .hsv import Hsv, HsvF32, HsvF64, hsv_registry, get_hsv_class
from .color import get_color_class, unified_tuple_to_class


__all__ = [
    'ColorBase',
    'Rgb',
    'RgbU8',
    'RgbU16',
    'RgbU32',
    'RgbF32',
    'RgbF64',
    'rgb',
    'rgb_registry',
    'Hsv',
    'HsvF32',
    'HsvF64',
    'hsv_registry',
    'get_hsv_class',
    'get_color_class',
]
