from __future__ import annotations
from .color_base import ColorBase, ColorSpace
from .rgb import Rgb, rgb_registry
from .hsv import Hsv, hsv_registry, get_hsv_class
from ..channels import F64, get_channel
from ..conversions.to_hsv import unit_rgb_to_hsv
from ..conversions.to_rgb import hsv_to_unit_rgb
from ..types.channel_type import ChannelType

unified_tuple_to_class: dict[tuple[ColorSpace, ChannelType], type[ColorBase]] = {
    **{("rgb", channel_type): cls for channel_type, cls in rgb_registry.items()},
    **{("hsv", channel_type): cls for channel_type, cls in hsv_registry.items()},
}


def rgb_to_hsv(self: Rgb, channel=ChannelType.F32) -> Hsv:
    """
    Convert this color to HSV over a floating channel representation.

    The channels are first rescaled to the target representation and
    normalized into [0, 1], so integer and floating sources share one
    algorithm.

    Args:
        channel: Floating target representation (F32 or F64).

    Returns:
        New Hsv instance.

    Raises:
        UnsupportedConversionError: if ``channel`` is integral.
    """
    cls = get_hsv_class(channel)
    unit = self.convert_to(cls.channel_type).normalize()
    return cls(*unit_rgb_to_hsv(*unit.value))


def hsv_to_rgb(self: Hsv, channel=ChannelType.U8) -> Rgb:
    """Convert this color to RGB over any channel representation."""
    target = get_channel(channel)
    unit = rgb_registry[F64.channel_type](*hsv_to_unit_rgb(*self.value))
    return unit.convert_to(target)


Rgb.to_hsv = rgb_to_hsv
Hsv.to_rgb = hsv_to_rgb


def get_color_class(color_space: str, channel) -> type[ColorBase]:
    channel_type = get_channel(channel).channel_type
    color_class = unified_tuple_to_class.get((color_space.lower(), channel_type))  # type: ignore
    if color_class is None:
        raise ValueError(
            f"Unsupported color space/channel combination: {color_space}/{channel_type.value}"
        )
    return color_class
