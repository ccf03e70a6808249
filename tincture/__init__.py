"""tincture: RGB/HSV colors over integer and floating channel representations."""

from .types.channel_type import ChannelType
from .channels import (
    Channel,
    IntegralChannel,
    FloatChannel,
    U8,
    U16,
    U32,
    F32,
    F64,
    get_channel,
    channel_of,
    clamp,
    invert_channel,
    normalize_channel,
    to_channel,
)
from .colors import (
    ColorBase,
    Rgb,
    RgbU8,
    RgbU16,
    RgbU32,
    RgbF32,
    RgbF64,
    rgb,
    Hsv,
    HsvF32,
    HsvF64,
    get_color_class,
)
from .conversions import (
    unit_rgb_to_hsv,
    hsv_to_unit_rgb,
    rgb_from_u32,
    rgb_from_u64,
    rgb_to_u32,
    rgb_to_u64,
    SupportsToRgb,
    to_rgb,
)
from .named import SVG_COLORS
from .errors import (
    ColorError,
    ChannelRangeError,
    UnsupportedChannelError,
    UnsupportedConversionError,
)

__version__ = "0.1.0"

__all__ = [
    # channels
    "ChannelType",
    "Channel",
    "IntegralChannel",
    "FloatChannel",
    "U8",
    "U16",
    "U32",
    "F32",
    "F64",
    "get_channel",
    "channel_of",
    "clamp",
    "invert_channel",
    "normalize_channel",
    "to_channel",
    # color types
    "ColorBase",
    "Rgb",
    "RgbU8",
    "RgbU16",
    "RgbU32",
    "RgbF32",
    "RgbF64",
    "rgb",
    "Hsv",
    "HsvF32",
    "HsvF64",
    "get_color_class",
    # conversions
    "unit_rgb_to_hsv",
    "hsv_to_unit_rgb",
    "rgb_from_u32",
    "rgb_from_u64",
    "rgb_to_u32",
    "rgb_to_u64",
    "SupportsToRgb",
    "to_rgb",
    # data
    "SVG_COLORS",
    # errors
    "ColorError",
    "ChannelRangeError",
    "UnsupportedChannelError",
    "UnsupportedConversionError",
]
