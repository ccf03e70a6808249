from __future__ import annotations
from typing import Callable, ClassVar, Self, Tuple

import numpy as np

from ..channels import get_channel
from ..errors import UnsupportedConversionError
from ..types.channel_type import ChannelType, HUE_360
from .color_base import ColorBase, ColorSpace, build_registry


class Hsv(ColorBase):
    """Hue in degrees [0, 360), saturation and value in [0, 1]; floating channels only."""
    __slots__ = ()

    mode:   ClassVar[ColorSpace] = "hsv"
    fields: ClassVar[Tuple[str, str, str]] = ("h", "s", "v")

    to_rgb: Callable[..., ColorBase]

    @property
    def h(self) -> np.generic:
        return self._value[0]

    @property
    def s(self) -> np.generic:
        return self._value[1]

    @property
    def v(self) -> np.generic:
        return self._value[2]

    def normalize(self) -> Self:
        """Wrap hue into [0, 360) and clamp saturation and value to [0, 1]."""
        channel = self.channel
        hue = channel.dtype(float(self.h) % HUE_360)
        if hue >= HUE_360:
            hue = channel.dtype(0)
        return self.__class__(hue, channel.normalize(self.s), channel.normalize(self.v))

    def convert_to(self, channel) -> Hsv:
        cls = get_hsv_class(channel)
        return cls(*self._value)


class HsvF32(Hsv):
    __slots__ = ()
    channel_type: ClassVar[ChannelType] = ChannelType.F32


class HsvF64(Hsv):
    __slots__ = ()
    channel_type: ClassVar[ChannelType] = ChannelType.F64


hsv_registry = build_registry(
    HsvF32,
    HsvF64,
)


def get_hsv_class(channel) -> type[Hsv]:
    channel_type = get_channel(channel).channel_type
    cls = hsv_registry.get(channel_type)
    if cls is None:
        raise UnsupportedConversionError(
            f"HSV requires a floating channel, got {channel_type.value}"
        )
    return cls
