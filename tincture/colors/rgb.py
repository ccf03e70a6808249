from __future__ import annotations
from typing import Callable, ClassVar, Self, Tuple

import numpy as np

from ..channels import get_channel
from ..types.channel_type import ChannelType
from ..types.color_types import ChannelValue
from .color_base import ColorBase, ColorSpace, build_registry


class Rgb(ColorBase):
    """
    Red, green and blue over one channel representation.

    Every operation returns a new instance; the concrete subclass fixes the
    representation (``RgbU8``, ``RgbF32``, ...).
    """
    __slots__ = ()

    mode:   ClassVar[ColorSpace] = "rgb"
    fields: ClassVar[Tuple[str, str, str]] = ("r", "g", "b")

    to_hsv: Callable[..., ColorBase]

    @property
    def r(self) -> np.generic:
        return self._value[0]

    @property
    def g(self) -> np.generic:
        return self._value[1]

    @property
    def b(self) -> np.generic:
        return self._value[2]

    def clamp_scalar(self, lo: ChannelValue, hi: ChannelValue) -> Self:
        """Clamp every channel to the same range ``[lo, hi]``."""
        channel = self.channel
        return self.__class__(*(channel.clamp(c, lo, hi) for c in self._value))

    def clamp_componentwise(self, lo: Rgb, hi: Rgb) -> Self:
        """
        Clamp each channel between the matching channels of ``lo`` and ``hi``.

        Bounds stored in another representation are converted to this one first.
        """
        channel = self.channel
        lo = lo.convert_to(self.channel_type)
        hi = hi.convert_to(self.channel_type)
        return self.__class__(*(
            channel.clamp(c, l, h) for c, l, h in zip(self._value, lo.value, hi.value)
        ))

    def inverse(self) -> Self:
        channel = self.channel
        return self.__class__(*(channel.invert(c) for c in self._value))

    def normalize(self) -> Self:
        """Clamp channels into the representation's range (a no-op for integers)."""
        channel = self.channel
        return self.__class__(*(channel.normalize(c) for c in self._value))

    def convert_to(self, channel) -> Rgb:
        """Rescale every channel onto another representation."""
        target = get_channel(channel)
        source = self.channel
        cls = rgb_registry[target.channel_type]
        return cls(*(source.to_channel(c, target) for c in self._value))

    def to_rgb(self, channel=ChannelType.U8) -> Rgb:
        return self.convert_to(channel)


class RgbU8(Rgb):
    __slots__ = ()
    channel_type: ClassVar[ChannelType] = ChannelType.U8


class RgbU16(Rgb):
    __slots__ = ()
    channel_type: ClassVar[ChannelType] = ChannelType.U16


class RgbU32(Rgb):
    __slots__ = ()
    channel_type: ClassVar[ChannelType] = ChannelType.U32


class RgbF32(Rgb):
    __slots__ = ()
    channel_type: ClassVar[ChannelType] = ChannelType.F32


class RgbF64(Rgb):
    __slots__ = ()
    channel_type: ClassVar[ChannelType] = ChannelType.F64


rgb_registry = build_registry(
    RgbU8,
    RgbU16,
    RgbU32,
    RgbF32,
    RgbF64,
)


def rgb(r: ChannelValue, g: ChannelValue, b: ChannelValue, channel=ChannelType.U8) -> Rgb:
    """Build an RGB color over the given channel representation."""
    return rgb_registry[get_channel(channel).channel_type](r, g, b)
