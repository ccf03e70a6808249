"""
Channel representations.

A channel is a single color component stored as a numpy scalar. Every
representation answers the same four questions (clamp, invert, normalize,
rescale to another representation), so the color types never branch on
integer vs. floating storage themselves.

Integral channels map their full range onto [0, 1]; floating channels are
expected to hold values in [0, 1] but are allowed to leave it.
"""
from __future__ import annotations
import math
import warnings
from types import MappingProxyType
from typing import ClassVar, Mapping, Protocol, runtime_checkable

import numpy as np
from boundednumbers import clamp as _bounded_clamp

from ..errors import ChannelRangeError, UnsupportedChannelError
from ..types.channel_type import (
    ChannelType,
    channel_dtypes,
    channel_maxima,
    dtype_to_channel_type,
    integral_channels,
)
from ..types.color_types import ChannelValue, Scalar


@runtime_checkable
class Channel(Protocol):
    channel_type: ChannelType
    dtype: type[np.generic]
    min_value: Scalar
    max_value: Scalar
    is_integral: bool

    def coerce(self, value: ChannelValue) -> np.generic: ...
    def clamp(self, value: ChannelValue, lo: ChannelValue, hi: ChannelValue) -> np.generic: ...
    def invert(self, value: ChannelValue) -> np.generic: ...
    def normalize(self, value: ChannelValue) -> np.generic: ...
    def to_channel(self, value: ChannelValue, target: Channel) -> np.generic: ...


def _ordered_bounds(lo, hi):
    if lo > hi:
        warnings.warn(
            f"clamp called with lo={lo!r} > hi={hi!r}; bounds swapped",
            RuntimeWarning,
            stacklevel=4,
        )
        return hi, lo
    return lo, hi


class IntegralChannel:
    """Unsigned fixed-width channel; the full range maps onto [0, 1]."""

    is_integral: ClassVar[bool] = True
    min_value: ClassVar[int] = 0

    def __init__(self, channel_type: ChannelType) -> None:
        self.channel_type = channel_type
        self.dtype = channel_dtypes[channel_type]
        self.max_value: int = channel_maxima[channel_type]

    def coerce(self, value: ChannelValue) -> np.generic:
        if isinstance(value, (float, np.floating)):
            if not float(value).is_integer():
                raise ChannelRangeError(
                    f"{self.channel_type.value} channel expects an integer, got {value!r}"
                )
        ivalue = int(value)
        if not self.min_value <= ivalue <= self.max_value:
            raise ChannelRangeError(
                f"{ivalue} is outside the {self.channel_type.value} range "
                f"[{self.min_value}, {self.max_value}]"
            )
        return self.dtype(ivalue)

    def clamp(self, value: ChannelValue, lo: ChannelValue, hi: ChannelValue) -> np.generic:
        lo, hi = _ordered_bounds(int(lo), int(hi))
        return self.coerce(_bounded_clamp(int(value), lo, hi))

    def invert(self, value: ChannelValue) -> np.generic:
        return self.dtype(self.max_value - int(self.coerce(value)))

    def normalize(self, value: ChannelValue) -> np.generic:
        # The storage cannot leave its range.
        return self.coerce(value)

    def to_channel(self, value: ChannelValue, target: Channel) -> np.generic:
        ivalue = int(self.coerce(value))
        if target.channel_type == self.channel_type:
            return self.dtype(ivalue)
        if target.is_integral:
            tmax = int(target.max_value)
            # round half up, exact in integer arithmetic
            return target.dtype((ivalue * tmax + self.max_value // 2) // self.max_value)
        return target.dtype(ivalue / self.max_value)

    def __repr__(self) -> str:
        return f"IntegralChannel({self.channel_type.value})"


class FloatChannel:
    """Floating-point channel; nominal range [0.0, 1.0], not enforced."""

    is_integral: ClassVar[bool] = False
    min_value: ClassVar[float] = 0.0
    max_value: ClassVar[float] = 1.0

    def __init__(self, channel_type: ChannelType) -> None:
        self.channel_type = channel_type
        self.dtype = channel_dtypes[channel_type]

    def coerce(self, value: ChannelValue) -> np.generic:
        return self.dtype(value)

    def clamp(self, value: ChannelValue, lo: ChannelValue, hi: ChannelValue) -> np.generic:
        lo, hi = _ordered_bounds(float(lo), float(hi))
        return self.dtype(_bounded_clamp(float(value), lo, hi))

    def invert(self, value: ChannelValue) -> np.generic:
        return self.dtype(self.max_value) - self.coerce(value)

    def normalize(self, value: ChannelValue) -> np.generic:
        return self.dtype(_bounded_clamp(float(value), self.min_value, self.max_value))

    def to_channel(self, value: ChannelValue, target: Channel) -> np.generic:
        fvalue = self.coerce(value)
        if not target.is_integral:
            return target.dtype(fvalue)
        if math.isnan(fvalue):
            raise ChannelRangeError(
                f"cannot convert NaN to a {target.channel_type.value} channel"
            )
        unit = _bounded_clamp(float(fvalue), self.min_value, self.max_value)
        return target.dtype(round(unit * int(target.max_value)))

    def __repr__(self) -> str:
        return f"FloatChannel({self.channel_type.value})"


channels: Mapping[ChannelType, Channel] = MappingProxyType({
    channel_type: (
        IntegralChannel(channel_type)
        if channel_type in integral_channels
        else FloatChannel(channel_type)
    )
    for channel_type in ChannelType
})

U8 = channels[ChannelType.U8]
U16 = channels[ChannelType.U16]
U32 = channels[ChannelType.U32]
F32 = channels[ChannelType.F32]
F64 = channels[ChannelType.F64]


def get_channel(channel_like) -> Channel:
    """
    Resolve a channel representation.

    Args:
        channel_like: A Channel, a ChannelType (or its string value such as ``"u8"``),
            or a numpy dtype / scalar type such as ``np.float32``.

    Returns:
        The registered Channel instance.
    """
    if isinstance(channel_like, (IntegralChannel, FloatChannel)):
        return channel_like
    if isinstance(channel_like, str):
        try:
            return channels[ChannelType(channel_like.lower())]
        except ValueError:
            raise UnsupportedChannelError(f"Unknown channel type: {channel_like!r}") from None
    try:
        dtype = np.dtype(channel_like)
    except TypeError:
        raise UnsupportedChannelError(f"Cannot interpret {channel_like!r} as a channel type") from None
    if dtype not in dtype_to_channel_type:
        raise UnsupportedChannelError(f"Unsupported channel dtype: {dtype}")
    return channels[dtype_to_channel_type[dtype]]


def channel_of(value: ChannelValue) -> Channel:
    """Return the channel representation a value is stored in."""
    if isinstance(value, bool) or isinstance(value, int) and not isinstance(value, np.generic):
        raise UnsupportedChannelError(
            "plain int has no fixed width; use a numpy scalar such as np.uint8"
        )
    if isinstance(value, float) and not isinstance(value, np.generic):
        return F64
    dtype = getattr(value, "dtype", None)
    if dtype is None or np.dtype(dtype) not in dtype_to_channel_type:
        raise UnsupportedChannelError(f"{type(value).__name__} is not a channel value")
    return channels[dtype_to_channel_type[np.dtype(dtype)]]


def clamp(value: ChannelValue, lo: ChannelValue, hi: ChannelValue) -> np.generic:
    """Restrict value to [lo, hi] in the value's own representation."""
    return channel_of(value).clamp(value, lo, hi)


def invert_channel(value: ChannelValue) -> np.generic:
    return channel_of(value).invert(value)


def normalize_channel(value: ChannelValue) -> np.generic:
    return channel_of(value).normalize(value)


def to_channel(value: ChannelValue, target) -> np.generic:
    """Linearly rescale value onto the full range of the target representation."""
    return channel_of(value).to_channel(value, get_channel(target))
