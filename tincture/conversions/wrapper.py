from __future__ import annotations
from typing import Protocol, runtime_checkable

import numpy as np

from ..errors import UnsupportedConversionError
from ..types.channel_type import ChannelType
from .packed import rgb_from_u32, rgb_from_u64


@runtime_checkable
class SupportsToRgb(Protocol):
    """Anything that can produce an RGB color over a requested channel representation."""

    def to_rgb(self, channel=ChannelType.U8): ...


def to_rgb(value, channel=ChannelType.U8):
    """
    Convert ``value`` to RGB without knowing its concrete type.

    Args:
        value: A color implementing ``to_rgb``, or a packed ``np.uint32`` /
            ``np.uint64`` scalar.
        channel: Target channel representation.

    Raises:
        UnsupportedConversionError: for anything else, including plain ``int``
            whose packing width is ambiguous.
    """
    if isinstance(value, np.uint32):
        return rgb_from_u32(value, channel)
    if isinstance(value, np.uint64):
        return rgb_from_u64(value, channel)
    if isinstance(value, SupportsToRgb):
        return value.to_rgb(channel)
    if isinstance(value, int):
        raise UnsupportedConversionError(
            "plain int has no packing width; use rgb_from_u32 or rgb_from_u64"
        )
    raise UnsupportedConversionError(f"{type(value).__name__} cannot be converted to RGB")
