from __future__ import annotations
from typing import ClassVar, Iterator, Literal, Tuple

import numpy as np

from ..channels import Channel, get_channel
from ..types.channel_type import ChannelType
from ..types.color_types import ChannelTriple, ChannelValue

ColorSpace = Literal["rgb", "hsv"]


class ColorBase:
    # no __dict__ → immutability; subclasses declare empty __slots__
    __slots__ = ('_value', '_frozen')

    num_channels: ClassVar[int] = 3
    mode:         ClassVar[ColorSpace]
    fields:       ClassVar[Tuple[str, str, str]]
    channel_type: ClassVar[ChannelType]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, a: ChannelValue, b: ChannelValue, c: ChannelValue) -> None:
        channel = self.channel
        self._value = (channel.coerce(a), channel.coerce(b), channel.coerce(c))
        super().__setattr__('_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ChannelTriple:
        return self._value

    @property
    def channel(self) -> Channel:
        return get_channel(self.channel_type)

    def to_array(self) -> np.ndarray:
        """Components in their fixed order as a 3-element array of the channel dtype."""
        return np.array(self._value, dtype=self.channel.dtype)

    def __iter__(self) -> Iterator[np.generic]:
        return iter(self._value)

    def __eq__(self, other):
        if not isinstance(other, ColorBase):
            return NotImplemented
        return (
            self.mode == other.mode
            and self.channel_type == other.channel_type
            and all(x == y for x, y in zip(self._value, other._value))
        )

    def __hash__(self):
        return hash((self.mode, self.channel_type, tuple(v.item() for v in self._value)))

    def __repr__(self):
        parts = ", ".join(f"{name}={v.item()!r}" for name, v in zip(self.fields, self._value))
        return f"{self.__class__.__name__}({parts})"


def build_registry(*classes: type[ColorBase]) -> dict[ChannelType, type[ColorBase]]:
    return {
        cls.channel_type: cls
        for cls in classes
    }
