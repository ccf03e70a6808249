"""Exceptions raised by tincture."""


class ColorError(Exception):
    """Base class for every error raised by this package."""


class ChannelRangeError(ColorError, ValueError):
    """A value cannot be represented by the requested channel type."""


class UnsupportedChannelError(ColorError, TypeError):
    """The value's numeric type is not a registered channel representation."""


class UnsupportedConversionError(ColorError, NotImplementedError):
    """The requested conversion is not defined for these operands."""
