from .channel import (
    Channel,
    IntegralChannel,
    FloatChannel,
    channels,
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

__all__ = [
    'Channel',
    'IntegralChannel',
    'FloatChannel',
    'channels',
    'U8',
    'U16',
    'U32',
    'F32',
    'F64',
    'get_channel',
    'channel_of',
    'clamp',
    'invert_channel',
    'normalize_channel',
    'to_channel',
]
