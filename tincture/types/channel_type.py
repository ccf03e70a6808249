# No dependencies beyond numpy
from enum import Enum
import numpy as np

class ChannelType(str, Enum):
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    F32 = "f32"
    F64 = "f64"

channel_dtypes = {
    ChannelType.U8: np.uint8,
    ChannelType.U16: np.uint16,
    ChannelType.U32: np.uint32,
    ChannelType.F32: np.float32,
    ChannelType.F64: np.float64,
}

channel_maxima = {
    ChannelType.U8: 0xFF,
    ChannelType.U16: 0xFFFF,
    ChannelType.U32: 0xFFFFFFFF,
    ChannelType.F32: 1.0,
    ChannelType.F64: 1.0,
}

integral_channels = frozenset({ChannelType.U8, ChannelType.U16, ChannelType.U32})

dtype_to_channel_type = {
    np.dtype(dtype): channel_type for channel_type, dtype in channel_dtypes.items()
}

HUE_360 = 360
