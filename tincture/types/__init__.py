from .channel_type import ChannelType, channel_dtypes, channel_maxima, integral_channels
from .color_types import Scalar, ChannelValue, ChannelTriple
