from .color_types import ColorSpace, ChannelTuple, Scalar
from .format_type import FormatType, max_non_hue, channel_maxima, HUE_360

__all__ = [
    "ColorSpace",
    "ChannelTuple",
    "Scalar",
    "FormatType",
    "max_non_hue",
    "channel_maxima",
    "HUE_360",
]
