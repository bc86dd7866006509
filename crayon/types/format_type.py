# No dependencies
from enum import Enum


class FormatType(str, Enum):
    INT = "int"
    FLOAT = "float"
    PERCENTAGE = "percentage"


max_non_hue = {
    FormatType.INT: 255,
    FormatType.FLOAT: 1.0,
    FormatType.PERCENTAGE: 100.0
}

HUE_360 = 360


def channel_maxima(format_type: FormatType, num_channels: int, has_hue: bool) -> tuple:
    """
    Scale factor for each channel when leaving the unit range.

    FLOAT keeps every channel (hue included) as a fraction of 1.
    INT and PERCENTAGE express hue in degrees.
    """
    format_type = FormatType(format_type)
    maxval = max_non_hue[format_type]
    if has_hue and format_type != FormatType.FLOAT:
        return (HUE_360,) + (maxval,) * (num_channels - 1)
    return (maxval,) * num_channels
