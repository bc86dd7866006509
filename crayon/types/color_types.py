from __future__ import annotations
from enum import Enum
from typing import Tuple

Scalar = int | float
ChannelTuple = Tuple[float, float, float, float]


class ColorSpace(str, Enum):
    """Model and alpha handling used when blending two colors."""
    RGB = "rgb"     # red, green, blue
    RGBA = "rgba"   # red, green, blue, alpha
    HSB = "hsb"     # hue, saturation, brightness
    HSBA = "hsba"   # hue, saturation, brightness, alpha

    @property
    def has_alpha(self) -> bool:
        return self.value.endswith("a")

    @property
    def is_hsb(self) -> bool:
        return self.value.startswith("hsb")
