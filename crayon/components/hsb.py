from __future__ import annotations
import math
from typing import ClassVar, Tuple

from ..conversions.to_hsb import unit_rgb_to_hsb
from ..utils.num_utils import normalize
from .components_base import ComponentsBase
from .rgb import RgbComponents


class HsbComponents(ComponentsBase):
    """
    Hue, saturation, brightness and alpha, each in ``[0, 1]``.

    Hue is a fraction of a full turn (``1.0`` is 360°). Blending clamps hue
    like any other channel and does not wrap around the color wheel, so
    ``add``/``subtract`` across the 0/1 boundary saturate at the ends.
    """
    __slots__ = ()

    channel_names: ClassVar[Tuple[str, str, str, str]] = ("hue", "saturation", "brightness", "alpha")
    has_hue: ClassVar[bool] = True

    WHITE: ClassVar[HsbComponents]
    BLACK: ClassVar[HsbComponents]

    def __init__(self, hue: float, saturation: float, brightness: float, alpha: float = 1.0) -> None:
        super().__init__(hue, saturation, brightness, alpha)

    @property
    def hue(self) -> float:
        return self._value[0]

    @property
    def saturation(self) -> float:
        return self._value[1]

    @property
    def brightness(self) -> float:
        return self._value[2]

    # ------------------ CONVERTERS ------------------
    @classmethod
    def from_rgb(cls, rgb: RgbComponents) -> HsbComponents:
        h, s, v = unit_rgb_to_hsb(rgb.red, rgb.green, rgb.blue)
        return cls(h, s, v, rgb.alpha)

    @classmethod
    def from_components(cls, other: ComponentsBase) -> HsbComponents:
        if isinstance(other, HsbComponents):
            return other
        if isinstance(other, RgbComponents):
            return cls.from_rgb(other)
        raise TypeError(f"Cannot convert {type(other).__name__} to {cls.__name__}")

    def to_rgb(self) -> RgbComponents:
        return RgbComponents.from_hsb(self)

    # ------------------ ADJUSTMENTS ------------------
    def _replace(self, saturation: float, brightness: float) -> HsbComponents:
        return HsbComponents(self.hue, saturation, brightness, self.alpha)

    def inverted(self) -> HsbComponents:
        """Rotate the hue by 180°."""
        hue = math.fmod(self.hue * 360 + 180, 360) / 360
        return HsbComponents(hue, self.saturation, self.brightness, self.alpha)

    def saturate(self, percentage: float) -> HsbComponents:
        return self._replace(self.saturation + normalize(percentage), self.brightness)

    def desaturate(self, percentage: float) -> HsbComponents:
        return self._replace(self.saturation - normalize(percentage), self.brightness)

    def darken(self, percentage: float) -> HsbComponents:
        return self._replace(self.saturation, self.brightness - normalize(percentage))

    def lighten(self, percentage: float) -> HsbComponents:
        return self._replace(self.saturation, self.brightness + normalize(percentage))


HsbComponents.WHITE = HsbComponents(0.0, 0.0, 1.0, 1.0)
HsbComponents.BLACK = HsbComponents(0.0, 0.0, 0.0, 1.0)
