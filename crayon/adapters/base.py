from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from ..components import RgbComponents, HsbComponents

NativeColor = TypeVar("NativeColor")


class ColorAdapter(ABC, Generic[NativeColor]):
    """
    Bridge between a native color type and the component values.

    Subclasses supply the two required capabilities:
        - ``rgb_components``: read (R, G, B, A) from a native color
        - ``from_rgb``: build a native color from ``RgbComponents``

    ``hsb_components`` and ``from_hsb`` fall back to the RGB ↔ HSB conversion;
    override them when the native type stores HSB directly, to skip the
    round trip.
    """

    @abstractmethod
    def rgb_components(self, color: NativeColor) -> Optional[RgbComponents]:
        """Return the color's RGB components, or ``None`` if it has none."""

    def hsb_components(self, color: NativeColor) -> Optional[HsbComponents]:
        rgb = self.rgb_components(color)
        if rgb is None:
            return None
        return HsbComponents.from_rgb(rgb)

    @abstractmethod
    def from_rgb(self, components: RgbComponents) -> NativeColor:
        """Build a native color from RGB components."""

    def from_hsb(self, components: HsbComponents) -> NativeColor:
        return self.from_rgb(RgbComponents.from_hsb(components))
