"""
Color operations on native color types.

:class:`ColorOperations` runs the component algorithms on any color type an
adapter understands, and hands native colors back.

>>> from crayon import ColorOperations, ComponentListAdapter, ColorSpace
>>> ops = ColorOperations(ComponentListAdapter())
>>> ops.add((1, 0, 0, 1), (0, 1, 0, 1))
(1.0, 1.0, 0.0, 1.0)
>>> ops.hex(ops.mix((1, 0, 0), (0, 0, 1), ColorSpace.RGB))
'#800080'
"""
from __future__ import annotations
import warnings
from typing import Callable, Generic, Optional

import numpy as np

from .adapters.base import ColorAdapter, NativeColor
from .components import ComponentsBase, RgbComponents, HsbComponents
from .types.color_types import ColorSpace

# Transparent white, used when a hex string cannot be parsed.
CLEAR = RgbComponents(1.0, 1.0, 1.0, 0.0)

DEFAULT_SATURATION_STEP = 0.1
DEFAULT_BRIGHTNESS_STEP = 0.05


class ColorOperations(Generic[NativeColor]):
    """Public color API on top of a :class:`ColorAdapter`."""

    def __init__(self, adapter: ColorAdapter[NativeColor]) -> None:
        self.adapter = adapter

    def __repr__(self) -> str:
        return f"ColorOperations({self.adapter!r})"

    # ------------------ COMPONENTS ------------------
    def rgb_components(self, color: NativeColor) -> Optional[RgbComponents]:
        return self.adapter.rgb_components(color)

    def hsb_components(self, color: NativeColor) -> Optional[HsbComponents]:
        return self.adapter.hsb_components(color)

    def _rgb_or(self, color: NativeColor, fallback: RgbComponents) -> RgbComponents:
        components = self.adapter.rgb_components(color)
        return fallback if components is None else components

    def _hsb_or(self, color: NativeColor, fallback: HsbComponents) -> HsbComponents:
        components = self.adapter.hsb_components(color)
        return fallback if components is None else components

    def _to_native(self, components: ComponentsBase) -> NativeColor:
        if isinstance(components, HsbComponents):
            return self.adapter.from_hsb(components)
        return self.adapter.from_rgb(components)

    # ------------------ PERCEPTION ------------------
    def is_dark(self, color: NativeColor) -> bool:
        return self._rgb_or(color, RgbComponents.BLACK).is_dark

    def is_light(self, color: NativeColor) -> bool:
        return not self.is_dark(color)

    def contrast(self, color: NativeColor, other: NativeColor) -> Optional[float]:
        """Contrast ratio, or ``None`` if either color has no components."""
        components = self.adapter.rgb_components(color)
        if components is None:
            return None
        return components.contrast(self.adapter.rgb_components(other))

    def has_contrast(self, color: NativeColor, other: NativeColor) -> Optional[bool]:
        """Whether the contrast ratio is above 7:1, ``None`` if unknown."""
        components = self.adapter.rgb_components(color)
        if components is None:
            return None
        return components.has_contrast(self.adapter.rgb_components(other))

    # ------------------ HEX ------------------
    def hex(self, color: NativeColor, prefix: Optional[str] = "#", with_alpha: bool = False) -> Optional[str]:
        components = self.adapter.rgb_components(color)
        if components is None:
            return None
        return components.hex(prefix=prefix, with_alpha=with_alpha)

    def from_hex(self, value: str) -> NativeColor:
        """Native color from a hex string; transparent white if it does not parse."""
        components = RgbComponents.from_hex(value)
        if components is None:
            warnings.warn(f"Invalid hex color string {value!r}, defaulting to transparent white")
            components = CLEAR
        return self.adapter.from_rgb(components)

    # ------------------ ADJUSTMENTS ------------------
    # Adjustments return None for a color the adapter cannot read.
    def negative(self, color: NativeColor, with_alpha: bool = False) -> Optional[NativeColor]:
        components = self.adapter.rgb_components(color)
        if components is None:
            return None
        return self.adapter.from_rgb(components.negative(with_alpha))

    def _adjust(
        self, color: NativeColor, adjust: Callable[[HsbComponents], HsbComponents]
    ) -> Optional[NativeColor]:
        components = self.adapter.hsb_components(color)
        if components is None:
            return None
        return self.adapter.from_hsb(adjust(components))

    def inverted(self, color: NativeColor) -> Optional[NativeColor]:
        return self._adjust(color, HsbComponents.inverted)

    def saturated(self, color: NativeColor, percentage: float = DEFAULT_SATURATION_STEP) -> Optional[NativeColor]:
        return self._adjust(color, lambda hsb: hsb.saturate(percentage))

    def desaturated(self, color: NativeColor, percentage: float = DEFAULT_SATURATION_STEP) -> Optional[NativeColor]:
        return self._adjust(color, lambda hsb: hsb.desaturate(percentage))

    def darkened(self, color: NativeColor, percentage: float = DEFAULT_BRIGHTNESS_STEP) -> Optional[NativeColor]:
        return self._adjust(color, lambda hsb: hsb.darken(percentage))

    def lightened(self, color: NativeColor, percentage: float = DEFAULT_BRIGHTNESS_STEP) -> Optional[NativeColor]:
        return self._adjust(color, lambda hsb: hsb.lighten(percentage))

    # ------------------ BLENDING ------------------
    def _blend(
        self,
        lhs: NativeColor,
        rhs: NativeColor,
        color_space: ColorSpace,
        identity: str,
        blend: Callable[[ComponentsBase, ComponentsBase, bool], ComponentsBase],
    ) -> NativeColor:
        # Unreadable colors fall back to the operation's identity element.
        color_space = ColorSpace(color_space)
        if color_space.is_hsb:
            fallback = getattr(HsbComponents, identity)
            a, b = self._hsb_or(lhs, fallback), self._hsb_or(rhs, fallback)
        else:
            fallback = getattr(RgbComponents, identity)
            a, b = self._rgb_or(lhs, fallback), self._rgb_or(rhs, fallback)
        return self._to_native(blend(a, b, color_space.has_alpha))

    def add(self, lhs: NativeColor, rhs: NativeColor, color_space: ColorSpace = ColorSpace.RGB) -> NativeColor:
        return self._blend(lhs, rhs, color_space, "BLACK", lambda a, b, alpha: a.add(b, alpha))

    def subtract(self, lhs: NativeColor, rhs: NativeColor, color_space: ColorSpace = ColorSpace.RGB) -> NativeColor:
        return self._blend(lhs, rhs, color_space, "BLACK", lambda a, b, alpha: a.subtract(b, alpha))

    def multiply(self, lhs: NativeColor, rhs: NativeColor, color_space: ColorSpace = ColorSpace.RGB) -> NativeColor:
        return self._blend(lhs, rhs, color_space, "WHITE", lambda a, b, alpha: a.multiply(b, alpha))

    def divide(self, lhs: NativeColor, rhs: NativeColor, color_space: ColorSpace = ColorSpace.RGB) -> NativeColor:
        return self._blend(lhs, rhs, color_space, "WHITE", lambda a, b, alpha: a.divide(b, alpha))

    def mix(
        self,
        lhs: NativeColor,
        rhs: NativeColor,
        color_space: ColorSpace = ColorSpace.RGB,
        weight: float = 0.5,
    ) -> NativeColor:
        return self._blend(lhs, rhs, color_space, "BLACK", lambda a, b, alpha: a.mix(b, weight, alpha))

    # ------------------ RANDOM ------------------
    def random(
        self,
        color_space: ColorSpace = ColorSpace.RGB,
        opacity: float = 1.0,
        rng: Optional[np.random.Generator] = None,
    ) -> NativeColor:
        """Random native color sampled uniformly in RGB or HSB."""
        if ColorSpace(color_space).is_hsb:
            return self.adapter.from_hsb(HsbComponents.random(opacity, rng))
        return self.adapter.from_rgb(RgbComponents.random(opacity, rng))
