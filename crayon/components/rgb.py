from __future__ import annotations
from typing import TYPE_CHECKING, ClassVar, Optional, Tuple, overload

from ..conversions.hex import parse_hex, format_hex
from ..conversions.to_rgb import hsb_to_unit_rgb
from .components_base import ComponentsBase

if TYPE_CHECKING:
    from .hsb import HsbComponents

# Ratio above which text on a background is considered readable (WCAG AAA).
CONTRAST_THRESHOLD = 7


class RgbComponents(ComponentsBase):
    """Red, green, blue and alpha, each in ``[0, 1]``."""
    __slots__ = ()

    channel_names: ClassVar[Tuple[str, str, str, str]] = ("red", "green", "blue", "alpha")

    WHITE: ClassVar[RgbComponents]
    BLACK: ClassVar[RgbComponents]

    def __init__(self, red: float, green: float, blue: float, alpha: float = 1.0) -> None:
        super().__init__(red, green, blue, alpha)

    @property
    def red(self) -> float:
        return self._value[0]

    @property
    def green(self) -> float:
        return self._value[1]

    @property
    def blue(self) -> float:
        return self._value[2]

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_hex(cls, value: str) -> Optional[RgbComponents]:
        """Parse a hex color string; ``None`` if it is not one."""
        channels = parse_hex(value)
        if channels is None:
            return None
        return cls(*channels)

    @classmethod
    def from_hsb(cls, hsb: HsbComponents) -> RgbComponents:
        r, g, b = hsb_to_unit_rgb(hsb.hue, hsb.saturation, hsb.brightness)
        return cls(r, g, b, hsb.alpha)

    @classmethod
    def from_components(cls, other: ComponentsBase) -> RgbComponents:
        if isinstance(other, RgbComponents):
            return other
        from .hsb import HsbComponents  # local import to avoid cycles
        if isinstance(other, HsbComponents):
            return cls.from_hsb(other)
        raise TypeError(f"Cannot convert {type(other).__name__} to {cls.__name__}")

    def to_hsb(self) -> HsbComponents:
        from .hsb import HsbComponents
        return HsbComponents.from_rgb(self)

    # ------------------ HEX ------------------
    def hex(self, prefix: Optional[str] = "#", with_alpha: bool = False) -> str:
        """``#RRGGBB`` (or ``#RRGGBBAA`` with alpha), uppercase."""
        return format_hex(self._value, prefix=prefix, with_alpha=with_alpha)

    # ------------------ PERCEPTION ------------------
    @property
    def lightness(self) -> float:
        """Perceived lightness with the ITU-R BT.601 weights."""
        return (self.red * 299 + self.green * 587 + self.blue * 114) / 1000

    @property
    def is_dark(self) -> bool:
        return self.lightness < 0.5

    @property
    def is_light(self) -> bool:
        return not self.is_dark

    @overload
    def contrast(self, other: RgbComponents) -> float: ...
    @overload
    def contrast(self, other: None) -> None: ...

    def contrast(self, other):
        """
        WCAG style contrast ratio against ``other``.

        Symmetric and always at least 1. Black against white is 21.
        Returns ``None`` when ``other`` is ``None``.
        """
        if other is None:
            return None
        l1 = self.lightness
        l2 = other.lightness
        return (max(l1, l2) + 0.05) / (min(l1, l2) + 0.05)

    @overload
    def has_contrast(self, other: RgbComponents) -> bool: ...
    @overload
    def has_contrast(self, other: None) -> None: ...

    def has_contrast(self, other):
        """Whether the contrast ratio exceeds 7:1; ``None`` for a missing color."""
        if other is None:
            return None
        return self.contrast(other) > CONTRAST_THRESHOLD

    def negative(self, with_alpha: bool = False) -> RgbComponents:
        """``1 - channel`` for red, green, blue (and alpha when ``with_alpha``)."""
        alpha = 1 - self.alpha if with_alpha else self.alpha
        return RgbComponents(1 - self.red, 1 - self.green, 1 - self.blue, alpha)


RgbComponents.WHITE = RgbComponents(1.0, 1.0, 1.0, 1.0)
RgbComponents.BLACK = RgbComponents(0.0, 0.0, 0.0, 1.0)
