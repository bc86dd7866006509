from __future__ import annotations
from typing import Optional, Sequence, Tuple

from ..components import RgbComponents
from .base import ColorAdapter


class ComponentListAdapter(ColorAdapter[Sequence[float]]):
    """
    Colors stored as a flat list of unit floats, graphics-context style.

    Accepted layouts on input:
        - ``[white]``                        gray, opaque
        - ``[white, alpha]``                 gray with alpha
        - ``[red, green, blue]``             opaque
        - ``[red, green, blue, alpha, ...]`` extra entries are ignored

    Output is always ``(red, green, blue, alpha)``.
    """

    def rgb_components(self, color: Optional[Sequence[float]]) -> Optional[RgbComponents]:
        if color is None:
            return None

        count = len(color)
        if count == 0:
            return None
        if count == 1:
            return RgbComponents(color[0], color[0], color[0], 1.0)
        if count == 2:
            return RgbComponents(color[0], color[0], color[0], color[1])

        alpha = color[3] if count > 3 else 1.0
        return RgbComponents(color[0], color[1], color[2], alpha)

    def from_rgb(self, components: RgbComponents) -> Tuple[float, float, float, float]:
        return components.value
