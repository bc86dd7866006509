from __future__ import annotations
from typing import Optional

import numpy as np
from numpy import ndarray

from ..components import RgbComponents, HsbComponents
from ..types.color_types import ColorSpace
from ..types.format_type import FormatType, channel_maxima
from .base import ColorAdapter


class NDArrayAdapter(ColorAdapter[ndarray]):
    """
    Colors stored as 1-D numpy vectors.

    Args:
        space: ``rgb`` or ``hsb`` (the alpha variants are accepted too). An
            ``hsb`` adapter reads and writes HSB natively.
        format_type: channel scale of the vectors (INT: 0..255 with hue in
            0..360, FLOAT: 0..1, PERCENTAGE: 0..100 with hue in 0..360).
        include_alpha: whether produced vectors carry a fourth alpha entry.

    Input vectors may have 3 entries (opaque) or 4 (with alpha).
    """

    def __init__(
        self,
        space: ColorSpace = ColorSpace.RGB,
        format_type: FormatType = FormatType.FLOAT,
        include_alpha: bool = True,
    ) -> None:
        self.space = ColorSpace(space)
        self.format_type = FormatType(format_type)
        self.include_alpha = include_alpha

    def __repr__(self) -> str:
        return (
            f"NDArrayAdapter(space={self.space.value!r}, format_type={self.format_type.value!r}, "
            f"include_alpha={self.include_alpha})"
        )

    def _read(self, color: ndarray, components_class):
        arr = np.asarray(color)
        if arr.ndim != 1:
            raise ValueError(f"Expected a 1-D color vector, got shape {arr.shape}")
        if arr.shape[0] not in (3, 4):
            raise ValueError(f"Expected 3 or 4 channels, got {arr.shape[0]}")

        values = arr.astype(float).tolist()
        if len(values) == 3:
            alpha_max = channel_maxima(self.format_type, 4, components_class.has_hue)[-1]
            values.append(alpha_max)
        return components_class.from_format(values, self.format_type)

    def _write(self, components) -> ndarray:
        values = components.to_format(self.format_type)
        if not self.include_alpha:
            values = values[:-1]
        dtype = np.int64 if self.format_type == FormatType.INT else np.float64
        return np.array(values, dtype=dtype)

    def rgb_components(self, color: ndarray) -> Optional[RgbComponents]:
        if self.space.is_hsb:
            return self._read(color, HsbComponents).to_rgb()
        return self._read(color, RgbComponents)

    def hsb_components(self, color: ndarray) -> Optional[HsbComponents]:
        if self.space.is_hsb:
            return self._read(color, HsbComponents)
        return super().hsb_components(color)

    def from_rgb(self, components: RgbComponents) -> ndarray:
        if self.space.is_hsb:
            return self._write(components.to_hsb())
        return self._write(components)

    def from_hsb(self, components: HsbComponents) -> ndarray:
        if self.space.is_hsb:
            return self._write(components)
        return super().from_hsb(components)
