from __future__ import annotations
import numbers
import warnings
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any, Callable, ClassVar, Iterator, Optional, Sequence, Tuple

import numpy as np
from numpy import ndarray

from ..types.color_types import ChannelTuple, Scalar
from ..types.format_type import FormatType, channel_maxima
from ..utils.num_utils import normalize, is_almost_equal, round_half_up


def _unscale(value: Scalar, maximum: float) -> Scalar:
    try:
        return float(value) / maximum
    except OverflowError:
        # too large for any scale; the constructor clamps it by sign
        return value


class ChannelDivisionWarning(RuntimeWarning):
    """A divide blend hit a zero divisor channel; the result was clamped."""


class ComponentsBase(ABC):
    """
    Immutable four-channel color value with every channel in ``[0, 1]``.

    Channels are clamped when the instance is built and the instance is frozen
    afterwards; every operation returns a new value. Equality is tolerance
    based (see :func:`crayon.utils.is_almost_equal`), so instances are not
    hashable.
    """
    __slots__ = ('_value',)  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 4
    channel_names: ClassVar[Tuple[str, str, str, str]]
    has_hue: ClassVar[bool] = False

    _value: ChannelTuple

    def __init__(self, *channels: Scalar) -> None:
        if len(channels) != self.num_channels:
            raise ValueError(f"{self.__class__.__name__} expects {self.num_channels} channels, got {len(channels)}")
        for name, channel in zip(self.channel_names, channels):
            if not isinstance(channel, (numbers.Real, Decimal)):
                raise TypeError(f"{name} must be a real number, got {type(channel).__name__}")
        # safe assignment; __setattr__ blocks everything else
        object.__setattr__(self, '_value', tuple(normalize(channel) for channel in channels))

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ChannelTuple:
        return self._value

    @property
    def alpha(self) -> float:
        return self._value[3]

    def __iter__(self) -> Iterator[float]:
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={channel!r}" for name, channel in zip(self.channel_names, self._value))
        return f"{self.__class__.__name__}({fields})"

    def __reduce__(self):
        return (self.__class__, self._value)

    # ------------------ EQUALITY ------------------
    def is_close(self, other: ComponentsBase, tol: Optional[float] = None) -> bool:
        """Channel-wise relative closeness with an explicit tolerance."""
        return all(is_almost_equal(a, b, tol) for a, b in zip(self._value, other.value))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ComponentsBase):
            return NotImplemented
        if type(other) is not type(self):
            return False
        return self.is_close(other)

    __hash__ = None  # type: ignore[assignment]

    # ------------------ CONSTRUCTION ------------------
    @classmethod
    @abstractmethod
    def from_components(cls, other: ComponentsBase):
        """Build this representation from any component value."""
        raise NotImplementedError

    @classmethod
    def random(cls, alpha: float = 1.0, rng: Optional[np.random.Generator] = None):
        """
        Uniform sample per color channel with the given alpha.

        Meant for fuzzing and demos, not for cryptographic or simulation use.
        """
        rng = rng if rng is not None else np.random.default_rng()
        samples = rng.random(cls.num_channels - 1)
        return cls(*samples.tolist(), alpha)

    def with_alpha(self, alpha: float):
        """Return a copy with the alpha channel replaced (and clamped)."""
        return self.__class__(*self._value[:-1], alpha)

    # ------------------ FORMATS ------------------
    def to_format(self, format_type: FormatType = FormatType.FLOAT) -> Tuple[Scalar, ...]:
        """
        Channels scaled to ``format_type``.

        FLOAT returns the unit channels unchanged, INT scales to 0..255 and
        PERCENTAGE to 0..100; hue goes to degrees for both.
        """
        format_type = FormatType(format_type)
        maxima = channel_maxima(format_type, self.num_channels, self.has_hue)
        scaled = tuple(channel * maximum for channel, maximum in zip(self._value, maxima))
        if format_type == FormatType.INT:
            return tuple(round_half_up(channel) for channel in scaled)
        return scaled

    @classmethod
    def from_format(cls, values: Sequence[Scalar], format_type: FormatType = FormatType.FLOAT):
        """Inverse of :meth:`to_format`; out-of-range values are clamped."""
        maxima = channel_maxima(FormatType(format_type), cls.num_channels, cls.has_hue)
        if len(values) != cls.num_channels:
            raise ValueError(f"{cls.__name__} expects {cls.num_channels} values, got {len(values)}")
        return cls(*(_unscale(v, maximum) for v, maximum in zip(values, maxima)))

    def to_array(self) -> ndarray:
        return np.array(self._value, dtype=float)

    # -----------------------
    # Core arithmetic engine
    # -----------------------
    def _coerce(self, other: Any):
        if isinstance(other, self.__class__):
            return other
        if isinstance(other, ComponentsBase):
            return self.__class__.from_components(other)
        raise TypeError(f"Cannot blend {self.__class__.__name__} with {type(other).__name__}")

    def _operate(self, other: Any, op: Callable[[ndarray, ndarray], ndarray], with_alpha: bool):
        other = self._coerce(other)
        a = self.to_array()
        b = other.to_array()

        # IEEE semantics: x/0 -> inf, 0/0 -> nan; the constructor clamps both.
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            result = op(a, b)

        if not with_alpha:
            result[-1] = a[-1]

        return self.__class__(*result.tolist())

    def add(self, other: ComponentsBase, with_alpha: bool = False):
        """Channel-wise sum; alpha is summed only when ``with_alpha``."""
        return self._operate(other, np.add, with_alpha)

    def subtract(self, other: ComponentsBase, with_alpha: bool = False):
        """Channel-wise difference; alpha is subtracted only when ``with_alpha``."""
        return self._operate(other, np.subtract, with_alpha)

    def multiply(self, other: ComponentsBase, with_alpha: bool = False):
        """Channel-wise product; alpha is multiplied only when ``with_alpha``."""
        return self._operate(other, np.multiply, with_alpha)

    def divide(self, other: ComponentsBase, with_alpha: bool = False):
        """
        Channel-wise quotient; alpha is divided only when ``with_alpha``.

        A zero divisor channel is not an error: ``x / 0`` clamps to 1 and
        ``0 / 0`` clamps to 0. A :class:`ChannelDivisionWarning` is emitted.
        """
        other = self._coerce(other)
        divisors = other.value if with_alpha else other.value[:-1]
        if any(channel == 0 for channel in divisors):
            warnings.warn(
                f"Division by a zero channel in {self.__class__.__name__}.divide; result clamped to [0, 1]",
                ChannelDivisionWarning,
                stacklevel=2,
            )
        return self._operate(other, np.divide, with_alpha)

    def mix(self, other: ComponentsBase, weight: float = 0.5, with_alpha: bool = False):
        """
        Linear interpolation ``(1 - weight) * self + weight * other``.

        ``weight`` is clamped to ``[0, 1]``. Alpha is interpolated only when
        ``with_alpha``, otherwise it is taken from ``self``.
        """
        weight = normalize(weight)
        return self._operate(other, lambda a, b: (1 - weight) * a + weight * b, with_alpha)

    # -----------------------
    # Operator overloads
    # -----------------------
    def __add__(self, other):
        if not isinstance(other, ComponentsBase):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, ComponentsBase):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if not isinstance(other, ComponentsBase):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other):
        if not isinstance(other, ComponentsBase):
            return NotImplemented
        return self.divide(other)
