from __future__ import annotations
import math
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

from boundednumbers.functions import clamp

DEFAULT_TOLERANCE = 1e-5

# Smallest positive normal double; keeps the relative scale non-zero at 0.
TINY_FLOOR = sys.float_info.min

# Process-wide default, shared by every thread.
_default_tolerance = DEFAULT_TOLERANCE

# Scoped override installed by `tolerance()`; None means use the default.
_tolerance_override: ContextVar[Optional[float]] = ContextVar("crayon_tolerance", default=None)


def normalize(value: float) -> float:
    """
    Clamp a channel value into ``[0, 1]``.

    Non-finite input never escapes: ``+inf`` becomes 1, ``-inf`` becomes 0
    and ``NaN`` becomes 0. Any real number is accepted, including integers
    and fractions too large to fit in a float.
    """
    try:
        value = float(value)
    except OverflowError:
        return 1.0 if value > 0 else 0.0
    if math.isnan(value):
        return 0.0
    return float(clamp(value, 0.0, 1.0))


def _validate_tolerance(value: float) -> float:
    value = float(value)
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"Tolerance must be a positive finite number, got {value!r}")
    return value


def get_tolerance() -> float:
    """Return the relative tolerance used by component equality."""
    override = _tolerance_override.get()
    return _default_tolerance if override is None else override


def set_tolerance(value: float) -> None:
    """
    Replace the process-wide relative tolerance.

    Every thread sees the new value, except code running inside a
    :func:`tolerance` block, where the scoped value wins.
    """
    global _default_tolerance
    _default_tolerance = _validate_tolerance(value)


@contextmanager
def tolerance(value: float) -> Iterator[float]:
    """Temporarily override the relative tolerance.

    >>> with tolerance(1e-3):
    ...     RgbComponents(0.5, 0.5, 0.5, 1) == RgbComponents(0.5001, 0.5, 0.5, 1)
    True
    """
    token = _tolerance_override.set(_validate_tolerance(value))
    try:
        yield value
    finally:
        _tolerance_override.reset(token)


def is_almost_equal(a: float, b: float, tol: Optional[float] = None) -> bool:
    """
    Relative closeness test.

    Both operands must be finite. The allowed difference scales with the
    larger magnitude of the two, so it behaves the same near 0 and near 1.
    """
    if not (math.isfinite(a) and math.isfinite(b)):
        return False
    tol = get_tolerance() if tol is None else tol
    scale = max(abs(a), abs(b), TINY_FLOOR)
    return abs(a - b) < scale * tol


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero for positives."""
    return int(math.floor(value + 0.5))
