import math
import threading
from decimal import Decimal
from fractions import Fraction
import pytest
from crayon.utils.num_utils import (
    DEFAULT_TOLERANCE,
    normalize,
    is_almost_equal,
    get_tolerance,
    set_tolerance,
    tolerance,
    round_half_up,
)


@pytest.mark.parametrize("value, expected", [
    (-1.0, 0.0),
    (0.0, 0.0),
    (0.3, 0.3),
    (1.0, 1.0),
    (2.5, 1.0),
    (math.inf, 1.0),
    (-math.inf, 0.0),
    (math.nan, 0.0),
    (10**400, 1.0),
    (-10**400, 0.0),
    (Fraction(1, 4), 0.25),
    (Fraction(10**400, 7), 1.0),
    (Decimal("0.75"), 0.75),
    (Decimal("-1e400"), 0.0),
])
def test_normalize(value, expected):
    assert normalize(value) == expected


def test_almost_equal_is_relative():
    assert is_almost_equal(1.0, 1.0 + 1e-7)
    assert not is_almost_equal(1.0, 1.0001)
    # Same relative drift near zero is still equal
    assert is_almost_equal(1e-10, 1.00000001e-10)
    assert not is_almost_equal(1e-10, 2e-10)
    assert is_almost_equal(0.0, 0.0)


def test_almost_equal_requires_finite():
    assert not is_almost_equal(math.nan, math.nan)
    assert not is_almost_equal(math.inf, math.inf)
    assert not is_almost_equal(1.0, math.inf)


def test_explicit_tolerance():
    assert is_almost_equal(1.0, 1.005, tol=1e-2)
    assert not is_almost_equal(1.0, 1.005, tol=1e-3)


def test_tolerance_override_is_scoped():
    assert get_tolerance() == DEFAULT_TOLERANCE
    with tolerance(1e-2) as tol:
        assert tol == 1e-2
        assert get_tolerance() == 1e-2
        assert is_almost_equal(1.0, 1.005)
    assert get_tolerance() == DEFAULT_TOLERANCE
    assert not is_almost_equal(1.0, 1.005)


def test_set_tolerance():
    try:
        set_tolerance(1e-3)
        assert get_tolerance() == 1e-3
    finally:
        set_tolerance(DEFAULT_TOLERANCE)


def test_set_tolerance_reaches_other_threads():
    seen = []
    try:
        set_tolerance(1e-2)
        worker = threading.Thread(target=lambda: seen.append(get_tolerance()))
        worker.start()
        worker.join()
    finally:
        set_tolerance(DEFAULT_TOLERANCE)
    assert seen == [1e-2]


def test_scoped_tolerance_wins_over_default():
    try:
        with tolerance(1e-2):
            set_tolerance(1e-3)
            assert get_tolerance() == 1e-2
        assert get_tolerance() == 1e-3
    finally:
        set_tolerance(DEFAULT_TOLERANCE)


@pytest.mark.parametrize("bad", [0, -1e-5, math.nan, math.inf])
def test_invalid_tolerance(bad):
    with pytest.raises(ValueError):
        set_tolerance(bad)
    with pytest.raises(ValueError):
        with tolerance(bad):
            pass


def test_round_half_up():
    assert round_half_up(127.5) == 128
    assert round_half_up(126.5) == 127
    assert round_half_up(126.49) == 126
    assert round_half_up(0.0) == 0
