from .num_utils import (
    DEFAULT_TOLERANCE,
    normalize,
    is_almost_equal,
    get_tolerance,
    set_tolerance,
    tolerance,
    round_half_up,
)

__all__ = [
    "DEFAULT_TOLERANCE",
    "normalize",
    "is_almost_equal",
    "get_tolerance",
    "set_tolerance",
    "tolerance",
    "round_half_up",
]
