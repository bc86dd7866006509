"""Crayon: RGB/HSB color components, hex codec and color blending."""

from .components import (
    ComponentsBase,
    ChannelDivisionWarning,
    RgbComponents,
    HsbComponents,
    CONTRAST_THRESHOLD,
)
from .conversions import (
    unit_rgb_to_hsb,
    np_unit_rgb_to_hsb,
    hsb_to_unit_rgb,
    np_hsb_to_unit_rgb,
    parse_hex,
    format_hex,
)
from .types import ColorSpace, FormatType
from .utils import (
    DEFAULT_TOLERANCE,
    normalize,
    is_almost_equal,
    get_tolerance,
    set_tolerance,
    tolerance,
)
from .adapters import ColorAdapter, ComponentListAdapter, NDArrayAdapter
from .operations import ColorOperations, CLEAR

__version__ = "1.0.0"

__all__ = [
    # core component types
    "ComponentsBase",
    "ChannelDivisionWarning",
    "RgbComponents",
    "HsbComponents",
    "CONTRAST_THRESHOLD",
    # conversions
    "unit_rgb_to_hsb",
    "np_unit_rgb_to_hsb",
    "hsb_to_unit_rgb",
    "np_hsb_to_unit_rgb",
    "parse_hex",
    "format_hex",
    # types
    "ColorSpace",
    "FormatType",
    # numeric utilities
    "DEFAULT_TOLERANCE",
    "normalize",
    "is_almost_equal",
    "get_tolerance",
    "set_tolerance",
    "tolerance",
    # adapters and native color operations
    "ColorAdapter",
    "ComponentListAdapter",
    "NDArrayAdapter",
    "ColorOperations",
    "CLEAR",
    "__version__",
]
