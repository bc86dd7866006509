"""
Crayon Color Model Conversions
==============================

RGB ↔ HSB conversion and the hex string codec. Every channel, hue included,
is a unit float in ``[0, 1]``; hue is a fraction of a full turn.

Conversion Functions
-------------------

RGB → HSB:
    unit_rgb_to_hsb(r, g, b)
        Scalar conversion
    np_unit_rgb_to_hsb(r, g, b)
        Vectorized conversion, returns (..., 3)

HSB → RGB:
    hsb_to_unit_rgb(h, s, v)
        Scalar conversion
    np_hsb_to_unit_rgb(h, s, v)
        Vectorized conversion, returns (..., 3)

Hex:
    parse_hex(value)
        ``#RGB``/``#RGBA``/``#RRGGBB``/``#RRGGBBAA`` → (r, g, b, a) or None
    format_hex(channels, prefix="#", with_alpha=False)
        (r, g, b, a) → ``#RRGGBB[AA]``

Examples
--------
>>> from crayon.conversions import unit_rgb_to_hsb, hsb_to_unit_rgb
>>> h, s, v = unit_rgb_to_hsb(1.0, 0.5, 0.0)
>>> r, g, b = hsb_to_unit_rgb(h, s, v)
"""

from .to_hsb import unit_rgb_to_hsb, np_unit_rgb_to_hsb
from .to_rgb import hsb_to_unit_rgb, np_hsb_to_unit_rgb
from .hex import parse_hex, format_hex

__all__ = [
    'unit_rgb_to_hsb',
    'np_unit_rgb_to_hsb',
    'hsb_to_unit_rgb',
    'np_hsb_to_unit_rgb',
    'parse_hex',
    'format_hex',
]
