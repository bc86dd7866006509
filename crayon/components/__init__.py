"""
Crayon Color Components
=======================

Immutable RGB and HSB component values.

Features
--------
- Every channel is clamped to ``[0, 1]`` on construction, never rejected
- Instances are frozen; operations return new values
- Tolerance based equality (relative, see ``crayon.utils.tolerance``)
- Arithmetic blending (add, subtract, multiply, divide, mix) with opt-in alpha
- Conversion between RGB and HSB in both directions

Usage
-----
>>> from crayon.components import RgbComponents, HsbComponents
>>> red = RgbComponents.from_hex("#F00")
>>> red.hex()
'#FF0000'
>>> hsb = HsbComponents.from_rgb(red)
>>> hsb.inverted().to_rgb().hex()
'#00FFFF'
>>> (red + RgbComponents(0, 1, 0)).hex()
'#FFFF00'
"""

from .components_base import ComponentsBase, ChannelDivisionWarning
from .rgb import RgbComponents, CONTRAST_THRESHOLD
from .hsb import HsbComponents

__all__ = [
    "ComponentsBase",
    "ChannelDivisionWarning",
    "RgbComponents",
    "HsbComponents",
    "CONTRAST_THRESHOLD",
]
