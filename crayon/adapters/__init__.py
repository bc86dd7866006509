"""Bridges between native color representations and component values."""

from .base import ColorAdapter
from .component_list import ComponentListAdapter
from .ndarray import NDArrayAdapter

__all__ = [
    "ColorAdapter",
    "ComponentListAdapter",
    "NDArrayAdapter",
]
