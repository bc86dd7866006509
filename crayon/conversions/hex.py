from __future__ import annotations
import re
from typing import Optional, Sequence

from ..types.color_types import ChannelTuple
from ..utils.num_utils import round_half_up

HEX_PATTERN = re.compile(r"[0-9a-fA-F]+")
HEX_LENGTHS = (3, 4, 6, 8)


def parse_hex(value: str) -> Optional[ChannelTuple]:
    """
    Parse ``#RGB``, ``#RGBA``, ``#RRGGBB`` or ``#RRGGBBAA`` into unit channels.

    The leading ``#`` is optional and digits are case-insensitive. Short forms
    are digit-doubled first. Without an alpha byte the alpha is 1.0.

    Returns:
        ``(red, green, blue, alpha)`` or ``None`` when the string is not a hex color.
    """
    if not isinstance(value, str):
        return None

    digits = value[1:] if value.startswith("#") else value
    if len(digits) not in HEX_LENGTHS or not HEX_PATTERN.fullmatch(digits):
        return None

    if len(digits) in (3, 4):
        digits = "".join(char * 2 for char in digits)

    alpha = 1.0
    if len(digits) == 8:
        alpha = int(digits[6:], 16) / 255
        digits = digits[:6]

    value_int = int(digits, 16)
    return (
        (value_int >> 16 & 0xFF) / 255,
        (value_int >> 8 & 0xFF) / 255,
        (value_int & 0xFF) / 255,
        alpha,
    )


def format_hex(channels: Sequence[float], prefix: Optional[str] = "#", with_alpha: bool = False) -> str:
    """
    Render unit ``(red, green, blue, alpha)`` channels as uppercase hex.

    Each channel becomes ``round(channel * 255)`` as two digits. A ``None`` or
    empty prefix renders the digits alone.
    """
    red, green, blue, alpha = channels
    parts = [red, green, blue]
    if with_alpha:
        parts.append(alpha)
    digits = "".join(f"{round_half_up(channel * 255):02X}" for channel in parts)
    return f"{prefix or ''}{digits}"
