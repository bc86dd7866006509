from typing import Tuple
import numpy as np
from numpy import ndarray as NDArray


def hsb_to_unit_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """
    Convert unit HSB back to unit RGB using the six-sector hue wheel.

    Hue is a fraction of a full turn, so ``h * 6`` selects the sector.
    A hue of exactly 1 lands in the last sector and yields pure red again.
    """
    chroma = v * s
    h_prime = h * 6
    x = chroma * (1 - abs(h_prime % 2 - 1))

    sector = int(h_prime)
    if sector == 0:
        r, g, b = chroma, x, 0.0
    elif sector == 1:
        r, g, b = x, chroma, 0.0
    elif sector == 2:
        r, g, b = 0.0, chroma, x
    elif sector == 3:
        r, g, b = 0.0, x, chroma
    elif sector == 4:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x

    m = v - chroma
    return r + m, g + m, b + m


def np_hsb_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized :func:`hsb_to_unit_rgb`.

    Args:
        h: array-like or scalar, [0,1] hue
        s: array-like or scalar, [0,1] saturation
        v: array-like or scalar, [0,1] brightness

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    chroma = v * s
    h_prime = h * 6
    x = chroma * (1 - np.abs(h_prime % 2 - 1))
    zero = np.zeros_like(chroma)

    sector = np.floor(h_prime).astype(int)
    conditions = [sector == i for i in range(5)]

    r = np.select(conditions, [chroma, x, zero, zero, x], default=chroma)
    g = np.select(conditions, [x, chroma, chroma, x, zero], default=zero)
    b = np.select(conditions, [zero, zero, x, chroma, chroma], default=x)

    m = v - chroma
    return np.stack([r + m, g + m, b + m], axis=-1)
