from typing import Tuple
import numpy as np
from numpy import ndarray as NDArray


def unit_rgb_to_hsb(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert unit RGB to unit HSB with the max/min/chroma decomposition.

    Input:
        r, g, b ∈ [0, 1]

    Output:
        h ∈ [0, 1]   (fraction of a full turn)
        s ∈ [0, 1]
        v ∈ [0, 1]

    Achromatic input (max == min) yields hue 0 and saturation 0.
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    chroma = max_c - min_c

    if chroma == 0:
        return 0.0, 0.0, max_c

    if max_c == g:
        segment = (b - r) / chroma
        shift = 2.0
    elif max_c == b:
        segment = (r - g) / chroma
        shift = 4.0
    else:
        segment = (g - b) / chroma
        shift = 6.0 if segment < 0 else 0.0

    h = (segment + shift) * 60 / 360
    s = chroma / max_c
    return h, s, max_c


def np_unit_rgb_to_hsb(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized :func:`unit_rgb_to_hsb`.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsb: array of shape (..., 3): (hue, saturation, brightness), all in [0, 1]
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    chroma = max_c - min_c
    achromatic = chroma == 0
    safe_chroma = np.where(achromatic, 1.0, chroma)

    segment_r = (g - b) / safe_chroma
    segment_r = segment_r + np.where(segment_r < 0, 6.0, 0.0)
    segment_g = (b - r) / safe_chroma + 2.0
    segment_b = (r - g) / safe_chroma + 4.0

    # Green wins ties with red/blue, blue wins ties with red.
    h = np.select([max_c == g, max_c == b], [segment_g, segment_b], default=segment_r) * 60 / 360
    h = np.where(achromatic, 0.0, h)

    safe_max = np.where(achromatic, 1.0, max_c)
    s = np.where(achromatic, 0.0, chroma / safe_max)

    return np.stack([h, s, max_c], axis=-1)
