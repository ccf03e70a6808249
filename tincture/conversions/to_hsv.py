"""RGB → HSV for unit-range floating channels."""
from __future__ import annotations
from typing import Tuple

import numpy as np

from ..types.channel_type import HUE_360


def unit_rgb_to_hsv(r: np.floating, g: np.floating, b: np.floating) -> Tuple[np.floating, np.floating, np.floating]:
    """
    Convert unit RGB (each in [0, 1]) to HSV.

    Arithmetic stays in the dtype of the inputs, so float32 channels produce
    float32 components.

    Args:
        r, g, b: Floating channels in [0, 1], all of the same dtype.

    Returns:
        (h, s, v) with h ∈ [0, 360), s ∈ [0, 1], v ∈ [0, 1].
    """
    mx = max(r, g, b)
    mn = min(r, g, b)
    chroma = mx - mn
    zero = type(mx)(0)

    # Achromatic; also covers black, so chroma / mx below never divides by zero.
    if chroma == 0:
        return zero, zero, mx

    # Priority r, g, b when several channels share the maximum.
    if r == mx:
        h = ((g - b) / chroma) % 6
    elif g == mx:
        h = ((b - r) / chroma) + 2
    else:
        h = ((r - g) / chroma) + 4
    h = h * 60
    if h >= HUE_360:
        h = zero
    s = chroma / mx
    return type(mx)(h), type(mx)(s), mx
