"""HSV → RGB for unit-range floating channels."""
from __future__ import annotations
import math
from typing import Tuple

from boundednumbers import clamp

from ..types.channel_type import HUE_360


def hsv_to_unit_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """
    Convert HSV to unit RGB.

    Hue is taken modulo 360; saturation and value are clamped to [0, 1].
    Computed in double precision.
    """
    h = float(h) % HUE_360
    s = clamp(float(s), 0.0, 1.0)
    v = clamp(float(v), 0.0, 1.0)

    c = v * s
    hp = h / 60.0
    x = c * (1.0 - abs(hp % 2.0 - 1.0))
    m = v - c

    sector = int(math.floor(hp)) % 6
    if sector == 0:
        r, g, b = c, x, 0.0
    elif sector == 1:
        r, g, b = x, c, 0.0
    elif sector == 2:
        r, g, b = 0.0, c, x
    elif sector == 3:
        r, g, b = 0.0, x, c
    elif sector == 4:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x
    return r + m, g + m, b + m
