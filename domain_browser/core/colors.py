from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import numpy as np

from .coercion import to_number

MEASURE_MIN = 0.0
MEASURE_MAX = 100.0

# hue 0 (red) -> 120 (green); lightness ramps down so high scores read "stronger"
HUE_PER_POINT = 1.2
SATURATION = 80.0
LIGHTNESS_AT_ZERO = 90.0
LIGHTNESS_PER_POINT = 0.4


@dataclass(frozen=True)
class HslColor:
    hue: float
    saturation: float
    lightness: float

    def to_css(self) -> str:
        return f"hsl({self.hue:g}deg {self.saturation:g}% {self.lightness:g}%)"


def color_for(value: Any) -> Optional[HslColor]:
    """
    Map a 0-100 measure score to a red -> green HSL colour.

    Values outside the range are clamped. Missing or non-numeric values give
    None, which presentation renders as an unstyled tile.
    """
    number = to_number(value)
    if number is None:
        return None

    v = float(np.clip(number, MEASURE_MIN, MEASURE_MAX))
    return HslColor(
        hue=v * HUE_PER_POINT,
        saturation=SATURATION,
        lightness=LIGHTNESS_AT_ZERO - v * LIGHTNESS_PER_POINT,
    )
