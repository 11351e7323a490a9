"""Fixed geometry constants and the shared rounding rule for door overlays."""

from __future__ import annotations

import math

# Half-height of a standard lever handle backplate (160 mm tall)
HANDLE_BACKPLATE_HALF_HEIGHT: float = 80.0

# Grid cell labels in row-major order
UNIT_LABELS: tuple[str, ...] = ("Top-Left", "Top-Right", "Bottom-Left", "Bottom-Right")

# Editor slider range for the top row ratio; the engine accepts 0-100
RECOMMENDED_RATIO_RANGE: tuple[float, float] = (15.0, 85.0)


def round_mm(value: float) -> float:
    """Round to one decimal place, halves toward positive infinity.

    Infinite, NaN and overflowing inputs come back unchanged.
    """
    scaled = value * 10
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled + 0.5) / 10


def format_mm(value: float) -> str:
    """Format a length the way a rounded measurement is displayed.

    Integral values print without a decimal part; anything else prints
    its shortest representation.
    """
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)
