from __future__ import annotations

import re
from typing import Any, Optional

import numpy as np
from matplotlib.colors import to_rgba

# Multiply a size in mm by these to get the units the backend uses
# for font sizes and stroke widths.
PT = 72.27 / 25.4
STROKE = 96 / 25.4


def mm_to_pt(mm: float) -> float:
    """Convert a size in millimetres to points."""
    return mm * PT


def mm_to_stroke(mm: float) -> float:
    """Convert a stroke width in millimetres to backend stroke units."""
    return mm * STROKE


def snake_class(obj: Any) -> str:
    """
    Canonical snake_case name of an object's class.

    ``GeomPoint()`` -> ``"geom_point"``
    """
    name = obj.__name__ if isinstance(obj, type) else type(obj).__name__
    return re.sub(r"(?<=[a-z0-9])(?=[A-Z])", "_", name).lower()


def resolution(x: Any, zero: bool = True) -> float:
    """
    Smallest non-zero gap between the distinct values of ``x``.

    Args:
        x: Numeric values.
        zero: Whether 0 should be counted as one of the values.

    Returns:
        The resolution, 1.0 when it cannot be computed.
    """
    values = np.asarray(x, dtype=float)
    values = values[np.isfinite(values)]
    if zero:
        values = np.append(values, 0.0)
    values = np.unique(values)
    if len(values) < 2:
        return 1.0
    return float(np.min(np.diff(values)))


# R-style "grey0".."grey100" (or "gray"), the percentage of white
GREY_PATTERN = re.compile(r"^gr[ae]y(\d{1,3})$")


def as_colour(colour: Any) -> Any:
    """Translate R grey levels into hex colours; anything else is passed on."""
    if isinstance(colour, str):
        match = GREY_PATTERN.match(colour.strip().lower())
        if match and int(match.group(1)) <= 100:
            level = int(round(int(match.group(1)) * 255 / 100))
            return f"#{level:02x}{level:02x}{level:02x}"
    return colour


def alpha(colour: Optional[str], value: Optional[float]) -> Optional[tuple[float, float, float, float]]:
    """Colour as an RGBA tuple, with ``value`` replacing its alpha when given."""
    if colour is None or (isinstance(colour, float) and np.isnan(colour)):
        return None
    if value is None or (isinstance(value, float) and np.isnan(value)):
        return to_rgba(as_colour(colour))
    return to_rgba(as_colour(colour), alpha=value)
