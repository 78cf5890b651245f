"""Numeric coercion helpers."""

import math
from typing import Any


def as_number(value: Any) -> int | float | None:
    """Return value as int/float, accepting numeric strings; None when not a finite number."""

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        return number if math.isfinite(number) else None
    return None
