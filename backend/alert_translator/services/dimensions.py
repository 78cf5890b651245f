"""Free-text dimension parsing."""

import json
from typing import Any


class InvalidDimensionsError(ValueError):
    """Raised when dimension text is not a JSON array of Name/Value objects."""


def parse_dimensions(text: str | None) -> list[dict[str, Any]]:
    """Parse a JSON array of {"Name", "Value"} objects; blank input yields []."""

    if not text or not text.strip():
        return []

    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidDimensionsError(f"Invalid dimensions JSON: {exc}") from exc

    if not isinstance(parsed, list):
        raise InvalidDimensionsError("Invalid dimensions JSON: Dimensions must be an array")
    for dim in parsed:
        if not isinstance(dim, dict) or not dim.get("Name") or not dim.get("Value"):
            raise InvalidDimensionsError("Invalid dimensions JSON: Each dimension must have Name and Value properties")
    return parsed
