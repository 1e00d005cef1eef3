"""
Text inspection helpers used by the dispatcher.

Both functions are pure and cheap; they run on every inbound text message.
"""

import re
from typing import Optional, Tuple

COORDINATES_PATTERN = re.compile(r"^-?\d+(\.\d+)?,-?\d+(\.\d+)?$")

LOCATION_KEYWORDS = frozenset(
    {"nearby", "close to", "around", "location", "near", "place"}
)


def parse_coordinates(text: str) -> Optional[Tuple[float, float]]:
    """
    Parse a ``"latitude,longitude"`` string.

    The text is trimmed, then must be two signed decimals separated by a
    single comma with nothing else in between. Values are not range checked.

    Args:
        text: Raw message text

    Returns:
        ``(latitude, longitude)`` or None if the text has any other shape
    """
    candidate = text.strip()
    if not COORDINATES_PATTERN.match(candidate):
        return None

    latitude, longitude = candidate.split(",")
    return float(latitude), float(longitude)


def is_location_seeking(text: str) -> bool:
    """True if the text mentions any location keyword (substring, case-insensitive)."""
    lowered = text.lower()
    return any(keyword in lowered for keyword in LOCATION_KEYWORDS)
