"""Isolation and tolerant reading of a JSON payload embedded in a model answer."""

from __future__ import annotations

import json
import logging
import re
from typing import Any

logger = logging.getLogger(__name__)

__all__ = [
    "FIELD_ALIASES",
    "StructuredFields",
    "coerce_int",
    "find_structured_candidate",
    "parse_structured",
    "strip_structured_candidate",
]

_JSON_FENCE = re.compile(r"```json\s*([\s\S]*?)\s*```", re.IGNORECASE)
_ANY_FENCE = re.compile(r"```[a-zA-Z0-9_-]*\s*([\s\S]*?)\s*```")
_LEADING_INT = re.compile(r"^[-+]?\d+")

_NOT_AVAILABLE = "n/a"

# Alternative key spellings per canonical field, first present key wins.
FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "strike_count": ("Total_Strikes", "totalStrikes", "strikes"),
    "average_power": ("Average_Power", "averagePower", "power"),
    "peak_power": ("Peak_Power", "peakPower", "maxPower"),
    "speed": ("Speed", "speed"),
    "accuracy": ("Accuracy", "accuracy"),
    "overall_rating": ("Overall_Rating", "rating", "score"),
    "mode": ("Training_Mode", "Training Mode"),
    "intensity": ("Intensity",),
    "technique": ("Technique",),
    "strengths": ("Strengths",),
    "improvements": ("Improvements",),
    "footwork": ("Footwork",),
    "defense": ("Defense",),
    "summary": ("Summary",),
}


def find_structured_candidate(text: str) -> str:
    """Pick the part of `text` most likely to hold the JSON payload.

    Prefers a ```json fenced block, then any fenced block, then the whole text.
    """
    match = _JSON_FENCE.search(text)
    if match:
        return match.group(1).strip()

    match = _ANY_FENCE.search(text)
    if match:
        return match.group(1).strip()

    return text.strip()


def strip_structured_candidate(text: str) -> str:
    """Text around the block `find_structured_candidate` picks, empty when the whole text is the candidate."""
    for pattern in (_JSON_FENCE, _ANY_FENCE):
        match = pattern.search(text)
        if match:
            return f"{text[: match.start()].rstrip()}\n{text[match.end() :].lstrip()}".strip()

    return ""


def parse_structured(text: str) -> dict[str, Any] | None:
    """Parse the embedded JSON object, or return None if there is none."""
    candidate = find_structured_candidate(text)
    try:
        payload = json.loads(candidate)
    except json.JSONDecodeError as exc:
        logger.debug("No structured payload, falling back to text extraction: %s", exc)
        return None

    if not isinstance(payload, dict):
        logger.debug("Structured payload is a %s, not an object", type(payload).__name__)
        return None

    logger.debug("Parsed structured payload with keys: %s", list(payload))
    return payload


def _is_not_available(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip().lower() == _NOT_AVAILABLE)


def coerce_int(value: Any) -> int:
    """Convert a loosely typed JSON value to an int, 0 when it cannot be read."""
    if _is_not_available(value) or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value == value and abs(value) != float("inf") else 0
    if isinstance(value, str):
        match = _LEADING_INT.match(value.strip())
        return int(match.group()) if match else 0
    return 0


class StructuredFields:
    """Resolves canonical analysis fields out of a raw JSON payload.

    Each getter returns None when the payload does not supply the field, so callers can
    fall back to heuristic extraction field by field.
    """

    def __init__(self, payload: dict[str, Any], aliases: dict[str, tuple[str, ...]] | None = None):
        self.payload = payload
        self.aliases = aliases or FIELD_ALIASES

    def raw(self, name: str) -> Any:
        """Value of the first alias present with a usable value."""
        for key in self.aliases.get(name, ()):
            value = self.payload.get(key)
            if not _is_not_available(value):
                return value
        return None

    def number(self, name: str) -> int | None:
        value = self.raw(name)
        if value is None:
            return None
        return coerce_int(value)

    def text(self, name: str) -> str | None:
        value = self.raw(name)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            value = str(value)
        if not isinstance(value, str) or not value.strip():
            return None
        return value.strip()

    def items(self, name: str) -> list[str] | None:
        value = self.raw(name)
        if not isinstance(value, list):
            return None
        items = [str(item).strip() for item in value if item is not None and str(item).strip()]
        return items or None
