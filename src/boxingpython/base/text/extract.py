"""Heuristic extraction of labeled values from free-form model answers."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

__all__ = ["extract_labeled_line", "extract_list", "extract_number", "extract_percentage"]

_LIST_MARKER = re.compile(r"^\s*(?:\d+\.|-|•|\*)")


def _number_patterns(keyword: str) -> list[re.Pattern[str]]:
    escaped = re.escape(keyword)
    return [
        # "Total Strikes: 42"
        re.compile(rf"{escaped}[:\-]\s*(\d+)", re.IGNORECASE),
        # "Total Strikes 42"
        re.compile(rf"{escaped}\s*(\d+)", re.IGNORECASE),
        # "Total Strikes - 42" at the start of a line
        re.compile(rf"^{escaped}\s*[:\-]?\s*(\d+)", re.IGNORECASE | re.MULTILINE),
        # "42. Total Strikes"
        re.compile(rf"^\s*(\d+)\.?\s*{escaped}", re.IGNORECASE | re.MULTILINE),
    ]


def _percentage_patterns(keyword: str) -> list[re.Pattern[str]]:
    escaped = re.escape(keyword)
    return [
        re.compile(rf"{escaped}[:\-]\s*(\d+)\s*%", re.IGNORECASE),
        re.compile(rf"{escaped}\s*(\d+)\s*%", re.IGNORECASE),
        # Bare number under the same label.
        re.compile(rf"{escaped}\s*[:\-]?\s*(\d+)", re.IGNORECASE),
    ]


def _first_match(text: str, patterns: Iterable[re.Pattern[str]]) -> int | None:
    for pattern in patterns:
        match = pattern.search(text)
        if match:
            return int(match.group(1))
    return None


def extract_number(text: str, keywords: Sequence[str]) -> int:
    """Find the first integer labeled by one of `keywords`.

    Args:
        text: Free text to scan
        keywords: Candidate labels, in priority order

    Returns:
        The parsed integer, or 0 when no keyword matched.
    """
    for keyword in keywords:
        value = _first_match(text, _number_patterns(keyword))
        if value is not None:
            return value
    return 0


def extract_percentage(text: str, keywords: Sequence[str]) -> int:
    """Like `extract_number` but prefers `%`-suffixed values and caps the result at 100."""
    for keyword in keywords:
        value = _first_match(text, _percentage_patterns(keyword))
        if value is not None:
            return min(100, value)
    return 0


def extract_list(text: str, section: str, limit: int = 5) -> list[str]:
    """Collect bullet or numbered items listed under a section header.

    Args:
        text: Free text to scan
        section: Keyword identifying the section header line (case-insensitive)
        limit: Maximum number of items to return

    Returns:
        Up to `limit` stripped item texts, in order of appearance.
    """
    items: list[str] = []
    in_section = False
    needle = section.lower()

    for line in text.splitlines():
        if needle in line.lower():
            in_section = True
            continue
        if not in_section:
            continue
        if _LIST_MARKER.match(line):
            item = _LIST_MARKER.sub("", line, count=1).strip()
            if item:
                items.append(item)
        elif not line.strip() and items:
            break

    return items[:limit]


def extract_labeled_line(
    text: str,
    label: str,
    *,
    exclude: Sequence[str] = (),
    first: bool = False,
) -> str | None:
    """Return what follows `label:` on a line mentioning `label`.

    Args:
        text: Free text to scan
        label: Label to look for (case-insensitive substring)
        exclude: Lines mentioning any of these words are ignored
        first: Keep the first usable line instead of the last one

    Returns:
        The line with the label removed, or None if no usable line was found.
    """
    strip_label = re.compile(rf"{re.escape(label)}:?", re.IGNORECASE)
    needle = label.lower()
    excluded = [word.lower() for word in exclude]
    found: str | None = None

    for line in text.splitlines():
        lowered = line.lower()
        if needle not in lowered or any(word in lowered for word in excluded):
            continue
        remainder = strip_label.sub("", line, count=1).strip(" \t*#-:")
        if not remainder:
            continue
        found = remainder
        if first:
            break

    return found
