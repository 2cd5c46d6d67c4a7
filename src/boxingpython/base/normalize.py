"""Merge structured and heuristic extraction output into an `AnalysisRecord`."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from boxingpython.base.record import (
    DEFAULT_INTENSITY,
    DEFAULT_TRAINING_MODE,
    INTENSITY_LEVELS,
    MAX_LIST_ITEMS,
    NOT_APPLICABLE,
    TRAINING_MODES,
    AnalysisRecord,
)
from boxingpython.base.text import keywords as kw
from boxingpython.base.text.extract import (
    extract_labeled_line,
    extract_list,
    extract_number,
    extract_percentage,
)
from boxingpython.base.text.keywords import DEFAULT_KEYWORD_TABLE, KeywordTable
from boxingpython.base.text.structured import (
    StructuredFields,
    coerce_int,
    parse_structured,
    strip_structured_candidate,
)

logger = logging.getLogger(__name__)

__all__ = ["ExtractedFields", "FieldNormalizer", "RawModelResponse"]

NUMERIC_DEFAULTS: dict[str, int] = {
    kw.STRIKE_COUNT: 10,
    kw.AVERAGE_POWER: 65,
    kw.PEAK_POWER: 80,
    kw.SPEED: 35,
    kw.ACCURACY: 70,
    kw.OVERALL_RATING: 7,
}

DEFAULT_TECHNIQUE = ["Solid guard position", "Good punch combinations"]
DEFAULT_STRENGTHS = ["Consistent punching", "Good power generation"]
DEFAULT_IMPROVEMENTS = ["Work on head movement"]
DEFAULT_FOOTWORK = "Good balance and movement"
DEFAULT_DEFENSE = "Adequate defensive awareness"
DEFAULT_SUMMARY = "Solid boxing performance with good technique and power"
NON_RELEVANT_SUMMARY = "This video does not contain boxing activity"

_PERCENT_FIELDS = (kw.AVERAGE_POWER, kw.PEAK_POWER, kw.ACCURACY)
_COUNT_FIELDS = (kw.STRIKE_COUNT, kw.SPEED, kw.OVERALL_RATING)
_LIST_FIELDS = (kw.TECHNIQUE, kw.STRENGTHS, kw.IMPROVEMENTS)
_TEXT_FIELDS = ("mode", "intensity", "footwork", "defense", "summary")


@dataclass
class RawModelResponse:
    """Text answer of the model plus the JSON object embedded in it, if any."""

    text: str
    payload: dict[str, Any] | None = None

    @classmethod
    def from_text(cls, text: str) -> RawModelResponse:
        return cls(text=text, payload=parse_structured(text))

    @property
    def free_text(self) -> str:
        """Text left for heuristic scans, without the JSON block once a payload was parsed."""
        if self.payload is None:
            return self.text
        return strip_structured_candidate(self.text)


@dataclass
class ExtractedFields:
    """Per-field values before defaults are applied. None means unresolved."""

    strike_count: int | None = None
    average_power: int | None = None
    peak_power: int | None = None
    speed: int | None = None
    accuracy: int | None = None
    overall_rating: int | None = None
    technique: list[str] | None = None
    strengths: list[str] | None = None
    improvements: list[str] | None = None
    mode: str | None = None
    intensity: str | None = None
    footwork: str | None = None
    defense: str | None = None
    summary: str | None = None
    sources: dict[str, str] = field(default_factory=dict)

    def metric(self, name: str) -> int:
        return getattr(self, name) or 0


class FieldNormalizer:
    """Builds a complete, clamped `AnalysisRecord` from a model answer.

    Structured payload values win field by field; free-text heuristics fill whatever the
    payload did not supply, reading only the prose around the JSON block. When every metric
    resolves to zero the record is marked as not relevant and no defaults are filled in.
    """

    def __init__(self, keywords: KeywordTable = DEFAULT_KEYWORD_TABLE):
        self.keywords = keywords

    def normalize(self, response: RawModelResponse | str) -> AnalysisRecord:
        """Normalize a raw model answer into an `AnalysisRecord`."""
        if isinstance(response, str):
            response = RawModelResponse.from_text(response)

        fields = ExtractedFields()
        if response.payload is not None:
            self._apply_structured(fields, StructuredFields(response.payload))
        self._apply_heuristics(fields, response.free_text)

        return self._finalize(fields)

    def normalize_fields(self, values: dict[str, Any]) -> AnalysisRecord:
        """Normalize already extracted values, keyed by wire or attribute names.

        Normalizing the `to_dict()` output of a normalized record yields the same record.
        """
        lookup = {_ATTRIBUTE_BY_WIRE_KEY.get(key, key): value for key, value in values.items()}
        fields = ExtractedFields()
        for name in (*_PERCENT_FIELDS, *_COUNT_FIELDS):
            self._resolve(fields, name, coerce_int(lookup.get(name)), "fields")
        for name in _LIST_FIELDS:
            items = lookup.get(name)
            if isinstance(items, list) and items:
                self._resolve(fields, name, [str(item) for item in items], "fields")
        for name in _TEXT_FIELDS:
            value = lookup.get(name)
            if isinstance(value, str) and value.strip():
                self._resolve(fields, name, value.strip(), "fields")

        return self._finalize(fields)

    def _apply_structured(self, fields: ExtractedFields, structured: StructuredFields) -> None:
        for name in (*_PERCENT_FIELDS, *_COUNT_FIELDS):
            self._resolve(fields, name, structured.number(name))
        for name in _LIST_FIELDS:
            self._resolve(fields, name, structured.items(name))
        for name in _TEXT_FIELDS:
            self._resolve(fields, name, structured.text(name))

    def _apply_heuristics(self, fields: ExtractedFields, text: str) -> None:
        for name in _PERCENT_FIELDS:
            if getattr(fields, name) is None:
                self._resolve(fields, name, extract_percentage(text, self.keywords.labels(name)), "text")
        for name in _COUNT_FIELDS:
            if getattr(fields, name) is None:
                self._resolve(fields, name, extract_number(text, self.keywords.labels(name)), "text")
        for name in _LIST_FIELDS:
            if getattr(fields, name) is None:
                for section in self.keywords.labels(name):
                    items = extract_list(text, section, limit=MAX_LIST_ITEMS)
                    if items:
                        self._resolve(fields, name, items, "text")
                        break

        if fields.mode is None:
            self._resolve(fields, "mode", _scan_choices(text, TRAINING_MODES), "text")
        if fields.intensity is None:
            self._resolve(fields, "intensity", _scan_choices(text, INTENSITY_LEVELS), "text")
        if fields.footwork is None:
            self._resolve(fields, "footwork", extract_labeled_line(text, "footwork"), "text")
        if fields.defense is None:
            defense = extract_labeled_line(text, "defense", exclude=("footwork",), first=True)
            self._resolve(fields, "defense", defense, "text")
        if fields.summary is None:
            self._resolve(fields, "summary", extract_labeled_line(text, "summary", first=True), "text")

    def _resolve(self, fields: ExtractedFields, name: str, value: Any, source: str = "json") -> None:
        if value is None or (isinstance(value, str) and value.strip().upper() == NOT_APPLICABLE):
            return
        setattr(fields, name, value)
        fields.sources[name] = source

    def _finalize(self, fields: ExtractedFields) -> AnalysisRecord:
        for name in (*_PERCENT_FIELDS, *_COUNT_FIELDS):
            setattr(fields, name, max(0, fields.metric(name)))

        non_relevant = all(fields.metric(name) == 0 for name in NUMERIC_DEFAULTS)
        logger.debug(
            "Resolved metrics %s (sources: %s), non_relevant=%s",
            {name: fields.metric(name) for name in NUMERIC_DEFAULTS},
            fields.sources,
            non_relevant,
        )

        if non_relevant:
            return AnalysisRecord.not_relevant(summary=fields.summary or NON_RELEVANT_SUMMARY)

        def metric_or_default(name: str) -> int:
            return fields.metric(name) or NUMERIC_DEFAULTS[name]

        return AnalysisRecord(
            is_relevant=True,
            summary=fields.summary or DEFAULT_SUMMARY,
            strike_count=metric_or_default(kw.STRIKE_COUNT),
            average_power=_clamp(metric_or_default(kw.AVERAGE_POWER), 0, 100),
            peak_power=_clamp(metric_or_default(kw.PEAK_POWER), 0, 100),
            speed=metric_or_default(kw.SPEED),
            accuracy=_clamp(metric_or_default(kw.ACCURACY), 0, 100),
            technique=(fields.technique or DEFAULT_TECHNIQUE)[:MAX_LIST_ITEMS],
            strengths=(fields.strengths or DEFAULT_STRENGTHS)[:MAX_LIST_ITEMS],
            improvements=(fields.improvements or DEFAULT_IMPROVEMENTS)[:MAX_LIST_ITEMS],
            mode=_match_choice(fields.mode, TRAINING_MODES) or DEFAULT_TRAINING_MODE,
            intensity=_match_choice(fields.intensity, INTENSITY_LEVELS) or DEFAULT_INTENSITY,
            footwork=fields.footwork or DEFAULT_FOOTWORK,
            defense=fields.defense or DEFAULT_DEFENSE,
            overall_rating=_clamp(metric_or_default(kw.OVERALL_RATING), 1, 10),
        )


_ATTRIBUTE_BY_WIRE_KEY: dict[str, str] = {
    "strikeCount": kw.STRIKE_COUNT,
    "averagePower": kw.AVERAGE_POWER,
    "peakPower": kw.PEAK_POWER,
    "overallRating": kw.OVERALL_RATING,
}


def _clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(upper, value))


def _scan_choices(text: str, choices: tuple[str, ...]) -> str | None:
    lowered = text.lower()
    for choice in choices:
        if choice.lower() in lowered:
            return choice
    return None


def _match_choice(value: str | None, choices: tuple[str, ...]) -> str | None:
    """Map a free-form label onto a known choice."""
    if value is None:
        return None
    cleaned = value.strip()
    for choice in choices:
        if cleaned.lower() == choice.lower():
            return choice
    return _scan_choices(cleaned, choices)
