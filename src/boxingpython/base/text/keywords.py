"""Ordered label lists used when scanning free text for analysis fields."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

STRIKE_COUNT = "strike_count"
AVERAGE_POWER = "average_power"
PEAK_POWER = "peak_power"
SPEED = "speed"
ACCURACY = "accuracy"
OVERALL_RATING = "overall_rating"
TECHNIQUE = "technique"
STRENGTHS = "strengths"
IMPROVEMENTS = "improvements"


@dataclass(frozen=True)
class KeywordTable(Mapping[str, tuple[str, ...]]):
    """Read-only mapping from field name to candidate labels.

    Label order encodes priority among synonyms: the first label that matches wins.
    """

    entries: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        frozen = {name: tuple(labels) for name, labels in self.entries.items()}
        object.__setattr__(self, "entries", MappingProxyType(frozen))

    def __getitem__(self, name: str) -> tuple[str, ...]:
        return self.entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def labels(self, name: str) -> tuple[str, ...]:
        """Labels for a field, or an empty tuple when the field is unknown."""
        return self.entries.get(name, ())

    def with_overrides(self, **overrides: tuple[str, ...] | list[str]) -> KeywordTable:
        """Return a new table with some fields' labels replaced."""
        merged = dict(self.entries)
        merged.update({name: tuple(labels) for name, labels in overrides.items()})
        return KeywordTable(merged)


DEFAULT_KEYWORD_TABLE = KeywordTable(
    {
        STRIKE_COUNT: ("total strikes", "strikes", "punches", "number of punches", "punch count"),
        AVERAGE_POWER: ("average power", "avg power", "mean power", "power average"),
        PEAK_POWER: ("peak power", "max power", "highest power", "maximum power"),
        SPEED: ("speed", "km/h", "kmh", "kilometers per hour", "punch speed"),
        ACCURACY: ("accuracy", "accuracy percentage", "hit accuracy"),
        OVERALL_RATING: ("rating", "score", "overall rating", "overall score", "performance rating"),
        TECHNIQUE: ("technique",),
        STRENGTHS: ("strength",),
        IMPROVEMENTS: ("improvement",),
    }
)
