from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

__all__ = [
    "AnalysisEnvelope",
    "AnalysisRecord",
    "DEFAULT_INTENSITY",
    "DEFAULT_TRAINING_MODE",
    "INTENSITY_LEVELS",
    "MAX_LIST_ITEMS",
    "NOT_APPLICABLE",
    "NOT_RELEVANT_SUMMARY",
    "TRAINING_MODES",
]

# Scan order matters: the first mode found in free text wins.
TRAINING_MODES: tuple[str, ...] = ("Shadow Boxing", "Bag Work", "Pad Work", "Sparring", "Heavy Bag", "Speed Bag")
INTENSITY_LEVELS: tuple[str, ...] = ("Low", "Medium", "High", "Extreme")

DEFAULT_TRAINING_MODE = "Bag Work"
DEFAULT_INTENSITY = "Medium"
NOT_APPLICABLE = "N/A"
MAX_LIST_ITEMS = 5

NOT_RELEVANT_SUMMARY = (
    "This video does not contain boxing or martial arts content. "
    "Please upload a boxing training video for analysis."
)


@dataclass
class AnalysisRecord:
    """Bounded, strictly typed result of analysing one training video.

    Attributes:
        is_relevant: False when the video was judged not to show boxing activity
        summary: Short free-text summary of the session
        strike_count: Number of strikes thrown, >= 0
        average_power: Average power on a 0-100 scale
        peak_power: Peak power on a 0-100 scale
        speed: Estimated punch speed in km/h, >= 0
        accuracy: Estimated accuracy percentage, 0-100
        technique: Up to five observed techniques
        strengths: Key strengths
        improvements: Areas for improvement
        mode: Training mode, one of `TRAINING_MODES`
        intensity: One of `INTENSITY_LEVELS`
        footwork: Description of footwork quality
        defense: Description of defensive skills
        overall_rating: Score in 1-10, 0 when not applicable
        used_fallback: True when the record was synthesized without a model answer
    """

    is_relevant: bool
    summary: str
    strike_count: int = 0
    average_power: int = 0
    peak_power: int = 0
    speed: int = 0
    accuracy: int = 0
    technique: list[str] = field(default_factory=list)
    strengths: list[str] = field(default_factory=list)
    improvements: list[str] = field(default_factory=list)
    mode: str = DEFAULT_TRAINING_MODE
    intensity: str = DEFAULT_INTENSITY
    footwork: str = ""
    defense: str = ""
    overall_rating: int = 0
    used_fallback: bool = False

    @property
    def metrics(self) -> tuple[int, int, int, int, int, int]:
        """The six numeric metrics used for the relevance check."""
        return (
            self.strike_count,
            self.average_power,
            self.peak_power,
            self.speed,
            self.accuracy,
            self.overall_rating,
        )

    @classmethod
    def not_relevant(cls, summary: str = NOT_RELEVANT_SUMMARY) -> AnalysisRecord:
        """Record returned when the video does not show boxing activity."""
        return cls(
            is_relevant=False,
            summary=summary,
            mode=NOT_APPLICABLE,
            intensity=NOT_APPLICABLE,
            footwork=NOT_APPLICABLE,
            defense=NOT_APPLICABLE,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "isRelevant": self.is_relevant,
            "summary": self.summary,
            "strikeCount": self.strike_count,
            "averagePower": self.average_power,
            "peakPower": self.peak_power,
            "speed": self.speed,
            "accuracy": self.accuracy,
            "technique": list(self.technique),
            "strengths": list(self.strengths),
            "improvements": list(self.improvements),
            "mode": self.mode,
            "intensity": self.intensity,
            "footwork": self.footwork,
            "defense": self.defense,
            "overallRating": self.overall_rating,
            "usedFallback": self.used_fallback,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AnalysisRecord:
        return cls(
            is_relevant=data["isRelevant"],
            summary=data["summary"],
            strike_count=data.get("strikeCount", 0),
            average_power=data.get("averagePower", 0),
            peak_power=data.get("peakPower", 0),
            speed=data.get("speed", 0),
            accuracy=data.get("accuracy", 0),
            technique=list(data.get("technique", [])),
            strengths=list(data.get("strengths", [])),
            improvements=list(data.get("improvements", [])),
            mode=data.get("mode", DEFAULT_TRAINING_MODE),
            intensity=data.get("intensity", DEFAULT_INTENSITY),
            footwork=data.get("footwork", ""),
            defense=data.get("defense", ""),
            overall_rating=data.get("overallRating", 0),
            used_fallback=data.get("usedFallback", False),
        )


@dataclass
class AnalysisEnvelope:
    """Success/error wrapper handed to the presentation layer."""

    success: bool
    analysis: AnalysisRecord | None = None
    error: str | None = None

    @classmethod
    def ok(cls, analysis: AnalysisRecord) -> AnalysisEnvelope:
        return cls(success=True, analysis=analysis)

    @classmethod
    def failure(cls, error: str) -> AnalysisEnvelope:
        return cls(success=False, error=error)

    def to_dict(self) -> dict[str, Any]:
        if self.success and self.analysis is not None:
            return {"success": True, "analysis": self.analysis.to_dict()}
        return {"success": False, "error": self.error or "Failed to analyze video"}
