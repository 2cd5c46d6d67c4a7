from __future__ import annotations

from typing import TypeVar

import numpy as np

from boxingpython.base.record import INTENSITY_LEVELS, AnalysisRecord

__all__ = ["MockSynthesizer"]

T = TypeVar("T")

# Rough estimate: 1 MiB of video is about 30 seconds of footage.
SECONDS_PER_MEBIBYTE = 30.0
STRIKES_PER_SECOND = 2.0
JITTER = 10

MOCK_TRAINING_MODES: tuple[str, ...] = ("Shadow Boxing", "Bag Work", "Pad Work", "Sparring")

TECHNIQUE_OPTIONS: tuple[tuple[str, ...], ...] = (
    ("Solid jab technique", "Good head movement", "Tight guard position"),
    ("Strong cross", "Quick combinations", "Good balance"),
    ("Fast hands", "Powerful hooks", "Good footwork"),
    ("Technical defense", "Smooth rhythm", "Controlled aggression"),
)

STRENGTH_OPTIONS: tuple[tuple[str, ...], ...] = (
    ("Excellent hand speed", "Good power generation"),
    ("Strong combinations", "Technical proficiency"),
    ("Great cardio", "Maintained form throughout"),
    ("Accurate strikes", "Good timing"),
)

IMPROVEMENT_OPTIONS: tuple[tuple[str, ...], ...] = (
    ("Keep guard higher after combinations", "Add more head movement"),
    ("Work on defensive positioning", "Improve jab setup"),
    ("Increase output", "Work on footwork patterns"),
    ("Add variety to combinations", "Focus on counter-punching"),
)

FOOTWORK_OPTIONS: tuple[str, ...] = ("Good balance and movement", "Stable base", "Active footwork patterns")
DEFENSE_OPTIONS: tuple[str, ...] = ("Adequate defensive awareness", "Solid guard position", "Needs more head movement")


class MockSynthesizer:
    """Produces a plausible placeholder analysis from upload metadata alone.

    Used when the inference provider is unavailable. Metrics are derived from the file
    size, jittered by up to +/-10 and clamped to ranges that always look reasonable.
    """

    def __init__(self, rng: np.random.Generator | None = None):
        """Initialize the synthesizer.

        Args:
            rng: Random generator to draw jitter and options from. Pass a seeded
                generator for reproducible output.
        """
        self.rng = rng if rng is not None else np.random.default_rng()

    def _jitter(self) -> int:
        return int(self.rng.integers(-JITTER, JITTER))

    def _pick(self, options: tuple[T, ...]) -> T:
        return options[int(self.rng.integers(len(options)))]

    def estimate_duration(self, size_bytes: int) -> float:
        """Pseudo-duration in seconds derived from the payload size."""
        return max(0, size_bytes) / (1024 * 1024) * SECONDS_PER_MEBIBYTE

    def synthesize(self, size_bytes: int, filename: str = "") -> AnalysisRecord:
        duration = self.estimate_duration(size_bytes)
        base_strikes = int(duration * STRIKES_PER_SECOND)

        if "bag" in filename.lower():
            remark = "Power delivery looks strong on the bag."
        else:
            remark = "Technical execution shows promise for continued development."
        summary = (
            f"Solid {duration:.0f}-second training session showing consistent work rate and good fundamentals. "
            f"{remark}"
        )

        return AnalysisRecord(
            is_relevant=True,
            summary=summary,
            strike_count=max(20, base_strikes + self._jitter()),
            average_power=min(95, max(45, 65 + self._jitter())),
            peak_power=min(100, max(70, 85 + self._jitter())),
            speed=min(60, max(30, 40 + self._jitter())),
            accuracy=min(95, max(60, 75 + self._jitter())),
            technique=list(self._pick(TECHNIQUE_OPTIONS)),
            strengths=list(self._pick(STRENGTH_OPTIONS)),
            improvements=list(self._pick(IMPROVEMENT_OPTIONS)),
            mode=self._pick(MOCK_TRAINING_MODES),
            intensity=self._pick(INTENSITY_LEVELS),
            footwork=self._pick(FOOTWORK_OPTIONS),
            defense=self._pick(DEFENSE_OPTIONS),
            overall_rating=min(10, max(5, 7 + int(self.rng.integers(0, 3)))),
            used_fallback=True,
        )
