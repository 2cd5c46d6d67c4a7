from __future__ import annotations

import numpy as np
import pytest

from boxingpython.ai.mock import (
    DEFENSE_OPTIONS,
    FOOTWORK_OPTIONS,
    IMPROVEMENT_OPTIONS,
    MOCK_TRAINING_MODES,
    STRENGTH_OPTIONS,
    TECHNIQUE_OPTIONS,
    MockSynthesizer,
)
from boxingpython.base.record import INTENSITY_LEVELS, AnalysisRecord

MEBIBYTE = 1024 * 1024


class ExtremeRng:
    """Generator stand-in that always draws the lowest or highest integer."""

    def __init__(self, highest: bool):
        self.highest = highest

    def integers(self, low: int, high: int | None = None) -> int:
        if high is None:
            low, high = 0, low
        return high - 1 if self.highest else low


def assert_in_declared_ranges(record: AnalysisRecord) -> None:
    assert record.strike_count >= 20
    assert 45 <= record.average_power <= 95
    assert 70 <= record.peak_power <= 100
    assert 30 <= record.speed <= 60
    assert 60 <= record.accuracy <= 95
    assert 5 <= record.overall_rating <= 10
    assert tuple(record.technique) in TECHNIQUE_OPTIONS
    assert tuple(record.strengths) in STRENGTH_OPTIONS
    assert tuple(record.improvements) in IMPROVEMENT_OPTIONS
    assert record.mode in MOCK_TRAINING_MODES
    assert record.intensity in INTENSITY_LEVELS
    assert record.footwork in FOOTWORK_OPTIONS
    assert record.defense in DEFENSE_OPTIONS
    assert record.is_relevant
    assert record.used_fallback


@pytest.mark.parametrize("size", [0, 1, MEBIBYTE, 50 * MEBIBYTE, 10**12, -5])
@pytest.mark.parametrize("seed", range(20))
def test_output_within_ranges(size: int, seed: int) -> None:
    record = MockSynthesizer(np.random.default_rng(seed)).synthesize(size, "clip.mp4")
    assert_in_declared_ranges(record)


def test_lowest_draws() -> None:
    record = MockSynthesizer(ExtremeRng(highest=False)).synthesize(MEBIBYTE, "clip.mp4")  # type: ignore[arg-type]

    # 1 MiB is about 30 seconds, about 60 strikes
    assert record.strike_count == 50
    assert record.average_power == 55
    assert record.peak_power == 75
    assert record.speed == 30
    assert record.accuracy == 65
    assert record.overall_rating == 7
    assert record.mode == MOCK_TRAINING_MODES[0]
    assert record.technique == list(TECHNIQUE_OPTIONS[0])


def test_highest_draws() -> None:
    record = MockSynthesizer(ExtremeRng(highest=True)).synthesize(MEBIBYTE, "clip.mp4")  # type: ignore[arg-type]

    assert record.strike_count == 69
    assert record.average_power == 74
    assert record.peak_power == 94
    assert record.speed == 49
    assert record.accuracy == 84
    assert record.overall_rating == 9
    assert record.intensity == INTENSITY_LEVELS[-1]
    assert record.defense == DEFENSE_OPTIONS[-1]


def test_strike_floor_for_empty_file() -> None:
    record = MockSynthesizer(ExtremeRng(highest=False)).synthesize(0, "")  # type: ignore[arg-type]

    assert record.strike_count == 20
    assert record.summary.startswith("Solid 0-second training session")


def test_summary_mentions_bag_work() -> None:
    synthesizer = MockSynthesizer(np.random.default_rng(0))

    assert "on the bag" in synthesizer.synthesize(MEBIBYTE, "Heavy_BAG_round.mp4").summary
    assert "on the bag" not in synthesizer.synthesize(MEBIBYTE, "shadow.mp4").summary


def test_seeded_output_is_reproducible() -> None:
    first = MockSynthesizer(np.random.default_rng(7)).synthesize(3 * MEBIBYTE, "clip.mp4")
    second = MockSynthesizer(np.random.default_rng(7)).synthesize(3 * MEBIBYTE, "clip.mp4")

    assert first == second
