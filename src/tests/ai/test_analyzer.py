"""Tests for relevance gating, extraction and fallback in BoxingAnalyzer."""

from __future__ import annotations

import numpy as np
import pytest

from boxingpython.ai.analyzer import AnalysisState, BoxingAnalyzer
from boxingpython.ai.exceptions import InferenceError
from boxingpython.ai.mock import MockSynthesizer
from boxingpython.ai.prompts import ANALYSIS_PROMPT, RELEVANCE_PROMPT
from boxingpython.base.exceptions import InputValidationError
from boxingpython.base.record import AnalysisRecord
from boxingpython.base.upload import VideoUpload

from ..responses import JSON_RESPONSE, PROSE_RESPONSE


class TestRelevanceGate:
    def test_negative_answer_short_circuits(self, upload, scripted_client):
        client = scripted_client(relevance="NO", analysis=JSON_RESPONSE)

        run = BoxingAnalyzer(client).run(upload)

        assert run.record == AnalysisRecord.not_relevant()
        assert run.relevant is False
        assert client.calls == [RELEVANCE_PROMPT]
        assert run.states == [AnalysisState.IDLE, AnalysisState.CLASSIFYING, AnalysisState.NORMALIZED]

    @pytest.mark.parametrize("answer", ["", "Yes, it does", "MAYBE", "no"])
    def test_anything_but_yes_is_negative(self, upload, scripted_client, answer):
        client = scripted_client(relevance=answer, analysis=JSON_RESPONSE)

        record = BoxingAnalyzer(client).analyze_record(upload)

        assert not record.is_relevant
        assert record.metrics == (0, 0, 0, 0, 0, 0)

    @pytest.mark.parametrize("answer", ["YES", "yes", "  Yes\n"])
    def test_affirmative_answer_proceeds(self, upload, scripted_client, answer):
        client = scripted_client(relevance=answer, analysis=JSON_RESPONSE)

        run = BoxingAnalyzer(client).run(upload)

        assert run.relevant is True
        assert client.calls == [RELEVANCE_PROMPT, ANALYSIS_PROMPT]
        assert run.record.strike_count == 64

    def test_classification_error_proceeds_to_analysis(self, upload, scripted_client):
        client = scripted_client(relevance=InferenceError("gemini", "timeout"), analysis=PROSE_RESPONSE)

        run = BoxingAnalyzer(client).run(upload)

        assert run.relevant is None
        assert client.calls == [RELEVANCE_PROMPT, ANALYSIS_PROMPT]
        assert run.state == AnalysisState.NORMALIZED
        assert run.record.strike_count == 120
        assert not run.record.used_fallback

    def test_gate_disabled(self, upload, scripted_client):
        client = scripted_client(relevance="NO", analysis=PROSE_RESPONSE)

        run = BoxingAnalyzer(client, gate=False).run(upload)

        assert client.calls == [ANALYSIS_PROMPT]
        assert run.states == [AnalysisState.IDLE, AnalysisState.EXTRACTING, AnalysisState.NORMALIZED]
        assert run.record.is_relevant


class TestExtraction:
    def test_analysis_error_substitutes_mock(self, upload, scripted_client):
        client = scripted_client(relevance="YES", analysis=InferenceError("openai", "503 Service Unavailable"))

        envelope = BoxingAnalyzer(client, mock=MockSynthesizer(np.random.default_rng(1))).analyze(upload)

        assert envelope.success
        record = envelope.analysis
        assert record is not None
        assert record.used_fallback
        assert record.strike_count >= 20
        assert 0 <= record.average_power <= 100
        assert 0 <= record.peak_power <= 100
        assert 0 <= record.accuracy <= 100
        assert 1 <= record.overall_rating <= 10
        assert "on the bag" in record.summary

    def test_analysis_error_states(self, upload, scripted_client):
        client = scripted_client(relevance="YES", analysis=RuntimeError("connection reset"))

        run = BoxingAnalyzer(client).run(upload)

        assert run.states[-2:] == [AnalysisState.FAULTED, AnalysisState.MOCK_SUBSTITUTED]

    def test_unparsable_answer_is_not_a_fault(self, upload, scripted_client):
        client = scripted_client(relevance="YES", analysis="{not json at all")

        run = BoxingAnalyzer(client).run(upload)

        assert run.state == AnalysisState.NORMALIZED
        assert not run.record.used_fallback
        assert not run.record.is_relevant

    def test_empty_answer_is_normalized(self, upload, scripted_client):
        client = scripted_client(relevance="YES", analysis="")

        run = BoxingAnalyzer(client).run(upload)

        assert run.state == AnalysisState.NORMALIZED
        assert not run.record.used_fallback
        assert not run.record.is_relevant

    def test_fence_wrapped_answer(self, upload, scripted_client):
        client = scripted_client(relevance="YES", analysis=f"```json\n{JSON_RESPONSE}\n```")

        record = BoxingAnalyzer(client).analyze_record(upload)

        assert record.mode == "Pad Work"
        assert record.overall_rating == 8


class TestInputValidation:
    def test_missing_upload(self, scripted_client):
        client = scripted_client()

        envelope = BoxingAnalyzer(client).analyze(None)

        assert envelope.to_dict() == {"success": False, "error": "Video file is required"}
        assert client.calls == []

    @pytest.mark.parametrize(
        "upload",
        [
            VideoUpload(data=b"", media_type="video/mp4"),
            VideoUpload(data=b"abc", media_type="application/pdf"),
        ],
    )
    def test_invalid_upload(self, scripted_client, upload):
        client = scripted_client()

        envelope = BoxingAnalyzer(client).analyze(upload)

        assert not envelope.success
        assert client.calls == []

    def test_analyze_record_raises(self, scripted_client):
        with pytest.raises(InputValidationError):
            BoxingAnalyzer(scripted_client()).analyze_record(VideoUpload(data=b"", media_type="video/mp4"))
