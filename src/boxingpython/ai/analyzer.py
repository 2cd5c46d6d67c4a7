"""Relevance gating, extraction and fallback selection for one uploaded video."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import Enum

from boxingpython.ai.inference import InferenceClient
from boxingpython.ai.mock import MockSynthesizer
from boxingpython.ai.prompts import AFFIRMATIVE_ANSWER, ANALYSIS_PROMPT, RELEVANCE_PROMPT
from boxingpython.base.exceptions import InputValidationError
from boxingpython.base.normalize import FieldNormalizer, RawModelResponse
from boxingpython.base.record import AnalysisEnvelope, AnalysisRecord
from boxingpython.base.text.keywords import DEFAULT_KEYWORD_TABLE, KeywordTable
from boxingpython.base.upload import VideoUpload

logger = logging.getLogger(__name__)

__all__ = ["AnalysisRun", "AnalysisState", "BoxingAnalyzer"]


class AnalysisState(Enum):
    IDLE = "idle"
    CLASSIFYING = "classifying"
    EXTRACTING = "extracting"
    NORMALIZED = "normalized"
    FAULTED = "faulted"
    MOCK_SUBSTITUTED = "mock_substituted"


@dataclass
class AnalysisRun:
    """Outcome of one pipeline run.

    Attributes:
        record: The analysis handed to the caller
        states: States visited, in order, ending in NORMALIZED or MOCK_SUBSTITUTED
        relevant: Classification result, None when the gate errored or was skipped
        elapsed_seconds: Wall time spent in the pipeline
    """

    record: AnalysisRecord
    states: list[AnalysisState] = field(default_factory=list)
    relevant: bool | None = None
    elapsed_seconds: float | None = None

    @property
    def state(self) -> AnalysisState:
        return self.states[-1]


class BoxingAnalyzer:
    """Turns an uploaded training video into an `AnalysisRecord`.

    The inference client is created once by the caller and injected. Every failure after
    input validation is recovered: a failing relevance check lets the analysis proceed,
    and a failing analysis call is replaced by a `MockSynthesizer` record.

    Example:
        >>> from boxingpython.ai import BoxingAnalyzer, create_inference_client
        >>> from boxingpython.base import VideoUpload
        >>>
        >>> analyzer = BoxingAnalyzer(create_inference_client(backend="gemini"))
        >>> envelope = analyzer.analyze(VideoUpload.from_path("bag_session.mp4"))
        >>> print(envelope.to_dict()["analysis"]["strikeCount"])
    """

    def __init__(
        self,
        client: InferenceClient,
        *,
        keywords: KeywordTable = DEFAULT_KEYWORD_TABLE,
        mock: MockSynthesizer | None = None,
        gate: bool = True,
    ):
        """Initialize the analyzer.

        Args:
            client: Inference capability used for both prompts.
            keywords: Label table used for free-text extraction.
            mock: Fallback synthesizer. A default one is created if None.
            gate: Run the relevance check before the full analysis.
        """
        self.client = client
        self.normalizer = FieldNormalizer(keywords)
        self.mock = mock or MockSynthesizer()
        self.gate = gate

    def analyze(self, upload: VideoUpload | None) -> AnalysisEnvelope:
        """Analyze an upload, wrapping the result in a success or error envelope.

        Only missing or invalid input produces an error envelope.
        """
        try:
            run = self.run(upload)
        except InputValidationError as exc:
            logger.error("Rejected upload: %s", exc)
            return AnalysisEnvelope.failure(str(exc))
        return AnalysisEnvelope.ok(run.record)

    def analyze_record(self, upload: VideoUpload | None) -> AnalysisRecord:
        """Analyze an upload and return the bare record.

        Raises:
            InputValidationError: If the upload is missing or invalid.
        """
        return self.run(upload).record

    def run(self, upload: VideoUpload | None) -> AnalysisRun:
        """Run the full pipeline and report the states it went through.

        Raises:
            InputValidationError: If the upload is missing or invalid.
        """
        if upload is None:
            raise InputValidationError("Video file is required")
        upload.validate()

        started = time.perf_counter()
        states = [AnalysisState.IDLE]
        logger.info("Analyzing %s (%d bytes, %s)", upload.filename, upload.size, upload.media_type)

        relevant: bool | None = None
        if self.gate:
            states.append(AnalysisState.CLASSIFYING)
            relevant = self.classify(upload)
            if relevant is False:
                logger.info("Video is not boxing content, skipping full analysis")
                states.append(AnalysisState.NORMALIZED)
                return AnalysisRun(
                    record=AnalysisRecord.not_relevant(),
                    states=states,
                    relevant=False,
                    elapsed_seconds=time.perf_counter() - started,
                )

        states.append(AnalysisState.EXTRACTING)
        try:
            text = self.client.complete(ANALYSIS_PROMPT, upload)
        except Exception:
            logger.exception("Analysis call failed, substituting mock analysis")
            states.extend([AnalysisState.FAULTED, AnalysisState.MOCK_SUBSTITUTED])
            record = self.mock.synthesize(upload.size, upload.filename)
        else:
            logger.debug("Analysis response (%d chars): %s", len(text), text)
            record = self.normalizer.normalize(RawModelResponse.from_text(text))
            states.append(AnalysisState.NORMALIZED)

        elapsed = time.perf_counter() - started
        logger.info("Analysis finished in %.2fs (state=%s)", elapsed, states[-1].value)
        return AnalysisRun(record=record, states=states, relevant=relevant, elapsed_seconds=elapsed)

    def classify(self, upload: VideoUpload) -> bool | None:
        """Ask the model whether the video shows boxing activity.

        Returns:
            True or False for an answered question, None when the call itself failed.
            Anything other than an explicit "YES" counts as False.
        """
        try:
            answer = self.client.complete(RELEVANCE_PROMPT, upload)
        except Exception:
            logger.warning("Relevance check failed, proceeding with full analysis", exc_info=True)
            return None

        normalized = (answer or "").strip().upper()
        logger.info("Relevance check answered %r", normalized)
        return normalized == AFFIRMATIVE_ANSWER
