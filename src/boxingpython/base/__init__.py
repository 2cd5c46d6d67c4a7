from .exceptions import BoxingPythonError, InputValidationError
from .normalize import ExtractedFields, FieldNormalizer, RawModelResponse
from .record import (
    INTENSITY_LEVELS,
    NOT_APPLICABLE,
    TRAINING_MODES,
    AnalysisEnvelope,
    AnalysisRecord,
)
from .text import DEFAULT_KEYWORD_TABLE, KeywordTable
from .upload import VideoUpload

__all__ = [
    # Records
    "AnalysisRecord",
    "AnalysisEnvelope",
    "TRAINING_MODES",
    "INTENSITY_LEVELS",
    "NOT_APPLICABLE",
    # Input
    "VideoUpload",
    # Extraction
    "DEFAULT_KEYWORD_TABLE",
    "KeywordTable",
    "ExtractedFields",
    "FieldNormalizer",
    "RawModelResponse",
    # Exceptions
    "BoxingPythonError",
    "InputValidationError",
]
