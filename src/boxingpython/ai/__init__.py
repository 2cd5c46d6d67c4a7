from .analyzer import AnalysisRun, AnalysisState, BoxingAnalyzer
from .exceptions import (
    BackendError,
    ConfigError,
    InferenceError,
    MissingAPIKeyError,
    UnsupportedBackendError,
)
from .inference import GeminiVideoClient, InferenceClient, OpenAIVideoClient, create_inference_client
from .mock import MockSynthesizer

__all__ = [
    # Exceptions
    "BackendError",
    "MissingAPIKeyError",
    "UnsupportedBackendError",
    "InferenceError",
    "ConfigError",
    # Inference
    "InferenceClient",
    "GeminiVideoClient",
    "OpenAIVideoClient",
    "create_inference_client",
    # Pipeline
    "AnalysisRun",
    "AnalysisState",
    "BoxingAnalyzer",
    "MockSynthesizer",
]
