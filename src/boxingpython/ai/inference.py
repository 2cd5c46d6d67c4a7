"""Clients that send a prompt plus an inline video to a multimodal model."""

from __future__ import annotations

import logging
from typing import Any, Protocol

from boxingpython.ai.backends import DEFAULT_MODELS, SUPPORTED_BACKENDS, VideoLLMBackend, get_api_key
from boxingpython.ai.config import get_ai_settings
from boxingpython.ai.exceptions import InferenceError, UnsupportedBackendError
from boxingpython.base.upload import VideoUpload

logger = logging.getLogger(__name__)

__all__ = ["GeminiVideoClient", "InferenceClient", "OpenAIVideoClient", "create_inference_client"]

# Gemini model families that reason before answering unless told not to.
_GEMINI_THINKING_MARKERS = ("gemini-2.5", "gemini-3", "thinking")


class InferenceClient(Protocol):
    """Anything that can answer a text prompt about a video with plain text."""

    def complete(self, prompt: str, upload: VideoUpload) -> str: ...


class GeminiVideoClient:
    """Sends the video inline to Google Gemini.

    The google-generativeai SDK has no switch for extended reasoning, so fast answers rely on
    the model itself. The default flash model does not reason before answering; models that
    do so by default are accepted but logged as slower.
    """

    def __init__(self, model: str | None = None, api_key: str | None = None, timeout: float = 120.0):
        """Initialize the Gemini client.

        Args:
            model: Gemini model name (default: "gemini-2.0-flash")
            api_key: API key. If None, reads GOOGLE_API_KEY from the environment.
            timeout: Request timeout in seconds
        """
        import google.generativeai as genai

        genai.configure(api_key=get_api_key("gemini", api_key))
        self.model_name = model or DEFAULT_MODELS["gemini"]
        if any(marker in self.model_name for marker in _GEMINI_THINKING_MARKERS):
            logger.warning("Gemini model %s reasons by default, answers will be slower", self.model_name)
        self.timeout = timeout
        self._model = genai.GenerativeModel(self.model_name)

    def complete(self, prompt: str, upload: VideoUpload) -> str:
        video_part = {"mime_type": upload.media_type, "data": upload.data}
        try:
            response = self._model.generate_content(
                [prompt, video_part],
                generation_config={"temperature": 0.2},
                request_options={"timeout": self.timeout},
            )
            text = response.text
        except Exception as exc:
            raise InferenceError("gemini", str(exc)) from exc
        return text or ""


class OpenAIVideoClient:
    """Sends the video as a data URL to an OpenAI-compatible chat completions endpoint.

    Extended reasoning is disabled through the `thinking` extra parameter so providers that
    support it answer in their fast mode.
    """

    def __init__(
        self,
        model: str | None = None,
        api_key: str | None = None,
        timeout: float = 120.0,
        base_url: str | None = None,
    ):
        from openai import OpenAI

        self.model_name = model or DEFAULT_MODELS["openai"]
        self.timeout = timeout
        self._client = OpenAI(api_key=get_api_key("openai", api_key), base_url=base_url, timeout=timeout)

    def _messages(self, prompt: str, upload: VideoUpload) -> list[dict[str, Any]]:
        return [
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": prompt},
                    {"type": "video_url", "video_url": {"url": upload.to_data_url()}},
                ],
            }
        ]

    def complete(self, prompt: str, upload: VideoUpload) -> str:
        try:
            response = self._client.chat.completions.create(
                model=self.model_name,
                messages=self._messages(prompt, upload),  # type: ignore[arg-type]
                extra_body={"thinking": {"type": "disabled"}},
            )
        except Exception as exc:
            raise InferenceError("openai", str(exc)) from exc

        if not response.choices:
            return ""
        return response.choices[0].message.content or ""


def create_inference_client(
    backend: VideoLLMBackend | None = None,
    model: str | None = None,
    api_key: str | None = None,
    timeout: float | None = None,
    base_url: str | None = None,
) -> InferenceClient:
    """Create the inference client once, at process start, from arguments and config.

    Args:
        backend: 'gemini' or 'openai'. If None, uses the config default.
        model: Model name. If None, uses the config value or the backend default.
        api_key: API key. If None, reads from environment.
        timeout: Request timeout in seconds. If None, uses the config value.
        base_url: Endpoint of an OpenAI-compatible provider (openai backend only).

    Raises:
        UnsupportedBackendError: If the backend is unknown.
        MissingAPIKeyError: If no API key is available.
    """
    settings = get_ai_settings()
    resolved_backend: str = backend or settings["backend"]
    if resolved_backend not in SUPPORTED_BACKENDS:
        raise UnsupportedBackendError(resolved_backend, SUPPORTED_BACKENDS)

    resolved_model = model or settings["model"]
    resolved_timeout = timeout if timeout is not None else settings["timeout"]
    logger.info("Creating %s inference client (model=%s)", resolved_backend, resolved_model or "default")

    if resolved_backend == "gemini":
        return GeminiVideoClient(model=resolved_model, api_key=api_key, timeout=resolved_timeout)
    return OpenAIVideoClient(
        model=resolved_model,
        api_key=api_key,
        timeout=resolved_timeout,
        base_url=base_url or settings["base_url"],
    )
