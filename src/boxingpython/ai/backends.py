"""Backend utilities for boxingpython.ai module."""

from __future__ import annotations

import os
from typing import Literal

from boxingpython.ai.exceptions import API_KEY_ENV_VARS, MissingAPIKeyError

# Providers able to answer a prompt about an inline video
VideoLLMBackend = Literal["gemini", "openai"]

SUPPORTED_BACKENDS: list[str] = ["gemini", "openai"]

DEFAULT_MODELS: dict[str, str] = {
    "gemini": "gemini-2.0-flash",
    "openai": "gpt-4o",
}


def get_api_key(provider: str, api_key: str | None = None) -> str:
    """Get API key for a provider.

    Args:
        provider: Provider name (e.g., 'openai', 'gemini')
        api_key: Optional explicit API key. If provided, returns this directly.

    Returns:
        The API key string.

    Raises:
        MissingAPIKeyError: If no API key is found.
    """
    if api_key:
        return api_key

    env_var = API_KEY_ENV_VARS.get(provider)
    if env_var:
        key = os.environ.get(env_var)
        if key:
            return key

    raise MissingAPIKeyError(provider)
