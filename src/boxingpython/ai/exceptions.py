"""Exception hierarchy for boxingpython.ai module."""

# Environment variable names per provider
API_KEY_ENV_VARS: dict[str, str] = {
    "openai": "OPENAI_API_KEY",
    "gemini": "GOOGLE_API_KEY",
}


class BackendError(Exception):
    """Base exception for backend-related errors."""

    pass


class MissingAPIKeyError(BackendError):
    """Raised when a required API key is not found."""

    def __init__(self, provider: str):
        env_var = API_KEY_ENV_VARS.get(provider, f"{provider.upper()}_API_KEY")
        super().__init__(
            f"API key for '{provider}' not found. Set the {env_var} environment variable or pass api_key parameter."
        )
        self.provider = provider


class UnsupportedBackendError(BackendError):
    """Raised when an unsupported backend is requested."""

    def __init__(self, backend: str, supported: list[str]):
        super().__init__(f"Backend '{backend}' is not supported. Supported backends: {', '.join(supported)}")
        self.backend = backend
        self.supported = supported


class InferenceError(BackendError):
    """Raised when the provider call fails or times out."""

    def __init__(self, provider: str, message: str):
        super().__init__(f"{provider} inference failed: {message}")
        self.provider = provider


class ConfigError(BackendError):
    """Raised when there's an error loading or parsing configuration."""

    pass
