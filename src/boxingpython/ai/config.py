"""Configuration loader for boxingpython.ai module."""

from __future__ import annotations

import warnings
from functools import lru_cache
from pathlib import Path
from typing import Any

import tomllib

from boxingpython.ai.exceptions import ConfigError

# Used when no config file is found or a key is missing
DEFAULT_AI_SETTINGS: dict[str, Any] = {
    "backend": "gemini",
    "model": None,
    "timeout": 120.0,
    "base_url": None,
}

DEFAULT_ANALYSIS_SETTINGS: dict[str, Any] = {
    "skip_relevance_gate": False,
}


def _find_config_file() -> Path | None:
    """Find the configuration file in current directory.

    Looks for:
    1. boxingpython.toml in current directory
    2. pyproject.toml in current directory

    Returns:
        Path to config file if found, None otherwise.
    """
    cwd = Path.cwd()

    boxingpython_toml = cwd / "boxingpython.toml"
    if boxingpython_toml.exists():
        return boxingpython_toml

    pyproject_toml = cwd / "pyproject.toml"
    if pyproject_toml.exists():
        return pyproject_toml

    return None


def _load_toml(path: Path) -> dict[str, Any]:
    """Load and parse a TOML file."""
    with open(path, "rb") as f:
        return tomllib.load(f)


def _extract_config(data: dict[str, Any], filename: str) -> dict[str, Any]:
    """Extract boxingpython config from parsed TOML data.

    Args:
        data: Parsed TOML data
        filename: Name of the file (to determine extraction method)

    Returns:
        The boxingpython configuration section, or empty dict if not found.
    """
    if filename == "boxingpython.toml":
        return data
    elif filename == "pyproject.toml":
        return data.get("tool", {}).get("boxingpython", {})
    return {}


@lru_cache(maxsize=1)
def _get_cached_config() -> dict[str, Any]:
    """Load and cache the configuration.

    Returns:
        The loaded configuration, or empty dict if no config file found.
    """
    config_path = _find_config_file()
    if config_path is None:
        return {}

    try:
        data = _load_toml(config_path)
        return _extract_config(data, config_path.name)
    except tomllib.TOMLDecodeError as e:
        warnings.warn(f"Invalid TOML in config file {config_path}: {e}", RuntimeWarning)
        return {}
    except (OSError, IOError) as e:
        warnings.warn(f"Cannot read config file {config_path}: {e}", RuntimeWarning)
        return {}


def get_config() -> dict[str, Any]:
    """Get the current configuration.

    Returns:
        The configuration dictionary.
    """
    return _get_cached_config()


def _section(name: str, defaults: dict[str, Any]) -> dict[str, Any]:
    section = get_config().get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{name}] must be a table, got {type(section).__name__}")
    return {**defaults, **section}


def get_ai_settings() -> dict[str, Any]:
    """Inference provider settings merged over `DEFAULT_AI_SETTINGS`."""
    settings = _section("ai", DEFAULT_AI_SETTINGS)
    try:
        settings["timeout"] = float(settings["timeout"])
    except (TypeError, ValueError) as e:
        raise ConfigError(f"[ai] timeout must be a number of seconds: {e}") from e
    return settings


def get_analysis_settings() -> dict[str, Any]:
    """Pipeline settings merged over `DEFAULT_ANALYSIS_SETTINGS`."""
    return _section("analysis", DEFAULT_ANALYSIS_SETTINGS)


def get_default_backend() -> str:
    """Get the default inference backend.

    Priority:
    1. Config file setting
    2. Hardcoded default ("gemini")
    """
    return str(get_ai_settings()["backend"])


def clear_config_cache() -> None:
    """Clear the configuration cache. Useful for testing."""
    _get_cached_config.cache_clear()
