"""
Settings configuration using pydantic-settings.

Loads configuration from:
1. Constructor arguments (highest precedence)
2. Environment variables with OOCOMPOSE_ prefix
3. .env file named by OOCOMPOSE_ENV_FILE (if present)

Example:
  OOCOMPOSE_MAX_DEPTH=64
"""

import os as _os
import pathlib as _pathlib
import typing as _typing

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings

import oocompose.constants as constants


def _get_env_file() -> str | None:
    """Determine which .env file to load.

    Only an explicit OOCOMPOSE_ENV_FILE is honoured. A library should not pick
    up whatever .env happens to sit in the caller's working directory.
    """
    if env_file := _os.environ.get("OOCOMPOSE_ENV_FILE"):
        if _pathlib.Path(env_file).exists():
            return env_file
    return None


class Settings(_pydantic_settings.BaseSettings):
    """
    Process-wide defaults for oocompose.

    All settings can be overridden via environment variables with the
    OOCOMPOSE_ prefix.
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix=constants.ENV_PREFIX,
        env_file=_get_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_depth: int | None = _pydantic.Field(default=None, ge=1)
    """Default depth guard for deep_extend(). None keeps the unguarded recursion."""

    @classmethod
    def construct_without_dotenv(cls, **kwargs: _typing.Any) -> "Settings":
        """Create Settings from environment variables only, without loading .env file."""
        return cls(_env_file=None, **kwargs)  # type: ignore[call-arg]


# Global instance for convenience
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the cached Settings instance, creating it on first use."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """Rebuild the cached Settings from the current environment."""
    global _settings
    _settings = Settings()
    return _settings
