"""
Settings configuration using pydantic-settings.

Loads configuration from (highest precedence first):
1. Constructor arguments
2. Environment variables with COMPOUND_KEY_MAP_ prefix
3. .env file (if COMPOUND_KEY_MAP_ENV_FILE points at one)
4. User YAML config: ~/.config/compound_key_map/config.yaml
5. Field defaults

Nested config uses double underscore delimiter:
  COMPOUND_KEY_MAP_DISPLAY__MAX_REPR_ENTRIES=20
  COMPOUND_KEY_MAP_LOGGING__TRACE_OPERATIONS=true
"""

from __future__ import annotations

import logging as _logging
import os as _os
import pathlib as _pathlib
import typing as _typing

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings

import compound_key_map.config.sources as sources
import compound_key_map.config.types as types

_logger = _logging.getLogger(__name__)

# Logger every module in the package hangs off
PACKAGE_LOGGER = "compound_key_map"


def _get_env_file() -> str | None:
    """Determine which .env file to load.

    Only an explicit COMPOUND_KEY_MAP_ENV_FILE is honored; a .env in the
    current directory is ignored.
    """
    if env_file := _os.environ.get("COMPOUND_KEY_MAP_ENV_FILE"):
        if _pathlib.Path(env_file).exists():
            return env_file
    return None


class Settings(_pydantic_settings.BaseSettings):
    """
    compound_key_map configuration settings.

    All settings can be overridden via environment variables with the
    COMPOUND_KEY_MAP_ prefix. For nested config, use double underscore:
    COMPOUND_KEY_MAP_DISPLAY__MAX_REPR_ENTRIES=20
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix="COMPOUND_KEY_MAP_",
        env_file=_get_env_file(),
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="allow",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[_pydantic_settings.BaseSettings],
        init_settings: _pydantic_settings.PydanticBaseSettingsSource,
        env_settings: _pydantic_settings.PydanticBaseSettingsSource,
        dotenv_settings: _pydantic_settings.PydanticBaseSettingsSource,
        file_secret_settings: _pydantic_settings.PydanticBaseSettingsSource,
    ) -> tuple[_pydantic_settings.PydanticBaseSettingsSource, ...]:
        """
        Configure settings sources with precedence:
        1. init_settings (constructor args) (highest)
        2. env_settings (COMPOUND_KEY_MAP_* env vars)
        3. dotenv_settings (.env file)
        4. yaml_settings (user config.yaml)
        5. (defaults via Field definitions) (lowest)
        """
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            sources.YamlSettingsSource(settings_cls),
            file_secret_settings,
        )

    @classmethod
    def construct_without_dotenv(cls, **kwargs: _typing.Any) -> Settings:
        """Create Settings without loading any .env file.

        Useful for test isolation and for reproducing issues without .env
        interference.
        """
        return cls(_env_file=None, **kwargs)  # type: ignore[call-arg]

    display: types.DisplayConfig = _pydantic.Field(default_factory=types.DisplayConfig)
    """Rendering settings (repr truncation)."""

    logging: types.LoggingConfig = _pydantic.Field(default_factory=types.LoggingConfig)
    """Logging settings."""

    def collect_all_extra_fields(self) -> dict[str, _typing.Any]:
        """
        Collect every configuration key no field accounts for.

        Returns:
            Dict mapping dotted paths (e.g. "display.max_repr_entrys") to the
            values found there. Empty when the configuration is clean.
        """
        result: dict[str, _typing.Any] = dict(self.model_extra or {})
        for field_name in type(self).model_fields:
            value = getattr(self, field_name)
            if isinstance(value, types.ConfigBase):
                result.update(value.collect_all_extra_fields(field_name))
        return result


_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Return the process-wide Settings, loading them on first use.

    Maps constructed without an explicit settings object use this, so a
    broken config file or environment variable must not make construction
    fail: the error is logged and field defaults are used instead. Unknown
    keys (usually typos) are logged as a warning.
    """
    global _settings
    if _settings is None:
        try:
            _settings = Settings()
        except (sources.ConfigFileError, _pydantic.ValidationError) as e:
            _logger.warning("Invalid configuration, using defaults: %s", e)
            _settings = Settings.model_construct()
        else:
            unknown = _settings.collect_all_extra_fields()
            if unknown:
                _logger.warning(
                    "Ignoring unknown configuration keys: %s",
                    ", ".join(sorted(unknown)),
                )
    return _settings


def reset_settings() -> None:
    """Drop the cached Settings so the next get_settings() reloads them."""
    global _settings
    _settings = None


def configure_logging(settings: Settings | None = None) -> _logging.Logger:
    """
    Apply settings.logging.level to the package logger.

    No handlers are installed; output goes wherever the application's
    logging configuration sends it.

    Args:
        settings: Settings to apply. None = load them fresh; unlike
            get_settings(), invalid configuration raises here.

    Returns:
        The package logger.

    Raises:
        ConfigFileError: If the YAML config file is malformed.
        pydantic.ValidationError: If a configuration value is invalid.
    """
    if settings is None:
        settings = Settings()
    logger = _logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(settings.logging.level.upper())
    return logger
