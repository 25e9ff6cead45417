"""Configuration type definitions for compound_key_map settings.

This module defines the Pydantic models used to represent configuration
sections nested within the main Settings class:

- DisplayConfig: max_repr_entries
- LoggingConfig: level, trace_operations

Design decision: All types use `extra="allow"` to preserve unknown fields.
get_settings() audits the loaded config with `collect_all_extra_fields()` and
warns about typos and outdated keys.
"""

import typing as _typing

import pydantic as _pydantic

# =============================================================================
# Base class with introspection
# =============================================================================


class ConfigBase(_pydantic.BaseModel):
    """
    Base class for all config types.

    All config types use `extra="allow"` so unknown fields are preserved
    rather than silently dropped.
    """

    model_config = _pydantic.ConfigDict(extra="allow")

    def get_extra_fields(self) -> dict[str, _typing.Any]:
        """
        Return fields that were provided but not in the schema.

        Returns:
            Dict of field_name → value for all unrecognized fields.
        """
        return dict(self.model_extra) if self.model_extra else {}

    def collect_all_extra_fields(
        self,
        prefix: str = "",
    ) -> dict[str, _typing.Any]:
        """
        Recursively collect extra fields from this config and nested configs.

        Returns a flat dict with dotted paths as keys, e.g.:
            {"display.max_entries": 5, "logging.levle": "debug"}

        Args:
            prefix: Dotted path prefix (used in recursion).
        """
        result: dict[str, _typing.Any] = {}

        for key, value in self.get_extra_fields().items():
            path = f"{prefix}.{key}" if prefix else key
            result[path] = value

        for field_name in self.__class__.model_fields:
            value = getattr(self, field_name, None)
            if isinstance(value, ConfigBase):
                child_prefix = f"{prefix}.{field_name}" if prefix else field_name
                result.update(value.collect_all_extra_fields(child_prefix))

        return result


# =============================================================================
# Display Settings
# =============================================================================


class DisplayConfig(ConfigBase):
    """
    How maps render themselves.

    YAML section: display.*
    """

    max_repr_entries: int = _pydantic.Field(default=10, ge=0)
    """Entries shown by repr() before the rest is elided with '...'."""


# =============================================================================
# Logging Settings
# =============================================================================


class LoggingConfig(ConfigBase):
    """
    Logging settings.

    YAML section: logging.*
    """

    level: _typing.Literal["debug", "info", "warning", "error"] = "warning"
    """Level applied to the package logger by configure_logging()."""

    trace_operations: bool = False
    """Emit a DEBUG record for every set, delete and clear."""
