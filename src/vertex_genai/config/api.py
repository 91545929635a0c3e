"""Resolve-once entry points for app configuration."""

from __future__ import annotations

import logging
import os
from typing import Any

from pydantic import ValidationError

from .schema import AppSettings
from .types import AppConfig, ConfigOrigin

logger = logging.getLogger(__name__)

_SETTINGS_TO_CONFIG = {
    "app_name": "name",
    "project_id": "project_id",
    "api_key": "api_key",
    "app_id": "app_id",
}


class ConfigValidationError(ValueError):
    """Raised when configuration values fail schema validation."""

    def __init__(
        self, field: str, value: Any, message: str, suggestion: str | None = None
    ) -> None:
        """Initialize configuration validation error.

        Args:
            field: The configuration field that failed validation
            value: The invalid value
            message: Human-readable error message
            suggestion: Optional suggestion for fixing the error
        """
        self.field = field
        self.value = value
        self.message = message
        self.suggestion = suggestion

        error_msg = f"Configuration validation failed for '{field}': {message}"
        if suggestion:
            error_msg += f"\nSuggestion: {suggestion}"

        super().__init__(error_msg)


def _load_settings(programmatic: dict[str, Any] | None) -> AppSettings:
    overrides = {k: v for k, v in (programmatic or {}).items() if v is not None}
    try:
        return AppSettings(**overrides)
    except ValidationError as e:
        errors = e.errors()
        field = ".".join(str(p) for p in errors[0]["loc"]) if errors else "<multiple>"
        raise ConfigValidationError(
            field=field,
            value=overrides.get(field),
            message=f"Schema validation failed: {e}",
            suggestion="Check VERTEXAI_* environment variables and overrides",
        ) from e


def _origin_of(field: str, programmatic: dict[str, Any]) -> ConfigOrigin:
    if programmatic.get(field) is not None:
        return "programmatic"
    if f"VERTEXAI_{field.upper()}" in {k.upper() for k in os.environ}:
        return "env"
    return "default"


def resolve_app_config(programmatic: dict[str, Any] | None = None) -> AppConfig:
    """Resolve an app configuration from overrides, environment and defaults.

    Precedence is programmatic > ``VERTEXAI_*`` environment > defaults.

    Args:
        programmatic: Explicit field values keyed by settings field name
            (``app_name``, ``project_id``, ``api_key``, ``app_id``).

    Returns:
        An immutable ``AppConfig`` with the origin of every field recorded.

    Raises:
        ConfigValidationError: If a value fails schema validation.
    """
    programmatic = programmatic or {}
    settings = _load_settings(programmatic)
    values = settings.to_dict()
    origin = {
        config_field: _origin_of(settings_field, programmatic)
        for settings_field, config_field in _SETTINGS_TO_CONFIG.items()
    }
    config = AppConfig(
        name=values["app_name"],
        project_id=values["project_id"],
        api_key=values["api_key"],
        app_id=values["app_id"],
        origin=origin,
    )
    logger.debug("Resolved app configuration %s", config)
    return config


def resolve_location(programmatic: str | None = None) -> str:
    """Resolve the default region: explicit value > ``VERTEXAI_LOCATION`` > default."""
    return _load_settings({"location": programmatic}).location
