"""Configuration management for the Vertex AI client.

Key components:
- AppSettings: Pydantic schema reading ``VERTEXAI_*`` environment variables
- AppConfig: Immutable app identity and options handed to the client facade
- resolve_app_config: Resolve-once entry point with origin tracking
"""

from .api import ConfigValidationError, resolve_app_config, resolve_location
from .schema import DEFAULT_APP_NAME, DEFAULT_LOCATION, AppSettings
from .types import AppConfig, ConfigOrigin, SourceMap

__all__ = [
    "DEFAULT_APP_NAME",
    "DEFAULT_LOCATION",
    "AppConfig",
    "AppSettings",
    "ConfigOrigin",
    "ConfigValidationError",
    "SourceMap",
    "resolve_app_config",
    "resolve_location",
]
