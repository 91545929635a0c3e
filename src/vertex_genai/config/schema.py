"""Configuration schema and validation using Pydantic.

This module defines the settings schema that validates and coerces app
configuration values from environment variables and programmatic overrides.
"""

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_APP_NAME = "[DEFAULT]"
DEFAULT_LOCATION = "us-central1"


class AppSettings(BaseSettings):
    """Pydantic settings schema for a Vertex AI app configuration.

    Reads ``VERTEXAI_*`` environment variables. Presence of the project id,
    API key and app id is not enforced here; the client facade checks them
    when it is constructed so a misconfigured app surfaces as an error value.
    """

    model_config = SettingsConfigDict(
        env_prefix="VERTEXAI_",
        env_file=None,
        case_sensitive=False,
        extra="ignore",  # Ignore unknown env vars for forward compatibility
    )

    app_name: str = Field(
        default=DEFAULT_APP_NAME,
        description="Name identifying the host application instance",
        min_length=1,
    )

    project_id: str | None = Field(default=None, description="Cloud project id")

    api_key: str | None = Field(default=None, description="API key for the app")

    app_id: str | None = Field(default=None, description="Application id")

    location: str = Field(
        default=DEFAULT_LOCATION,
        description="Region used to address models",
        min_length=1,
    )

    @field_validator("project_id", "api_key", "app_id", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        """Treat blank strings as missing."""
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @field_validator("app_name", "location", mode="before")
    @classmethod
    def strip_identity(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary keyed by field name."""
        return {
            "app_name": self.app_name,
            "project_id": self.project_id,
            "api_key": self.api_key,
            "app_id": self.app_id,
            "location": self.location,
        }
