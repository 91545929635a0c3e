"""Per-model options for requests sent to the backend."""

from __future__ import annotations

from dataclasses import dataclass

from vertex_genai.core.types import _require

BASE_URL = "https://firebasevertexai.googleapis.com"
DEFAULT_TIMEOUT_SECONDS = 180.0
DEFAULT_API_VERSION = "v1beta"


@dataclass(frozen=True, slots=True)
class RequestOptions:
    """Timeout and API version used when addressing a model.

    The transport layer reads these; this package only builds the URL.
    """

    timeout: float = DEFAULT_TIMEOUT_SECONDS
    api_version: str = DEFAULT_API_VERSION

    def __post_init__(self) -> None:
        _require(condition=self.timeout > 0, message="must be > 0", field_name="timeout")
        _require(
            condition=bool(self.api_version) and "/" not in self.api_version,
            message="must be a non-empty version segment",
            field_name="api_version",
        )

    def endpoint_url(self, resource_name: str, method: str) -> str:
        """URL of ``method`` on the model identified by ``resource_name``."""
        return f"{BASE_URL}/{self.api_version}/{resource_name}:{method}"
