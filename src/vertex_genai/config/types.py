"""Configuration data types.

An ``AppConfig`` is resolved once from all sources and then flows through the
client unchanged.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Literal

from .schema import DEFAULT_APP_NAME

# --- Source Tracking Types ---

ConfigOrigin = Literal["programmatic", "env", "default"]
SourceMap = Mapping[str, ConfigOrigin]


@dataclass(frozen=True)
class AppConfig:
    """Immutable identity and options of a host application.

    The registry identifies facades by ``(name, location)`` only. Two configs
    sharing a name must therefore carry the same options.
    """

    name: str = DEFAULT_APP_NAME
    project_id: str | None = None
    api_key: str | None = None
    app_id: str | None = None
    origin: SourceMap = field(default_factory=dict, compare=False)

    def __str__(self) -> str:
        """String representation with redacted API key for safe logging."""
        api_key_display = "[REDACTED]" if self.api_key else None
        return (
            f"AppConfig(name={self.name!r}, project_id={self.project_id!r}, "
            f"api_key={api_key_display!r}, app_id={self.app_id!r})"
        )

    def __repr__(self) -> str:
        return self.__str__()

    def audit(self) -> str:
        """Report where each field came from, with the API key redacted."""
        lines = []
        for name in ("name", "project_id", "api_key", "app_id"):
            origin = self.origin.get(name, "default")
            value = getattr(self, name)
            if name == "api_key" and value is not None:
                value = "<redacted>"
            lines.append(f"{name}: {origin}:{value}")
        return "\n".join(lines)
