"""Exceptions raised or returned by the Vertex AI client core."""

from __future__ import annotations

from typing import Any


class VertexAIError(Exception):
    """Base exception for Vertex AI client errors."""


class InvalidConfigurationError(VertexAIError):
    """Raised when an app configuration lacks a required field."""

    def __init__(self, app_name: str, field: str, message: str | None = None) -> None:
        self.app_name = app_name
        self.field = field
        super().__init__(
            message
            or f'The app named "{app_name}" has no {field.replace("_", " ")} '
            "in its configuration."
        )


class InvalidArgumentError(VertexAIError, ValueError):
    """Raised when a model name or location cannot form a resource name."""

    def __init__(self, argument: str, value: str, message: str) -> None:
        self.argument = argument
        self.value = value
        super().__init__(message)


class DecodeError(VertexAIError):
    """Base class for response decoding failures."""


class MalformedEntryError(DecodeError):
    """A response entry is not structured data of any recognized shape."""

    def __init__(self, index: int | None, entry: Any, message: str | None = None) -> None:
        self.index = index
        self.entry = entry
        where = f"at index {index}" if index is not None else "in payload"
        super().__init__(
            message
            or f"Failed to decode prediction {where}: "
            f"expected a JSON object, got {type(entry).__name__}"
        )


class DecodeIncompleteError(DecodeError):
    """Every requested artifact was withheld by the backend's filters."""

    def __init__(self, filtered_reason: str | None) -> None:
        self.filtered_reason = filtered_reason
        detail = filtered_reason or "no reason was provided"
        super().__init__(f"All generated images were filtered out: {detail}")
