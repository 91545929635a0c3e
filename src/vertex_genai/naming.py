"""Canonical resource names for models addressed on the backend."""

from __future__ import annotations

from vertex_genai.exceptions import InvalidArgumentError

MODELS_DOC_URL = "https://firebase.google.com/docs/vertex-ai/gemini-models#available-models"
LOCATIONS_DOC_URL = (
    "https://firebase.google.com/docs/vertex-ai/locations?platform=ios#available-locations"
)


def is_valid_path_segment(value: str) -> bool:
    """True if ``value`` is non-empty with no whitespace and no ``/``."""
    return bool(value) and not any(ch.isspace() or ch == "/" for ch in value)


def validate_path_segment(argument: str, value: str, doc_url: str) -> str:
    """Return ``value`` unchanged, or raise ``InvalidArgumentError``."""
    if not isinstance(value, str) or not is_valid_path_segment(value):
        raise InvalidArgumentError(
            argument,
            value,
            f'Invalid {argument.replace("_", " ")} "{value}" specified; '
            f"see {doc_url} for a list of available values.",
        )
    return value


def build_resource_name(project_id: str, location: str, model_name: str) -> str:
    """Build the resource name identifying a model in a project and region.

    Args:
        project_id: Cloud project that owns the request.
        location: Region identifier, e.g. ``"us-central1"``.
        model_name: Model identifier, e.g. ``"gemini-1.5-flash"``.

    Returns:
        ``projects/{project_id}/locations/{location}/publishers/google/models/{model_name}``

    Raises:
        InvalidArgumentError: If ``model_name`` or ``location`` is empty,
            contains whitespace, or contains a path separator.
    """
    validate_path_segment("model_name", model_name, MODELS_DOC_URL)
    validate_path_segment("location", location, LOCATIONS_DOC_URL)
    return f"projects/{project_id}/locations/{location}/publishers/google/models/{model_name}"
