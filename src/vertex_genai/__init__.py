"""Client core for Gemini and Imagen models on Vertex AI."""

import importlib.metadata
import logging

from vertex_genai.client import AppInfo, VertexAI
from vertex_genai.config import AppConfig, resolve_app_config, resolve_location
from vertex_genai.core.types import Failure, Result, Success
from vertex_genai.exceptions import (
    DecodeError,
    DecodeIncompleteError,
    InvalidArgumentError,
    InvalidConfigurationError,
    MalformedEntryError,
    VertexAIError,
)
from vertex_genai.imagen.types import (
    ImagenAspectRatio,
    ImagenGCSImage,
    ImagenImageFormat,
    ImagenInlineImage,
)
from vertex_genai.models import (
    GenerativeModel,
    ImagenGenerationConfig,
    ImagenModel,
    ImagenPersonFilterLevel,
    ImagenSafetyFilterLevel,
    ImagenSafetySettings,
    RequestOptions,
)
from vertex_genai.naming import build_resource_name
from vertex_genai.registry import InstanceRegistry, instance_key
from vertex_genai.response import (
    AggregateResult,
    HeterogeneousResponseDecoder,
    ImagenGenerationResponse,
    decode_imagen_response,
)

# Version handling
try:
    __version__ = importlib.metadata.version("vertex-genai")
except importlib.metadata.PackageNotFoundError:
    __version__ = "development"

# Set up a null handler for the library's root logger.
# This prevents 'No handler found' errors if the consuming app has no logging configured.
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Public API
__all__ = [  # noqa: RUF022
    # Facade & registry
    "VertexAI",
    "AppInfo",
    "InstanceRegistry",
    "instance_key",
    # Configuration
    "AppConfig",
    "resolve_app_config",
    "resolve_location",
    # Models
    "GenerativeModel",
    "ImagenModel",
    "ImagenGenerationConfig",
    "ImagenSafetySettings",
    "ImagenSafetyFilterLevel",
    "ImagenPersonFilterLevel",
    "ImagenAspectRatio",
    "ImagenImageFormat",
    "RequestOptions",
    "build_resource_name",
    # Responses
    "ImagenInlineImage",
    "ImagenGCSImage",
    "AggregateResult",
    "ImagenGenerationResponse",
    "HeterogeneousResponseDecoder",
    "decode_imagen_response",
    # Result types
    "Result",
    "Success",
    "Failure",
    # Exceptions
    "VertexAIError",
    "InvalidConfigurationError",
    "InvalidArgumentError",
    "DecodeError",
    "MalformedEntryError",
    "DecodeIncompleteError",
]
