"""Decoding of mixed artifact/placeholder prediction arrays."""

from .decoder import HeterogeneousResponseDecoder, decode_imagen_response
from .types import (
    AggregateResult,
    ArtifactEntry,
    FilteredEntry,
    ImagenGenerationResponse,
    ResponseEntry,
    UnrecognizedEntry,
)

__all__ = [
    "AggregateResult",
    "ArtifactEntry",
    "FilteredEntry",
    "HeterogeneousResponseDecoder",
    "ImagenGenerationResponse",
    "ResponseEntry",
    "UnrecognizedEntry",
    "decode_imagen_response",
]
