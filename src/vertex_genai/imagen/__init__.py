"""Imagen value types."""

from .types import (
    ImagenAspectRatio,
    ImagenGCSImage,
    ImagenImageFormat,
    ImagenInlineImage,
    RAIFilteredReason,
)

__all__ = [
    "ImagenAspectRatio",
    "ImagenGCSImage",
    "ImagenImageFormat",
    "ImagenInlineImage",
    "RAIFilteredReason",
]
