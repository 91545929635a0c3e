"""Wire-level types for Imagen requests and predictions.

Predictions arrive as JSON objects in camelCase. The pydantic models below
accept those keys by alias and ignore fields they do not know about.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from google.genai import types as genai_types
from pydantic import Base64Bytes, BaseModel, ConfigDict, Field


class ImagenAspectRatio(str, Enum):
    """Aspect ratio of generated images."""

    SQUARE_1X1 = "1:1"
    PORTRAIT_9X16 = "9:16"
    LANDSCAPE_16X9 = "16:9"
    PORTRAIT_3X4 = "3:4"
    LANDSCAPE_4X3 = "4:3"


@dataclass(frozen=True, slots=True)
class ImagenImageFormat:
    """Output encoding for generated images."""

    mime_type: str
    compression_quality: int | None = None

    def __post_init__(self) -> None:
        if self.compression_quality is not None and not (
            0 <= self.compression_quality <= 100
        ):
            raise ValueError("compression_quality must be between 0 and 100")

    @classmethod
    def png(cls) -> ImagenImageFormat:
        return cls(mime_type="image/png")

    @classmethod
    def jpeg(cls, compression_quality: int | None = None) -> ImagenImageFormat:
        return cls(mime_type="image/jpeg", compression_quality=compression_quality)

    def to_parameters(self) -> dict[str, Any]:
        """Request ``outputOptions`` for this format."""
        options: dict[str, Any] = {"mimeType": self.mime_type}
        if self.compression_quality is not None:
            options["compressionQuality"] = self.compression_quality
        return options


class _Prediction(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class ImagenInlineImage(_Prediction):
    """An image returned inline as base64-encoded bytes."""

    mime_type: str = Field(alias="mimeType")
    data: Base64Bytes = Field(alias="bytesBase64Encoded")

    def to_genai_image(self) -> genai_types.Image:
        """Convert to the ``google.genai`` image type."""
        return genai_types.Image(image_bytes=self.data, mime_type=self.mime_type)


class ImagenGCSImage(_Prediction):
    """An image written to Cloud Storage, referenced by URI."""

    mime_type: str = Field(alias="mimeType")
    gcs_uri: str = Field(alias="gcsUri")

    def to_genai_image(self) -> genai_types.Image:
        """Convert to the ``google.genai`` image type."""
        return genai_types.Image(gcs_uri=self.gcs_uri, mime_type=self.mime_type)


class RAIFilteredReason(_Prediction):
    """Placeholder for an image withheld by responsible-AI filtering."""

    rai_filtered_reason: str = Field(alias="raiFilteredReason")
