"""Imagen image-generation sub-client.

Builds the request ``parameters`` for the ``predict`` method and decodes its
response. Sending the request belongs to the transport layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import logging
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from vertex_genai.core.types import Failure, Result, Success
from vertex_genai.imagen.types import (
    ImagenAspectRatio,
    ImagenImageFormat,
    ImagenInlineImage,
)
from vertex_genai.response.decoder import decode_imagen_response

from .request_options import RequestOptions

if TYPE_CHECKING:
    from vertex_genai.client import AppInfo
    from vertex_genai.exceptions import DecodeError
    from vertex_genai.response.types import AggregateResult

logger = logging.getLogger(__name__)

DEFAULT_IMAGE_COUNT = 1


class ImagenSafetyFilterLevel(str, Enum):
    """How aggressively potentially harmful images are filtered."""

    BLOCK_LOW_AND_ABOVE = "block_low_and_above"
    BLOCK_MEDIUM_AND_ABOVE = "block_medium_and_above"
    BLOCK_ONLY_HIGH = "block_only_high"
    BLOCK_NONE = "block_none"


class ImagenPersonFilterLevel(str, Enum):
    """Whether images of people may be generated."""

    ALLOW_ALL = "allow_all"
    ALLOW_ADULT = "allow_adult"
    BLOCK_ALL = "dont_allow"


@dataclass(frozen=True, slots=True)
class ImagenSafetySettings:
    safety_filter_level: ImagenSafetyFilterLevel | None = None
    person_filter_level: ImagenPersonFilterLevel | None = None

    def to_parameters(self) -> dict[str, Any]:
        return {
            "safetySetting": self.safety_filter_level and self.safety_filter_level.value,
            "personGeneration": self.person_filter_level
            and self.person_filter_level.value,
        }


@dataclass(frozen=True, slots=True)
class ImagenGenerationConfig:
    """Options for generating images with Imagen."""

    negative_prompt: str | None = None
    number_of_images: int | None = None
    aspect_ratio: ImagenAspectRatio | None = None
    image_format: ImagenImageFormat | None = None
    add_watermark: bool | None = None

    def __post_init__(self) -> None:
        if self.number_of_images is not None and self.number_of_images < 1:
            raise ValueError("number_of_images must be at least 1")

    def to_parameters(self) -> dict[str, Any]:
        return {
            "negativePrompt": self.negative_prompt,
            "sampleCount": self.number_of_images,
            "aspectRatio": self.aspect_ratio and self.aspect_ratio.value,
            "outputOptions": self.image_format and self.image_format.to_parameters(),
            "addWatermark": self.add_watermark,
        }


@dataclass(frozen=True)
class ImagenModel:
    """An Imagen model addressed by its full resource name."""

    name: str
    app_info: AppInfo
    generation_config: ImagenGenerationConfig | None = None
    safety_settings: ImagenSafetySettings | None = None
    request_options: RequestOptions = field(default_factory=RequestOptions)

    def endpoint_url(self) -> str:
        return self.request_options.endpoint_url(self.name, "predict")

    def request_parameters(
        self, image_count: int | None = None, gcs_uri: str | None = None
    ) -> dict[str, Any]:
        """Build the ``parameters`` object of a ``predict`` request.

        Args:
            image_count: Overrides the configured number of images.
            gcs_uri: Cloud Storage prefix to write images to instead of
                returning them inline.

        Returns:
            camelCase parameters with unset values omitted. Filter reasons are
            always requested so withheld images can be explained.
        """
        params: dict[str, Any] = {"includeRaiReason": True}
        if self.generation_config is not None:
            params.update(self.generation_config.to_parameters())
        if self.safety_settings is not None:
            params.update(self.safety_settings.to_parameters())
        if image_count is not None:
            params["sampleCount"] = image_count
        if params.get("sampleCount") is None:
            params["sampleCount"] = DEFAULT_IMAGE_COUNT
        params["storageUri"] = gcs_uri
        return {k: v for k, v in params.items() if v is not None}

    def decode_response[T: BaseModel](
        self,
        payload: Any,
        image_type: type[T] = ImagenInlineImage,
        *,
        require_images: bool = False,
    ) -> Result[AggregateResult[T], DecodeError]:
        """Decode a ``predict`` response body.

        Args:
            payload: Parsed JSON response body.
            image_type: Expected image shape.
            require_images: Fail with ``DecodeIncompleteError`` when every
                image was filtered out instead of returning an empty result.
        """
        match decode_imagen_response(payload, image_type):
            case Success(value=response) if require_images:
                return response.require_artifacts()
            case Success() as decoded:
                return decoded
            case Failure() as failure:
                logger.warning("Could not decode response from %s", self.name)
                return failure
