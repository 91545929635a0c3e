"""Model sub-clients created by the ``VertexAI`` facade."""

from .generative import GenerativeModel
from .imagen import (
    ImagenGenerationConfig,
    ImagenModel,
    ImagenPersonFilterLevel,
    ImagenSafetyFilterLevel,
    ImagenSafetySettings,
)
from .request_options import RequestOptions

__all__ = [
    "GenerativeModel",
    "ImagenGenerationConfig",
    "ImagenModel",
    "ImagenPersonFilterLevel",
    "ImagenSafetyFilterLevel",
    "ImagenSafetySettings",
    "RequestOptions",
]
