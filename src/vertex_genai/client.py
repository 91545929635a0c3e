"""Client facade giving access to Gemini and Imagen models.

One ``VertexAI`` instance exists per app name and location within a
registry. The facade resolves the app's project id, API key and app id once
and hands them to every model it creates.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
import logging
from typing import TYPE_CHECKING

from vertex_genai.config.schema import DEFAULT_LOCATION
from vertex_genai.exceptions import InvalidConfigurationError
from vertex_genai.models.generative import GenerativeModel
from vertex_genai.models.imagen import (
    ImagenGenerationConfig,
    ImagenModel,
    ImagenSafetySettings,
)
from vertex_genai.models.request_options import RequestOptions
from vertex_genai.naming import build_resource_name
from vertex_genai.registry import InstanceRegistry, instance_key

if TYPE_CHECKING:
    from google.genai import types as genai_types

    from vertex_genai.config.types import AppConfig
    from vertex_genai.core.types import Result

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AppInfo:
    """App data every request needs."""

    app_name: str
    project_id: str
    api_key: str = field(repr=False)
    app_id: str


def _required(app: AppConfig, field_name: str) -> str:
    value = getattr(app, field_name)
    if not isinstance(value, str) or not value.strip():
        raise InvalidConfigurationError(app.name, field_name)
    return value


class VertexAI:
    """Entry point for creating Gemini and Imagen model clients for an app.

    Obtain instances with ``VertexAI.vertex_ai`` so that each app and
    location shares one facade.
    """

    @classmethod
    def vertex_ai(
        cls,
        app: AppConfig,
        location: str = DEFAULT_LOCATION,
        *,
        registry: InstanceRegistry[VertexAI],
    ) -> Result[VertexAI, InvalidConfigurationError]:
        """Return the registry's facade for ``app`` and ``location``.

        Args:
            app: Resolved app configuration.
            location: Region identifier; see the Vertex AI locations list.
            registry: Registry holding facades for this process.

        Returns:
            ``Success`` with the shared facade, or ``Failure`` when the app
            is missing its project id, API key or app id.
        """
        return registry.get_or_create(
            instance_key(app.name, location), lambda: cls(app, location)
        )

    def __init__(self, app: AppConfig, location: str = DEFAULT_LOCATION) -> None:
        """Resolve app data for requests.

        Raises:
            InvalidConfigurationError: If the app has no project id, API key
                or app id.
        """
        self.app_info = AppInfo(
            app_name=app.name,
            project_id=_required(app, "project_id"),
            api_key=_required(app, "api_key"),
            app_id=_required(app, "app_id"),
        )
        self.location = location
        logger.debug("Initialized VertexAI for app %r in %s", app.name, location)

    def __repr__(self) -> str:
        return f"VertexAI(app_name={self.app_info.app_name!r}, location={self.location!r})"

    def model_resource_name(self, model_name: str) -> str:
        """Resource name of ``model_name`` in this app's project and location.

        Raises:
            InvalidArgumentError: If the model name or location is malformed.
        """
        return build_resource_name(self.app_info.project_id, self.location, model_name)

    def generative_model(
        self,
        model_name: str,
        generation_config: genai_types.GenerationConfig | None = None,
        safety_settings: Sequence[genai_types.SafetySetting] | None = None,
        tools: Sequence[genai_types.Tool] | None = None,
        tool_config: genai_types.ToolConfig | None = None,
        system_instruction: genai_types.Content | None = None,
        request_options: RequestOptions | None = None,
    ) -> GenerativeModel:
        """Create a Gemini model client, e.g. for ``"gemini-1.5-flash"``."""
        return GenerativeModel(
            name=self.model_resource_name(model_name),
            app_info=self.app_info,
            generation_config=generation_config,
            safety_settings=tuple(safety_settings) if safety_settings is not None else None,
            tools=tuple(tools) if tools is not None else None,
            tool_config=tool_config,
            system_instruction=system_instruction,
            request_options=request_options or RequestOptions(),
        )

    def imagen_model(
        self,
        model_name: str,
        generation_config: ImagenGenerationConfig | None = None,
        safety_settings: ImagenSafetySettings | None = None,
        request_options: RequestOptions | None = None,
    ) -> ImagenModel:
        """Create an Imagen model client, e.g. for ``"imagen-3.0-generate-002"``."""
        return ImagenModel(
            name=self.model_resource_name(model_name),
            app_info=self.app_info,
            generation_config=generation_config,
            safety_settings=safety_settings,
            request_options=request_options or RequestOptions(),
        )
