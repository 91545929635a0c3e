"""Generative (Gemini) model sub-client."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .request_options import RequestOptions

if TYPE_CHECKING:
    from google.genai import types as genai_types

    from vertex_genai.client import AppInfo


@dataclass(frozen=True)
class GenerativeModel:
    """A Gemini model addressed by its full resource name.

    Generation parameters are ``google.genai`` types and are passed to the
    transport untouched.
    """

    name: str
    app_info: AppInfo
    generation_config: genai_types.GenerationConfig | None = None
    safety_settings: tuple[genai_types.SafetySetting, ...] | None = None
    tools: tuple[genai_types.Tool, ...] | None = None
    tool_config: genai_types.ToolConfig | None = None
    system_instruction: genai_types.Content | None = None
    request_options: RequestOptions = field(default_factory=RequestOptions)

    def endpoint_url(self, method: str = "generateContent") -> str:
        return self.request_options.endpoint_url(self.name, method)
