from dataclasses import replace

from google.genai import types as genai_types
import pytest

from vertex_genai.client import VertexAI
from vertex_genai.config.types import AppConfig
from vertex_genai.core.types import Failure, Success
from vertex_genai.exceptions import InvalidArgumentError, InvalidConfigurationError
from vertex_genai.models.generative import GenerativeModel
from vertex_genai.models.imagen import ImagenModel
from vertex_genai.models.request_options import RequestOptions

pytestmark = pytest.mark.unit


def test_same_app_and_location_share_instance(app_config, registry):
    first = VertexAI.vertex_ai(app_config, registry=registry)
    second = VertexAI.vertex_ai(app_config, "us-central1", registry=registry)

    assert isinstance(first, Success)
    assert first.value is second.value


def test_identity_ignores_other_config_fields(app_config, registry):
    first = VertexAI.vertex_ai(app_config, registry=registry).value
    diverged = replace(app_config, project_id="other-project")

    second = VertexAI.vertex_ai(diverged, registry=registry).value

    assert second is first
    assert second.app_info.project_id == "proj1"


def test_different_location_gets_new_instance(app_config, registry):
    central = VertexAI.vertex_ai(app_config, registry=registry).value
    europe = VertexAI.vertex_ai(app_config, "europe-west4", registry=registry).value

    assert central is not europe
    assert europe.location == "europe-west4"


def test_different_app_gets_new_instance(app_config, registry):
    default = VertexAI.vertex_ai(app_config, registry=registry).value
    other = VertexAI.vertex_ai(replace(app_config, name="other"), registry=registry).value
    assert default is not other


@pytest.mark.parametrize("missing", ["project_id", "api_key", "app_id"])
def test_missing_required_field_returns_failure(app_config, registry, missing):
    broken = replace(app_config, **{missing: None})

    result = VertexAI.vertex_ai(broken, registry=registry)

    assert isinstance(result, Failure)
    assert isinstance(result.error, InvalidConfigurationError)
    assert result.error.field == missing
    assert result.error.app_name == "[DEFAULT]"
    assert len(registry) == 0


def test_blank_field_is_rejected_on_direct_construction(app_config):
    with pytest.raises(InvalidConfigurationError, match="no api key"):
        VertexAI(replace(app_config, api_key="  "))


def test_api_key_is_not_in_repr(app_config, registry):
    vertex = VertexAI.vertex_ai(app_config, registry=registry).value
    assert "test-api-key" not in repr(vertex)
    assert "test-api-key" not in repr(vertex.app_info)
    assert "test-api-key" not in repr(app_config)


def test_generative_model_uses_resource_name(app_config):
    vertex = VertexAI(app_config)
    config = genai_types.GenerationConfig(temperature=0.2)
    safety = [
        genai_types.SafetySetting(
            category=genai_types.HarmCategory.HARM_CATEGORY_HARASSMENT,
            threshold=genai_types.HarmBlockThreshold.BLOCK_ONLY_HIGH,
        )
    ]

    model = vertex.generative_model(
        "gemini-1.5-flash", generation_config=config, safety_settings=safety
    )

    assert isinstance(model, GenerativeModel)
    assert (
        model.name
        == "projects/proj1/locations/us-central1/publishers/google/models/gemini-1.5-flash"
    )
    assert model.generation_config is config
    assert model.safety_settings == tuple(safety)
    assert model.app_info is vertex.app_info
    assert model.endpoint_url() == (
        "https://firebasevertexai.googleapis.com/v1beta/"
        "projects/proj1/locations/us-central1/publishers/google/models/"
        "gemini-1.5-flash:generateContent"
    )


def test_imagen_model_uses_resource_name(app_config):
    vertex = VertexAI(app_config, "europe-west4")
    model = vertex.imagen_model(
        "imagen-3.0-generate-002", request_options=RequestOptions(api_version="v1")
    )

    assert isinstance(model, ImagenModel)
    assert model.name.endswith("/locations/europe-west4/publishers/google/models/imagen-3.0-generate-002")
    assert model.endpoint_url().startswith("https://firebasevertexai.googleapis.com/v1/")
    assert model.endpoint_url().endswith(":predict")


def test_invalid_model_name_raises(app_config):
    vertex = VertexAI(app_config)
    with pytest.raises(InvalidArgumentError):
        vertex.generative_model("models/gemini")


def test_invalid_location_raises_when_addressing_model(app_config):
    vertex = VertexAI(app_config, "us central1")
    with pytest.raises(InvalidArgumentError) as exc_info:
        vertex.imagen_model("imagen-3.0-generate-002")
    assert exc_info.value.argument == "location"


def test_request_options_validation():
    with pytest.raises(ValueError, match="timeout"):
        RequestOptions(timeout=0)
    assert RequestOptions().timeout == 180.0


def test_app_config_is_frozen():
    config = AppConfig(name="a")
    with pytest.raises(AttributeError):
        config.name = "b"  # type: ignore[misc]
