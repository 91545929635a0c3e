import pytest

from vertex_genai.config import (
    DEFAULT_APP_NAME,
    ConfigValidationError,
    resolve_app_config,
    resolve_location,
)

pytestmark = pytest.mark.unit


def test_defaults_when_nothing_is_set():
    config = resolve_app_config()

    assert config.name == DEFAULT_APP_NAME
    assert config.project_id is None
    assert config.origin["project_id"] == "default"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("VERTEXAI_PROJECT_ID", "env-project")
    monkeypatch.setenv("VERTEXAI_API_KEY", "env-key")

    config = resolve_app_config()

    assert config.project_id == "env-project"
    assert config.api_key == "env-key"
    assert config.origin["project_id"] == "env"
    assert config.origin["app_id"] == "default"


def test_programmatic_overrides_environment(monkeypatch):
    monkeypatch.setenv("VERTEXAI_PROJECT_ID", "env-project")

    config = resolve_app_config({"project_id": "prog-project", "app_name": "mine"})

    assert config.project_id == "prog-project"
    assert config.name == "mine"
    assert config.origin["project_id"] == "programmatic"
    assert config.origin["name"] == "programmatic"


def test_blank_values_are_missing():
    config = resolve_app_config({"api_key": "   "})
    assert config.api_key is None


def test_empty_app_name_is_rejected():
    with pytest.raises(ConfigValidationError) as exc_info:
        resolve_app_config({"app_name": "  "})
    assert exc_info.value.field == "app_name"


def test_audit_redacts_api_key():
    config = resolve_app_config({"api_key": "secret", "project_id": "p"})
    audit = config.audit()

    assert "secret" not in audit
    assert "api_key: programmatic:<redacted>" in audit
    assert "project_id: programmatic:p" in audit


def test_location_resolution(monkeypatch):
    assert resolve_location() == "us-central1"
    monkeypatch.setenv("VERTEXAI_LOCATION", "asia-northeast1")
    assert resolve_location() == "asia-northeast1"
    assert resolve_location("europe-west4") == "europe-west4"
