"""
Global test configuration.
"""

import os

import pytest

from vertex_genai.config.types import AppConfig
from vertex_genai.registry import InstanceRegistry


# --- Environment Isolation (Autouse) ---
@pytest.fixture(autouse=True)
def isolate_vertexai_env(request, monkeypatch):
    """Ensure a clean VERTEXAI_* environment for each test.

    Escape hatch: mark a test with @pytest.mark.allow_env_pollution to keep
    the current environment unchanged.
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return

    for key in list(os.environ.keys()):
        if key.upper().startswith("VERTEXAI_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def app_config():
    """A complete configuration for the default app."""
    return AppConfig(
        name="[DEFAULT]",
        project_id="proj1",
        api_key="test-api-key",
        app_id="1:123:ios:abc",
    )


@pytest.fixture
def registry():
    """A fresh registry per test so instances never leak between tests."""
    return InstanceRegistry()


def pytest_configure(config):
    """Configure custom markers for test organization."""
    markers = [
        "unit: Fast, isolated unit tests",
        "contract: Architectural invariants that must always hold",
        "allow_env_pollution: Keep VERTEXAI_* environment variables for this test",
    ]
    for marker in markers:
        config.addinivalue_line("markers", marker)
