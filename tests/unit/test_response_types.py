import pytest

from vertex_genai.core.types import Failure, Success
from vertex_genai.exceptions import DecodeIncompleteError
from vertex_genai.response.types import (
    AggregateResult,
    ArtifactEntry,
    FilteredEntry,
    UnrecognizedEntry,
)

pytestmark = pytest.mark.unit


def test_from_entries_preserves_order():
    result = AggregateResult.from_entries(
        [
            ArtifactEntry("b"),
            UnrecognizedEntry({"x": 1}),
            ArtifactEntry("a"),
            FilteredEntry("r"),
        ]
    )
    assert result.artifacts == ("b", "a")
    assert result.filtered_reason == "r"


def test_reason_present_whenever_a_placeholder_was_seen():
    result = AggregateResult.from_entries([FilteredEntry("")])
    assert result.filtered_reason == ""


def test_require_artifacts_passes_through_non_empty():
    result = AggregateResult(artifacts=("img",), filtered_reason="r")
    assert result.require_artifacts() == Success(result)


def test_require_artifacts_fails_when_all_filtered():
    outcome = AggregateResult(filtered_reason="blocked").require_artifacts()

    assert isinstance(outcome, Failure)
    assert isinstance(outcome.error, DecodeIncompleteError)
    assert outcome.error.filtered_reason == "blocked"
    assert "blocked" in str(outcome.error)


def test_aggregate_is_immutable():
    result = AggregateResult(artifacts=("img",))
    with pytest.raises(AttributeError):
        result.artifacts = ()  # type: ignore[misc]
