"""Entry variants and the aggregate produced by decoding a prediction array."""

from __future__ import annotations

from collections.abc import Mapping
import dataclasses
import typing

from vertex_genai.core.types import Failure, Result, Success
from vertex_genai.exceptions import DecodeIncompleteError

T = typing.TypeVar("T")


# --- Classified Entries ---


@dataclasses.dataclass(frozen=True, slots=True)
class ArtifactEntry[T]:
    """An entry that decoded as the expected artifact type."""

    artifact: T


@dataclasses.dataclass(frozen=True, slots=True)
class FilteredEntry:
    """An entry standing in for an artifact withheld by a content filter."""

    reason: str


@dataclasses.dataclass(frozen=True, slots=True)
class UnrecognizedEntry:
    """A well-formed object of a shape this client does not yet understand."""

    payload: Mapping[str, typing.Any]


ResponseEntry = ArtifactEntry[T] | FilteredEntry | UnrecognizedEntry


# --- Aggregate ---


@dataclasses.dataclass(frozen=True, slots=True)
class AggregateResult[T]:
    """Artifacts decoded from one response, plus why any were withheld.

    ``filtered_reason`` is set exactly when at least one entry was a filter
    placeholder; multiple reasons are joined with newlines. The number of
    artifacts may therefore be lower than the number requested.
    """

    artifacts: tuple[T, ...] = ()
    filtered_reason: str | None = None

    @classmethod
    def from_entries(
        cls, entries: typing.Iterable[ResponseEntry[T]]
    ) -> AggregateResult[T]:
        """Fold classified entries, in order, into an aggregate."""
        artifacts: list[T] = []
        reasons: list[str] = []
        for entry in entries:
            match entry:
                case ArtifactEntry(artifact=artifact):
                    artifacts.append(artifact)
                case FilteredEntry(reason=reason):
                    reasons.append(reason)
                case UnrecognizedEntry():
                    pass
        return cls(
            artifacts=tuple(artifacts),
            filtered_reason="\n".join(reasons) if reasons else None,
        )

    @property
    def images(self) -> tuple[T, ...]:
        """Alias of ``artifacts`` for image generation responses."""
        return self.artifacts

    def require_artifacts(self) -> Result[AggregateResult[T], DecodeIncompleteError]:
        """Treat a response with no artifacts at all as a failure.

        Decoding never fails just because everything was filtered; callers
        that consider an empty result an error opt in through this method.
        """
        if self.artifacts:
            return Success(self)
        return Failure(DecodeIncompleteError(self.filtered_reason))


ImagenGenerationResponse = AggregateResult
