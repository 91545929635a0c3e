"""Result type and guard helpers used at the client's seams.

Construction and decoding report failures as values rather than raising, so
host applications can branch on ``Success`` / ``Failure`` without broad
``try/except`` blocks.
"""

from __future__ import annotations

import dataclasses
import typing

# --- Result Monad for Explicit Error Handling ---

TSuccess = typing.TypeVar("TSuccess")
TFailure = typing.TypeVar("TFailure", bound=Exception)


@dataclasses.dataclass(frozen=True, slots=True)
class Success[TSuccess]:
    """A successful outcome."""

    value: TSuccess


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[TFailure]:
    """A failed outcome, carrying the error."""

    error: TFailure


Result = Success[TSuccess] | Failure[TFailure]


def _require(
    *,
    condition: bool,
    message: str,
    exc: type[Exception] = ValueError,
    field_name: str | None = None,
) -> None:
    """Centralized validation with optional field context for clearer errors."""
    if not condition:
        if field_name:
            raise exc(f"{field_name}: {message}")
        raise exc(message)
