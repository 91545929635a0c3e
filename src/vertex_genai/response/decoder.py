"""Decoder for prediction arrays that mix artifacts and filter placeholders.

Each raw entry is classified by trying a fixed sequence of interpretations:

1. the expected artifact model,
2. a responsible-AI filter placeholder,
3. any JSON object (kept for forward compatibility, otherwise ignored).

An entry that is not even a JSON object aborts the decode. Every artifact is
kept even when siblings were filtered, and every filter reason is reported.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
import logging
from typing import Any

from pydantic import BaseModel, ValidationError

from vertex_genai.core.types import Failure, Result, Success
from vertex_genai.exceptions import MalformedEntryError
from vertex_genai.imagen.types import ImagenInlineImage, RAIFilteredReason
from vertex_genai.response.types import (
    AggregateResult,
    ArtifactEntry,
    FilteredEntry,
    ResponseEntry,
    UnrecognizedEntry,
)

logger = logging.getLogger(__name__)

PREDICTIONS_KEY = "predictions"

Interpretation = Callable[[Any], Result[ResponseEntry[Any], Exception]]


def _validate[M: BaseModel](model: type[M], raw: Any) -> Result[M, ValidationError]:
    try:
        return Success(model.model_validate(raw))
    except ValidationError as e:
        return Failure(e)


class HeterogeneousResponseDecoder[T: BaseModel]:
    """Decodes a sequence of raw prediction entries into an ``AggregateResult``.

    Args:
        artifact_type: Pydantic model every successful entry must validate as,
            e.g. ``ImagenInlineImage`` or ``ImagenGCSImage``.
    """

    def __init__(self, artifact_type: type[T]) -> None:
        self.artifact_type = artifact_type
        self._interpretations: tuple[Interpretation, ...] = (
            self._as_artifact,
            self._as_filtered,
            self._as_unrecognized,
        )

    def _as_artifact(self, raw: Any) -> Result[ResponseEntry[T], Exception]:
        match _validate(self.artifact_type, raw):
            case Success(value=artifact):
                return Success(ArtifactEntry(artifact))
            case Failure(error=error):
                return Failure(error)

    @staticmethod
    def _as_filtered(raw: Any) -> Result[ResponseEntry[Any], Exception]:
        match _validate(RAIFilteredReason, raw):
            case Success(value=placeholder):
                return Success(FilteredEntry(placeholder.rai_filtered_reason))
            case Failure(error=error):
                return Failure(error)

    @staticmethod
    def _as_unrecognized(raw: Any) -> Result[ResponseEntry[Any], Exception]:
        if isinstance(raw, Mapping):
            return Success(UnrecognizedEntry(raw))
        return Failure(TypeError(f"not a JSON object: {type(raw).__name__}"))

    def classify(
        self, raw: Any, index: int | None = None
    ) -> Result[ResponseEntry[T], MalformedEntryError]:
        """Classify one raw entry using the first interpretation that fits."""
        for interpret in self._interpretations:
            outcome = interpret(raw)
            if isinstance(outcome, Success):
                return outcome
        return Failure(MalformedEntryError(index, raw))

    def decode(
        self, entries: Sequence[Any]
    ) -> Result[AggregateResult[T], MalformedEntryError]:
        """Decode raw entries, in order, into artifacts and filter reasons.

        Returns:
            ``Success`` with the aggregate, which may hold no artifacts when
            every entry was filtered, or ``Failure`` on the first entry that
            is not a JSON object.
        """
        classified: list[ResponseEntry[T]] = []
        for index, raw in enumerate(entries):
            match self.classify(raw, index):
                case Success(value=entry):
                    if isinstance(entry, UnrecognizedEntry):
                        logger.debug(
                            "Ignoring unsupported prediction type at index %d: %s",
                            index,
                            list(entry.payload),
                        )
                    classified.append(entry)
                case Failure() as failure:
                    logger.warning("Malformed prediction at index %d", index)
                    return failure
        result = AggregateResult.from_entries(classified)
        if result.filtered_reason is not None:
            logger.info(
                "%d of %d predictions decoded; some were filtered",
                len(result.artifacts),
                len(classified),
            )
        return Success(result)


def decode_imagen_response[T: BaseModel](
    payload: Any, image_type: type[T] = ImagenInlineImage
) -> Result[AggregateResult[T], MalformedEntryError]:
    """Decode an Imagen ``predict`` response body.

    Args:
        payload: Parsed JSON body, expected as ``{"predictions": [...]}``.
            A missing ``predictions`` key decodes as an empty response.
        image_type: ``ImagenInlineImage`` or ``ImagenGCSImage``.
    """
    if not isinstance(payload, Mapping):
        return Failure(MalformedEntryError(None, payload))
    predictions = payload.get(PREDICTIONS_KEY, [])
    if not isinstance(predictions, list):
        return Failure(
            MalformedEntryError(
                None,
                predictions,
                f"Expected '{PREDICTIONS_KEY}' to be a list, "
                f"got {type(predictions).__name__}",
            )
        )
    return HeterogeneousResponseDecoder(image_type).decode(predictions)
