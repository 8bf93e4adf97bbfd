"""
Maps raw provider responses onto a single (label, score) pair.

Each provider kind has its own response schema. A body that matches none
of the expected shapes is not an error: the result is simply empty.
"""

import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError

from app.services.sentiment.types import (
    CustomResponse,
    HFSpaceResponse,
    LabelScore,
    ProviderKind,
    SentimentResult,
)

logger = logging.getLogger(__name__)

_flat_adapter = TypeAdapter(list[LabelScore])
_nested_adapter = TypeAdapter(list[list[LabelScore]])


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _best_of(entries: list[LabelScore]) -> SentimentResult:
    if not entries:
        return SentimentResult()
    # max() keeps the first entry on ties
    best = max(entries, key=lambda e: e.score if e.score is not None else 0.0)
    return SentimentResult(label=best.label, score=best.score)


def normalize_huggingface(raw_body: str | bytes) -> SentimentResult:
    """Highest-scoring entry of a flat or nested (one list per input) array."""
    try:
        return _best_of(_flat_adapter.validate_json(raw_body))
    except ValidationError:
        pass

    try:
        nested = _nested_adapter.validate_json(raw_body)
    except ValidationError:
        return SentimentResult()
    return _best_of(nested[0]) if nested else SentimentResult()


def _from_space_entry(entry: Any) -> SentimentResult:
    if isinstance(entry, dict):
        label = entry.get("label")
        score = entry.get("score")
        return SentimentResult(
            label=label if isinstance(label, str) else None,
            score=float(score) if _is_number(score) else None,
        )
    if isinstance(entry, str):
        return SentimentResult(label=entry)
    if isinstance(entry, list):
        label = entry[0] if entry and isinstance(entry[0], str) else None
        score = entry[1] if len(entry) > 1 and _is_number(entry[1]) else None
        return SentimentResult(label=label, score=float(score) if score is not None else None)
    return SentimentResult()


def normalize_hf_space(raw_body: str | bytes) -> SentimentResult:
    """First entry of `data` that yields a non-empty label."""
    try:
        response = HFSpaceResponse.model_validate_json(raw_body)
    except ValidationError:
        return SentimentResult()

    for entry in response.data:
        result = _from_space_entry(entry)
        if result.label:
            return result
    return SentimentResult()


def normalize_custom(raw_body: str | bytes) -> SentimentResult:
    """Flat object with `label` and `score`."""
    try:
        response = CustomResponse.model_validate_json(raw_body)
    except ValidationError:
        return SentimentResult()
    return SentimentResult(label=response.label, score=response.score)


_NORMALIZERS = {
    ProviderKind.HUGGINGFACE: normalize_huggingface,
    ProviderKind.HF_SPACE: normalize_hf_space,
    ProviderKind.CUSTOM: normalize_custom,
}


def normalize(kind: ProviderKind, raw_body: str | bytes) -> SentimentResult:
    """Normalize a provider success body. Never raises."""
    normalizer = _NORMALIZERS.get(kind)
    if normalizer is None:
        return SentimentResult()

    result = normalizer(raw_body)
    if result.is_empty:
        logger.info(f"[sentiment] Unrecognized {kind.value} response shape, leaving sentiment unset")
    return result
