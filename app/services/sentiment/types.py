"""Data types for the sentiment service.

Contains the provider kinds, request candidates, the normalized result,
and the typed response schemas of each provider.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel, field_validator


class ProviderKind(str, Enum):
    """Wire-contract family of the AI inference backend."""

    HUGGINGFACE = "huggingface"
    HF_SPACE = "hf-space"
    CUSTOM = "custom"


@dataclass(frozen=True)
class Candidate:
    """One (url, payload) attempt for a single analysis request.

    only_after_status: when set, the candidate is attempted only if the
    previous attempt answered with exactly this status code.
    """

    url: str
    payload: dict[str, Any] = field(default_factory=dict)
    only_after_status: int | None = None


@dataclass(frozen=True)
class SentimentResult:
    """Normalized sentiment: both fields None when the body was not understood."""

    label: str | None = None
    score: float | None = None

    @property
    def is_empty(self) -> bool:
        return self.label is None and self.score is None


# --- Provider response schemas ---


class LabelScore(BaseModel):
    """Hugging Face Inference API classification entry."""

    label: str | None = None
    score: float | None = None


class HFSpaceResponse(BaseModel):
    """Gradio Space /predict response. Entries vary by app, so stay untyped."""

    data: list[Any]


class CustomResponse(BaseModel):
    """Response of a self-hosted analyzer.

    Each field is read on its own: a value of the wrong shape becomes None
    instead of failing the whole body.
    """

    label: str | None = None
    score: float | None = None

    @field_validator("label", mode="before")
    @classmethod
    def coerce_label(cls, value: Any) -> str | None:
        if isinstance(value, str | int | float):
            return str(value)
        return None

    @field_validator("score", mode="before")
    @classmethod
    def coerce_score(cls, value: Any) -> float | None:
        if isinstance(value, bool):
            return None
        if isinstance(value, int | float):
            return float(value)
        if isinstance(value, str):
            try:
                return float(value)
            except ValueError:
                return None
        return None
