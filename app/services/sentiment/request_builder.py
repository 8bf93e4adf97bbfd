"""
Builds the ordered request candidates for each provider kind.

Each provider speaks a different wire contract, and some deployments only
answer on a particular URL spelling or payload shape. Rather than branching
at request time, every combination worth trying is laid out up front as a
flat list that the client walks in order.
"""

from typing import Any

from app.services.sentiment.constants import (
    CUSTOM_DEFAULT_PATH,
    HF_SPACE_DEFAULT_PATH,
    HF_SPACE_FALLBACK_PATHS,
)
from app.services.sentiment.types import Candidate, ProviderKind


def join_url(base_url: str, path: str) -> str:
    """
    Append a path segment to a base URL.

    The base always ends with exactly one slash and the path loses its
    leading slashes, so no double slash appears and no base segment is
    dropped: join_url("http://host/v1", "/analyze/") -> "http://host/v1/analyze/"
    """
    return base_url.rstrip("/") + "/" + path.lstrip("/")


def toggle_trailing_slash(url: str) -> str:
    """Remove the trailing slash if present, add one otherwise."""
    return url.rstrip("/") if url.endswith("/") else url + "/"


def hf_space_payloads(text: str) -> list[dict[str, Any]]:
    """Payload shapes accepted by the various Gradio versions, in trial order."""
    return [
        {"data": [text]},
        {"data": [[text]]},
        {"data": [text], "fn_index": 0},
        {"data": [[text]], "fn_index": 0},
    ]


def _huggingface_candidates(base_url: str, path: str, text: str) -> list[Candidate]:
    primary_url = join_url(base_url, path) if path.strip() else base_url
    payload = {"inputs": text}
    return [
        Candidate(url=primary_url, payload=payload),
        # Some deployments 404 on one spelling of the URL only
        Candidate(url=toggle_trailing_slash(primary_url), payload=payload, only_after_status=404),
    ]


def _hf_space_candidates(base_url: str, path: str, text: str) -> list[Candidate]:
    configured = path if path.strip() else HF_SPACE_DEFAULT_PATH
    paths = [
        configured,
        configured if configured.endswith("/") else configured + "/",
        *HF_SPACE_FALLBACK_PATHS,
    ]
    return [
        Candidate(url=join_url(base_url, p), payload=payload)
        for p in paths
        for payload in hf_space_payloads(text)
    ]


def _custom_candidates(base_url: str, path: str, text: str) -> list[Candidate]:
    url = join_url(base_url, path if path.strip() else CUSTOM_DEFAULT_PATH)
    return [Candidate(url=url, payload={"text": text})]


def build_candidates(
    kind: ProviderKind,
    base_url: str,
    path: str | None,
    text: str,
) -> list[Candidate]:
    """
    Lay out every (url, payload) attempt for a provider, in trial order.

    Args:
        kind: Provider wire contract
        base_url: Configured AI base URL
        path: Optional path override (None/empty = provider default)
        text: Message text to analyze

    Returns:
        Non-empty ordered list of candidates
    """
    path = path or ""
    if kind == ProviderKind.HUGGINGFACE:
        return _huggingface_candidates(base_url, path, text)
    if kind == ProviderKind.HF_SPACE:
        return _hf_space_candidates(base_url, path, text)
    if kind == ProviderKind.CUSTOM:
        return _custom_candidates(base_url, path, text)
    raise ValueError(f"Unsupported provider kind: {kind}")
