"""
Sentiment service package.

Re-exports all public types and classes.
Usage: `from app.services.sentiment import SentimentOrchestrator, ProviderKind`

Module structure:
- orchestrator.py: Post-a-message flow (store, analyze, record)
- request_builder.py: Per-provider (url, payload) candidate lists
- client.py: Sequential candidate sender
- normalizer.py: Provider response -> (label, score)
- http_client.py: Shared httpx client
- types.py: Data types and response schemas
- exceptions.py: Custom exceptions
- constants.py: Provider defaults
"""

from app.services.sentiment.client import ProviderClient
from app.services.sentiment.exceptions import (
    ProviderConnectionError,
    SentimentAnalysisFailed,
    SentimentConnectionFailed,
    SentimentUpstreamFailed,
)
from app.services.sentiment.http_client import close_ai_http_client, get_ai_http_client
from app.services.sentiment.normalizer import normalize
from app.services.sentiment.orchestrator import PostedMessage, SentimentOrchestrator
from app.services.sentiment.request_builder import build_candidates, join_url
from app.services.sentiment.types import Candidate, ProviderKind, SentimentResult

__all__ = [
    # Orchestration (main entry point)
    "SentimentOrchestrator",
    "PostedMessage",
    # Building blocks
    "ProviderClient",
    "build_candidates",
    "join_url",
    "normalize",
    # HTTP client
    "get_ai_http_client",
    "close_ai_http_client",
    # Types
    "Candidate",
    "ProviderKind",
    "SentimentResult",
    # Exceptions
    "ProviderConnectionError",
    "SentimentAnalysisFailed",
    "SentimentConnectionFailed",
    "SentimentUpstreamFailed",
]
