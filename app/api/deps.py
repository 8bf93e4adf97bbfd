import httpx
from fastapi import Depends

from app.config import settings
from app.services.sentiment import (
    ProviderClient,
    ProviderKind,
    SentimentOrchestrator,
    get_ai_http_client,
)


def get_http_client() -> httpx.AsyncClient:
    """Shared AI backend client (overridden in tests)."""
    return get_ai_http_client()


def get_sentiment_orchestrator(
    http_client: httpx.AsyncClient = Depends(get_http_client),
) -> SentimentOrchestrator:
    """Build the orchestrator from current settings."""
    return SentimentOrchestrator(
        client=ProviderClient(
            http_client, token=settings.ai_token if settings.ai_token_configured else None
        ),
        provider=ProviderKind(settings.ai_provider),
        base_url=settings.ai_base_url,
        analyze_path=settings.ai_analyze_path or None,
    )
