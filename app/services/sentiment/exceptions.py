"""Exceptions for the sentiment service."""

from typing import TYPE_CHECKING

from fastapi import status

if TYPE_CHECKING:
    from app.models.message import Message


class ProviderConnectionError(Exception):
    """The AI backend could not be reached (DNS, TCP, TLS, timeout)."""

    def __init__(self, message: str, url: str | None = None):
        self.message = message
        self.url = url
        super().__init__(message)


class SentimentAnalysisFailed(Exception):
    """Analysis failed after the message was persisted.

    Carries the stored message so callers can still report its id.
    """

    status_code: int = status.HTTP_502_BAD_GATEWAY
    error: str = "AI request failed"

    def __init__(self, message: "Message", details: str):
        self.message = message
        self.details = details
        super().__init__(f"{self.error}: {details}")


class SentimentConnectionFailed(SentimentAnalysisFailed):
    """Transport-level failure reaching the AI backend."""

    error = "AI connection failed"


class SentimentUpstreamFailed(SentimentAnalysisFailed):
    """The AI backend answered with a non-success status."""

    def __init__(self, message: "Message", status_code: int, body: str):
        self.status_code = status_code
        super().__init__(message, body)
