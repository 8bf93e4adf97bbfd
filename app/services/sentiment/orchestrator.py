"""
Sentiment orchestration for posted chat messages.

Flow for a single post:
    validate -> resolve user -> persist message (committed) -> call AI backend
    -> normalize response -> record sentiment on the same message

The message row is committed before the AI call, so it survives any
failure of the backend. Such failures are raised as SentimentAnalysisFailed
subclasses carrying the stored message.
"""

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ValidationError
from app.domain.message_operations import message_ops
from app.domain.user_operations import user_ops
from app.models.message import Message
from app.services.sentiment.client import ProviderClient
from app.services.sentiment.exceptions import (
    ProviderConnectionError,
    SentimentConnectionFailed,
    SentimentUpstreamFailed,
)
from app.services.sentiment.normalizer import normalize
from app.services.sentiment.request_builder import build_candidates
from app.services.sentiment.types import ProviderKind, SentimentResult

logger = logging.getLogger(__name__)


@dataclass
class PostedMessage:
    """A persisted message together with its normalized sentiment."""

    message: Message
    result: SentimentResult


class SentimentOrchestrator:
    """Posts a message and attaches the AI backend's sentiment to it."""

    def __init__(
        self,
        client: ProviderClient,
        provider: ProviderKind,
        base_url: str,
        analyze_path: str | None = None,
    ):
        self.client = client
        self.provider = provider
        self.base_url = base_url
        self.analyze_path = analyze_path

    async def post_message(
        self,
        db: AsyncSession,
        raw_nickname: str | None,
        text: str | None,
    ) -> PostedMessage:
        """
        Store a message and analyze its sentiment.

        Raises:
            ValidationError: Nickname or text blank (nothing is stored)
            SentimentConnectionFailed: AI backend unreachable
            SentimentUpstreamFailed: AI backend answered with a non-2xx status
        """
        if not raw_nickname or not raw_nickname.strip() or not text or not text.strip():
            raise ValidationError("User and Text are required.")

        user = await user_ops.resolve(db, raw_nickname)
        message = await message_ops.create(
            db,
            user_id=user.id,
            display_name_at_submit=raw_nickname,
            text=text,
        )
        # Durable before the AI call: the row must outlive a backend failure
        await db.commit()
        logger.info(f"[sentiment] Stored message {message.id} from user {user.id}")

        candidates = build_candidates(self.provider, self.base_url, self.analyze_path, text)
        try:
            response = await self.client.send(candidates)
        except ProviderConnectionError as e:
            logger.warning(f"[sentiment] Message {message.id}: AI backend unreachable: {e}")
            raise SentimentConnectionFailed(message, e.message) from e

        if not response.is_success:
            logger.warning(
                f"[sentiment] Message {message.id}: AI backend returned HTTP {response.status_code}"
            )
            raise SentimentUpstreamFailed(message, response.status_code, response.text)

        result = normalize(self.provider, response.content)
        message = await message_ops.record_sentiment(db, message, result.label, result.score)
        await db.commit()
        logger.info(
            f"[sentiment] Message {message.id}: {result.label or '-'} ({result.score})"
        )
        return PostedMessage(message=message, result=result)
