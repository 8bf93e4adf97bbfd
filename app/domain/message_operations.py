"""Domain operations for Message model."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.domain.base_operations import BaseOperations
from app.models.message import SENTIMENT_LABEL_MAX_LENGTH, Message

logger = logging.getLogger(__name__)

MIN_COUNT = 1
MAX_COUNT = 100


def clamp_count(count: int) -> int:
    """Clamp a requested listing size to [MIN_COUNT, MAX_COUNT]."""
    return max(MIN_COUNT, min(count, MAX_COUNT))


class MessageOperations(BaseOperations[Message]):
    """CRUD operations for Message model."""

    def __init__(self) -> None:
        super().__init__(Message)

    async def create(
        self,
        db: AsyncSession,
        user_id: int,
        display_name_at_submit: str,
        text: str,
    ) -> Message:
        """Create a new message with sentiment unset."""
        message = Message(
            user_id=user_id,
            user_display_name=display_name_at_submit,
            text=text,
        )
        db.add(message)
        await db.flush()
        await db.refresh(message)
        return message

    async def record_sentiment(
        self,
        db: AsyncSession,
        message: Message,
        label: str | None,
        score: float | None,
    ) -> Message:
        """Write the AI sentiment result onto an existing message."""
        if label is not None and len(label) > SENTIMENT_LABEL_MAX_LENGTH:
            logger.warning(
                f"Sentiment label '{label}' exceeds {SENTIMENT_LABEL_MAX_LENGTH} chars, truncating"
            )
            label = label[:SENTIMENT_LABEL_MAX_LENGTH]

        return await self.update(
            db,
            message,
            {"sentiment_label": label, "sentiment_score": score},
        )

    async def list_recent(self, db: AsyncSession, limit: int = 50) -> list[Message]:
        """The newest `limit` messages, returned oldest first."""
        statement = (
            select(Message)
            .options(selectinload(Message.user))
            .order_by(Message.id.desc())
            .limit(clamp_count(limit))
        )
        result = await db.execute(statement)
        messages = list(result.scalars().all())
        return sorted(messages, key=lambda m: (m.created_at, m.id))

    async def list_by_user(
        self,
        db: AsyncSession,
        user_id: int,
        limit: int = 20,
    ) -> list[Message]:
        """The newest `limit` messages of a user, newest first."""
        statement = (
            select(Message)
            .where(Message.user_id == user_id)
            .order_by(Message.id.desc())
            .limit(clamp_count(limit))
        )
        result = await db.execute(statement)
        return list(result.scalars().all())


message_ops = MessageOperations()
