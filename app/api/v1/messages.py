"""Chat message endpoints: post with sentiment analysis, list."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_sentiment_orchestrator
from app.core.database import get_db
from app.core.exceptions import ValidationError
from app.domain.message_operations import message_ops
from app.domain.user_operations import user_ops
from app.models.base import UTCDateTime
from app.models.message import Message, MessageCreate
from app.services.sentiment import SentimentAnalysisFailed, SentimentOrchestrator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/messages", tags=["messages"])


class MessageSentimentRead(BaseModel):
    """Result of posting a message."""

    id: int
    text: str
    sentiment: str | None
    score: float | None


class UserMessageRead(MessageSentimentRead):
    """A message in a single user's history."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    created_at: UTCDateTime


class FeedMessageRead(UserMessageRead):
    """A message in the global feed, with its author's name."""

    user: str


def _author_name(m: Message) -> str:
    """Resolved user's display name, else the name typed at submit time."""
    if m.user is not None and m.user.display_name:
        return m.user.display_name
    return m.user_display_name


@router.post("", response_model=MessageSentimentRead)
async def post_message(
    data: MessageCreate,
    db: AsyncSession = Depends(get_db),
    orchestrator: SentimentOrchestrator = Depends(get_sentiment_orchestrator),
):
    """Store a message and attach the AI backend's sentiment to it."""
    try:
        posted = await orchestrator.post_message(db, data.user, data.text)
    except SentimentAnalysisFailed as e:
        return JSONResponse(
            status_code=e.status_code,
            content={
                "id": e.message.id,
                "text": e.message.text,
                "error": e.error,
                "details": e.details,
            },
        )

    message = posted.message
    return MessageSentimentRead(
        id=message.id,
        text=message.text,
        sentiment=message.sentiment_label,
        score=message.sentiment_score,
    )


@router.get("/all", response_model=list[FeedMessageRead])
async def list_all_messages(
    count: int = 50,
    db: AsyncSession = Depends(get_db),
) -> list[FeedMessageRead]:
    """The newest `count` messages (clamped to 1-100), oldest first."""
    messages = await message_ops.list_recent(db, limit=count)
    return [
        FeedMessageRead(
            id=m.id,
            text=m.text,
            user=_author_name(m),
            sentiment=m.sentiment_label,
            score=m.sentiment_score,
            created_at=m.created_at,
        )
        for m in messages
    ]


@router.get("", response_model=list[UserMessageRead])
async def list_user_messages(
    nickname: str | None = None,
    count: int = 20,
    db: AsyncSession = Depends(get_db),
) -> list[UserMessageRead]:
    """A user's newest `count` messages (clamped to 1-100), newest first."""
    if not nickname or not nickname.strip():
        raise ValidationError("nickname is required")

    user = await user_ops.get_by_nickname(db, nickname)
    if user is None:
        return []

    messages = await message_ops.list_by_user(db, user_id=user.id, limit=count)
    return [
        UserMessageRead(
            id=m.id,
            text=m.text,
            sentiment=m.sentiment_label,
            score=m.sentiment_score,
            created_at=m.created_at,
        )
        for m in messages
    ]
