"""Chat message model with its AI sentiment result."""

from typing import TYPE_CHECKING, Optional

from sqlmodel import Field, Relationship, SQLModel

from app.models.base import CreatedAtMixin, IntIDMixin
from app.models.user import NICKNAME_MAX_LENGTH

if TYPE_CHECKING:
    from app.models.user import User

TEXT_MAX_LENGTH = 4000
SENTIMENT_LABEL_MAX_LENGTH = 16


class Message(IntIDMixin, CreatedAtMixin, SQLModel, table=True):
    """A posted chat message.

    Sentiment fields start unset and are written once, right after the
    AI backend answers.
    """

    __tablename__ = "messages"

    # Name as typed at submit time (display fallback if the user row changes)
    user_display_name: str = Field(max_length=NICKNAME_MAX_LENGTH, nullable=False)

    user_id: int = Field(
        foreign_key="users.id",
        ondelete="CASCADE",
        nullable=False,
        index=True,
    )

    text: str = Field(max_length=TEXT_MAX_LENGTH, nullable=False)

    # AI Sentiment
    sentiment_label: str | None = Field(default=None, max_length=SENTIMENT_LABEL_MAX_LENGTH)
    sentiment_score: float | None = Field(default=None)

    # Relationships
    user: Optional["User"] = Relationship(back_populates="messages")


class MessageCreate(SQLModel):
    """Schema for posting a message."""

    user: str = Field(max_length=NICKNAME_MAX_LENGTH)
    text: str = Field(max_length=TEXT_MAX_LENGTH)
