from typing import TYPE_CHECKING

from sqlmodel import Field, Relationship, SQLModel

from app.models.base import CreatedAtMixin, IntIDMixin

if TYPE_CHECKING:
    from app.models.message import Message

NICKNAME_MAX_LENGTH = 64


class User(IntIDMixin, CreatedAtMixin, SQLModel, table=True):
    """
    Chat user, identified by a case-insensitive nickname.

    `nickname` holds the normalized (trimmed, lower-cased) key;
    `display_name` keeps the casing the user submitted most recently.
    """

    __tablename__ = "users"

    nickname: str = Field(
        max_length=NICKNAME_MAX_LENGTH,
        nullable=False,
        unique=True,
        index=True,
    )
    display_name: str | None = Field(default=None, max_length=NICKNAME_MAX_LENGTH)

    # Relationships
    messages: list["Message"] = Relationship(
        back_populates="user",
        sa_relationship_kwargs={"cascade": "all, delete-orphan", "passive_deletes": True},
    )


class UserCreate(SQLModel):
    """Schema for registering (or re-casing) a user."""

    nickname: str = Field(max_length=NICKNAME_MAX_LENGTH)
