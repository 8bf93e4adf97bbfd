from datetime import UTC, datetime
from typing import Annotated

from pydantic import AfterValidator
from sqlalchemy import DateTime, func
from sqlmodel import Field, SQLModel


def as_utc(value: datetime) -> datetime:
    """Treat naive timestamps as UTC. SQLite drops the offset on storage."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


# Response field type for stored timestamps
UTCDateTime = Annotated[datetime, AfterValidator(as_utc)]


class IntIDMixin(SQLModel):
    """Mixin providing an autoincrement integer primary key."""

    id: int | None = Field(default=None, primary_key=True)


class CreatedAtMixin(SQLModel):
    """Mixin providing an immutable created_at timestamp.

    SQLModel Field uses sa_type to override the default DateTime mapping.
    """

    created_at: datetime = Field(  # type: ignore[call-overload]
        default_factory=lambda: datetime.now(UTC),
        nullable=False,
        sa_type=DateTime(timezone=True),
        sa_column_kwargs={"server_default": func.now()},
    )
