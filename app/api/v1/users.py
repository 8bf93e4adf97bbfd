from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.exceptions import NotFoundError, ValidationError
from app.domain.user_operations import user_ops
from app.models.base import UTCDateTime
from app.models.user import User, UserCreate

router = APIRouter(prefix="/users", tags=["users"])


class UserRead(BaseModel):
    """User profile response."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: int
    nickname: str
    display_name: str | None
    created_at: UTCDateTime


def _to_read(user: User) -> UserRead:
    return UserRead.model_validate(user)


@router.post("", response_model=UserRead)
async def register_user(
    data: UserCreate,
    db: AsyncSession = Depends(get_db),
) -> UserRead:
    """Register a nickname, or update its display casing if it exists."""
    if not data.nickname.strip():
        raise ValidationError("Nickname is required")

    user = await user_ops.resolve(db, data.nickname)
    return _to_read(user)


@router.get("/{user_id}", response_model=UserRead)
async def get_user(
    user_id: int,
    db: AsyncSession = Depends(get_db),
) -> UserRead:
    """Get a user by ID."""
    user = await user_ops.get(db, user_id)
    if not user:
        raise NotFoundError("User")
    return _to_read(user)


@router.get("", response_model=UserRead | list[UserRead])
async def find_users(
    nickname: str | None = None,
    db: AsyncSession = Depends(get_db),
) -> UserRead | list[UserRead]:
    """Look up one user by nickname, or list all users by nickname."""
    if nickname and nickname.strip():
        user = await user_ops.get_by_nickname(db, nickname)
        if not user:
            raise NotFoundError("User")
        return _to_read(user)

    users = await user_ops.list_all(db)
    return [_to_read(u) for u in users]
