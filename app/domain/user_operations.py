import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.base_operations import BaseOperations
from app.models.user import User

logger = logging.getLogger(__name__)


def normalize_nickname(raw_nickname: str) -> tuple[str, str]:
    """Split a submitted nickname into (display casing, lookup key)."""
    original = raw_nickname.strip()
    return original, original.lower()


class UserOperations(BaseOperations[User]):
    """Operations for User model."""

    def __init__(self) -> None:
        super().__init__(User)

    async def _get_by_key(self, db: AsyncSession, key: str) -> User | None:
        statement = select(User).where(User.nickname == key)
        result = await db.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_nickname(self, db: AsyncSession, nickname: str) -> User | None:
        """Get a user by nickname, matched case-insensitively."""
        _, key = normalize_nickname(nickname)
        if not key:
            return None
        return await self._get_by_key(db, key)

    async def list_all(self, db: AsyncSession) -> list[User]:
        """All users ordered by normalized nickname."""
        statement = select(User).order_by(User.nickname)
        result = await db.execute(statement)
        return list(result.scalars().all())

    async def resolve(self, db: AsyncSession, raw_nickname: str) -> User:
        """
        Find or create the user for a submitted nickname.

        The most recently submitted casing becomes the display name.
        If a concurrent request inserts the same nickname first, the unique
        index rejects our insert; the transaction is rolled back and the
        winner's row is used instead.

        Raises:
            ValueError: If the nickname is blank
            IntegrityError: If the insert fails and no row can be re-read
        """
        original, key = normalize_nickname(raw_nickname)
        if not key:
            raise ValueError("Nickname is required")

        user = await self._get_by_key(db, key)
        if user is None:
            user = User(nickname=key, display_name=original)
            db.add(user)
            try:
                await db.flush()
            except IntegrityError:
                await db.rollback()
                logger.warning(f"Nickname '{key}' was created concurrently, re-reading")
                user = await self._get_by_key(db, key)
                if user is None:
                    raise
            else:
                await db.refresh(user)
                logger.info(f"Created user {user.id} ({key})")
                return user

        if user.display_name != original:
            user = await self.update(db, user, {"display_name": original})
        return user


user_ops = UserOperations()
