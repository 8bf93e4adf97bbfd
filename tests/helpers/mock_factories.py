"""Mock object factories for unit tests.

Creates consistent mock objects that match the real model shapes.
Used in unit tests where the database is fully mocked.
"""

from __future__ import annotations

from datetime import UTC, datetime
from unittest.mock import MagicMock


def make_mock_user(**overrides: object) -> MagicMock:
    user = MagicMock()
    user.id = overrides.get("id", 1)
    user.nickname = overrides.get("nickname", "alice")
    user.display_name = overrides.get("display_name", "Alice")
    user.created_at = overrides.get("created_at", datetime.now(UTC))
    return user


def make_mock_message(**overrides: object) -> MagicMock:
    message = MagicMock()
    message.id = overrides.get("id", 1)
    message.user_id = overrides.get("user_id", 1)
    message.user_display_name = overrides.get("user_display_name", "Alice")
    message.text = overrides.get("text", "hello there")
    message.sentiment_label = overrides.get("sentiment_label")
    message.sentiment_score = overrides.get("sentiment_score")
    message.created_at = overrides.get("created_at", datetime.now(UTC))
    message.user = overrides.get("user")
    return message


def mock_scalars_result(values: list) -> MagicMock:
    """Create a mock execute() result that yields values via .scalars().all()."""
    result = MagicMock()
    result.scalars.return_value.all.return_value = values
    return result


def mock_scalar_result(value: object) -> MagicMock:
    """Create a mock execute() result that yields a single value."""
    result = MagicMock()
    result.scalar_one_or_none.return_value = value
    result.scalar.return_value = value
    return result
