from app.domain.message_operations import clamp_count, message_ops
from app.domain.user_operations import normalize_nickname, user_ops

__all__ = [
    "clamp_count",
    "message_ops",
    "normalize_nickname",
    "user_ops",
]
