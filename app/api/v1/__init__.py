from app.api.v1 import messages, users

__all__ = [
    "messages",
    "users",
]
