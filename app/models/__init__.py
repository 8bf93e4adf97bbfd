from app.models.message import Message, MessageCreate
from app.models.user import User, UserCreate

__all__ = [
    "User",
    "UserCreate",
    "Message",
    "MessageCreate",
]
