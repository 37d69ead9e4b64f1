"""Re-export all ORM models so Base.metadata has all tables."""

from src.db.models.mail import Folder, Message

__all__ = [
    "Folder",
    "Message",
]
