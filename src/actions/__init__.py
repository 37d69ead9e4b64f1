"""Message actions consuming the thread view's output."""

from src.actions.delete import delete_message

__all__ = ["delete_message"]
