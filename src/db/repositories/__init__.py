"""DB repositories: sync functions returning the mail store's pydantic records."""

from src.db.repositories.folder_repo import insert_folder, list_folders
from src.db.repositories.message_repo import (
    get_message,
    get_thread_messages,
    insert_message,
    set_flag,
)

__all__ = [
    "list_folders",
    "insert_folder",
    "get_thread_messages",
    "get_message",
    "set_flag",
    "insert_message",
]
