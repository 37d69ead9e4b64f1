"""Mail stores: the thread view's source of raw messages and folders."""

from src.mail_store.protocol import FolderCatalog, MessageStore
from src.mail_store.json_store import JsonMailStore, read_mailbox
from src.mail_store.sql_store import SqlMailStore

__all__ = [
    "FolderCatalog",
    "MessageStore",
    "JsonMailStore",
    "SqlMailStore",
    "read_mailbox",
]
