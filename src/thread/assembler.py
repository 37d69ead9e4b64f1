"""Assemble a thread: fetch, drop cross-folder duplicates, enrich, index."""

from datetime import datetime
from typing import Sequence

from src.config import SNIPPET_LENGTH
from src.exceptions import ThreadNotFoundError
from src.mail_store.protocol import FolderCatalog, MessageStore
from src.models.message import Folder, RawMessage
from src.models.thread import Thread
from src.thread.display_index import build_index
from src.thread.enricher import enrich
from src.utils.logger import get_logger

logger = get_logger("webmail.thread")


def dedupe_messages(raw_messages: Sequence[RawMessage]) -> tuple[list[RawMessage], list[int]]:
    """Keep the first copy of each message-id, in order.

    Returns the surviving messages and the distinct folder ids of every copy,
    duplicates included, in first-seen order.
    """
    seen_ids: set[str] = set()
    survivors: list[RawMessage] = []
    folder_ids: list[int] = []
    for message in raw_messages:
        if message.folder_id not in folder_ids:
            folder_ids.append(message.folder_id)
        if message.message_id in seen_ids:
            continue
        seen_ids.add(message.message_id)
        survivors.append(message)
    return survivors, folder_ids


def visible_folders(folders: Sequence[Folder], folder_ids: Sequence[int]) -> list[Folder]:
    """Thread folder badges: touched folders that are not mailbox aggregates, catalog order."""
    wanted = set(folder_ids)
    return [f for f in folders if f.id in wanted and not f.is_mailbox]


def load_thread(
    store: MessageStore,
    catalog: FolderCatalog,
    account_id: int,
    thread_id: int,
    now: datetime | None = None,
    snippet_length: int = SNIPPET_LENGTH,
) -> Thread:
    """Load and assemble one thread for display.

    Raises:
        ThreadNotFoundError: the store returned no messages for the thread.
    """
    raw_messages = store.get_thread_messages(account_id, thread_id)
    if not raw_messages:
        logger.warning("thread.not_found", account_id=account_id, thread_id=thread_id)
        raise ThreadNotFoundError(account_id, thread_id)

    now = now or datetime.now().astimezone()
    survivors, folder_ids = dedupe_messages(raw_messages)
    messages = [enrich(m, now, snippet_length=snippet_length) for m in survivors]

    thread = Thread(
        account_id=account_id,
        thread_id=thread_id,
        messages=messages,
        unread_ids=[m.id for m in messages if m.unread],
        folder_ids=folder_ids,
        folders=visible_folders(catalog.list_folders(), folder_ids),
        index=build_index(messages),
    )
    logger.info(
        "thread.loaded",
        account_id=account_id,
        thread_id=thread_id,
        copies=len(raw_messages),
        message_count=thread.message_count,
        unread=len(thread.unread_ids),
        index_entries=len(thread.index),
    )
    return thread
