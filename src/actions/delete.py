"""Delete action: flag a message deleted, in one folder or in the whole thread."""

from src.mail_store.protocol import MessageStore
from src.models.message import FLAG_DELETED, RawMessage
from src.utils.logger import get_logger

logger = get_logger("webmail.actions.delete")


def delete_message(
    store: MessageStore,
    message: RawMessage,
    from_folder_id: int | None = None,
) -> int:
    """Mark a message deleted; returns the number of stored copies updated.

    With ``from_folder_id`` only the copy in that folder is deleted. Without
    it every copy sharing the message-id within the thread is deleted, which
    removes the message from the thread view entirely.
    """
    updated = store.set_flag(
        message.account_id,
        message.message_id,
        FLAG_DELETED,
        True,
        thread_id=message.thread_id,
        folder_id=from_folder_id,
    )
    logger.info(
        "actions.delete",
        id=message.id,
        message_id=message.message_id,
        from_folder_id=from_folder_id,
        updated=updated,
    )
    return updated
