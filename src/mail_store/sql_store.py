"""SQL mail store backed by the folders/messages tables."""

from src.db.repositories import folder_repo, message_repo
from src.models.message import Folder, RawMessage
from src.utils.logger import get_logger

logger = get_logger("webmail.sql_store")


class SqlMailStore:
    """Database store for one account; implements MessageStore and FolderCatalog."""

    def __init__(self, account_id: int):
        self._account_id = account_id

    def list_folders(self) -> list[Folder]:
        return folder_repo.list_folders(self._account_id)

    def get_thread_messages(self, account_id: int, thread_id: int) -> list[RawMessage]:
        messages = message_repo.get_thread_messages(account_id, thread_id)
        logger.debug("sql_store.get_thread_messages", thread_id=thread_id, count=len(messages))
        return messages

    def get_message(self, account_id: int, id: int) -> RawMessage | None:
        return message_repo.get_message(account_id, id)

    def set_flag(
        self,
        account_id: int,
        message_id: str,
        flag: str,
        value: bool,
        thread_id: int | None = None,
        folder_id: int | None = None,
    ) -> int:
        updated = message_repo.set_flag(
            account_id,
            message_id,
            flag,
            value,
            thread_id=thread_id,
            folder_id=folder_id,
        )
        logger.info(
            "sql_store.set_flag",
            message_id=message_id,
            flag=flag,
            value=value,
            folder_id=folder_id,
            updated=updated,
        )
        return updated
