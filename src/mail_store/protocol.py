"""Mail store protocols: where raw thread messages and folders come from."""

from typing import Protocol

from src.models.message import Folder, RawMessage


class MessageStore(Protocol):
    """Read thread messages and set message flags."""

    def get_thread_messages(self, account_id: int, thread_id: int) -> list[RawMessage]:
        """All non-deleted copies of the thread's messages, oldest first (ties by id). May be empty."""
        ...

    def get_message(self, account_id: int, id: int) -> RawMessage | None:
        """A single stored message copy by record id."""
        ...

    def set_flag(
        self,
        account_id: int,
        message_id: str,
        flag: str,
        value: bool,
        thread_id: int | None = None,
        folder_id: int | None = None,
    ) -> int:
        """Set ``flag`` on every copy with this message-id, optionally scoped; returns copies updated."""
        ...


class FolderCatalog(Protocol):
    """Folders of one account."""

    def list_folders(self) -> list[Folder]:
        """All folders in catalog order, mailbox aggregates included."""
        ...
