"""JSON mail store: folders and messages from a mailbox.json file, flags written back."""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from src.exceptions import InvalidFlagError, MailboxFormatError
from src.models.message import MESSAGE_FLAGS, Folder, RawMessage
from src.utils.logger import get_logger

logger = get_logger("webmail.mail_store")


def read_mailbox(path: Path) -> tuple[list[Folder], list[RawMessage]]:
    """Parse a mailbox document: {"folders": [...], "messages": [...]}."""
    with path.open("r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise MailboxFormatError(f"{path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise MailboxFormatError(
            f"{path} must contain a JSON object",
            recovery_hint='Expected {"folders": [...], "messages": [...]}',
        )
    try:
        folders = [Folder.model_validate(item) for item in data.get("folders", [])]
        messages = [RawMessage.model_validate(item) for item in data.get("messages", [])]
    except ValidationError as e:
        raise MailboxFormatError(f"{path} has an invalid folder or message record: {e}") from e
    return folders, messages


class JsonMailStore:
    """Mailbox file store for one account; implements MessageStore and FolderCatalog."""

    def __init__(self, mailbox_path: Path, account_id: int):
        self._mailbox_path = mailbox_path
        self._account_id = account_id
        self._folders: list[Folder] = []
        self._messages: list[RawMessage] = []
        logger.info("mail_store.init", mailbox_path=str(self._mailbox_path), account_id=account_id)
        self._load()

    def _load(self) -> None:
        if not self._mailbox_path.exists():
            logger.warning("mail_store.mailbox_missing", mailbox_path=str(self._mailbox_path))
            return
        self._folders, self._messages = read_mailbox(self._mailbox_path)
        logger.info(
            "mail_store.mailbox_loaded",
            folder_count=len(self._folders),
            message_count=len(self._messages),
        )

    def _save(self) -> None:
        data: dict[str, Any] = {
            "folders": [f.model_dump() for f in self._folders],
            "messages": [m.model_dump(mode="json", by_alias=True) for m in self._messages],
        }
        self._mailbox_path.parent.mkdir(parents=True, exist_ok=True)
        with self._mailbox_path.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        logger.debug("mail_store.mailbox_written", mailbox_path=str(self._mailbox_path))

    def list_folders(self) -> list[Folder]:
        return [f for f in self._folders if f.account_id == self._account_id]

    def get_thread_messages(self, account_id: int, thread_id: int) -> list[RawMessage]:
        matching = [
            m
            for m in self._messages
            if m.account_id == account_id and m.thread_id == thread_id and not m.deleted
        ]
        matching.sort(key=lambda m: (m.date_recv, m.id))
        logger.debug("mail_store.get_thread_messages", thread_id=thread_id, count=len(matching))
        return matching

    def get_message(self, account_id: int, id: int) -> RawMessage | None:
        for m in self._messages:
            if m.account_id == account_id and m.id == id:
                return m
        logger.debug("mail_store.get_message.miss", id=id)
        return None

    def set_flag(
        self,
        account_id: int,
        message_id: str,
        flag: str,
        value: bool,
        thread_id: int | None = None,
        folder_id: int | None = None,
    ) -> int:
        if flag not in MESSAGE_FLAGS:
            raise InvalidFlagError(f"Unknown message flag: {flag!r}")
        updated = 0
        for i, m in enumerate(self._messages):
            if m.account_id != account_id or m.message_id != message_id:
                continue
            if thread_id is not None and m.thread_id != thread_id:
                continue
            if folder_id is not None and m.folder_id != folder_id:
                continue
            self._messages[i] = m.model_copy(update={flag: value})
            updated += 1
        if updated:
            self._save()
        logger.info(
            "mail_store.set_flag",
            message_id=message_id,
            flag=flag,
            value=value,
            folder_id=folder_id,
            updated=updated,
        )
        return updated
