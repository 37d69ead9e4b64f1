"""Enriched messages, display index entries and the assembled thread."""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from src.models.message import Folder, RawMessage


class EnrichedMessage(RawMessage):
    """Raw message plus the fields derived for display."""

    from_name: str = ""
    from_email: str = ""
    to_names: str = ""
    timestamp: int = 0  # POSIX seconds
    datetime_string: str = ""  # e.g. "8 July 2026 14:05"
    date_string: str = ""  # "14:05", "8 Jul" or "8/07/2025"
    avatar_url: str = ""
    body: str = ""  # escaped, autolinked HTML
    snippet: str = ""
    snippet_unquoted: str = ""
    unread: bool = False


class IndexGroup(BaseModel):
    """Run of read messages rendered as one collapsed "N more messages" block."""

    type: Literal["group"] = "group"
    messages: list[EnrichedMessage]
    count: int


class IndexMessage(BaseModel):
    """Message rendered on its own, expanded when ``open``."""

    type: Literal["message"] = "message"
    message: EnrichedMessage
    open: bool
    current: bool = False


IndexEntry = Annotated[Union[IndexGroup, IndexMessage], Field(discriminator="type")]


class Thread(BaseModel):
    """Thread of deduplicated, enriched messages (oldest to newest)."""

    account_id: int
    thread_id: int
    messages: list[EnrichedMessage]
    unread_ids: list[int] = []
    folder_ids: list[int] = []
    folders: list[Folder] = []
    index: list[IndexEntry] = []

    model_config = {"frozen": True}

    @property
    def message(self) -> Optional[EnrichedMessage]:
        """The subject-bearing message: first one in the thread."""
        return self.messages[0] if self.messages else None

    @property
    def subject(self) -> str:
        return self.message.subject if self.message else ""

    @property
    def message_count(self) -> int:
        return len(self.messages)

    def is_unread(self, message_id: int) -> bool:
        return message_id in self.unread_ids
