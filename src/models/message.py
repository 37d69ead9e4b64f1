"""Raw message and folder records as delivered by a mail store."""

from datetime import datetime

from pydantic import BaseModel, Field

FLAG_SEEN = "seen"
FLAG_FLAGGED = "flagged"
FLAG_DELETED = "deleted"
MESSAGE_FLAGS = (FLAG_SEEN, FLAG_FLAGGED, FLAG_DELETED)


class Folder(BaseModel):
    """Folder record. Mailbox folders are virtual aggregates of other folders."""

    id: int
    account_id: int = 0
    name: str = ""
    is_mailbox: bool = False


class RawMessage(BaseModel):
    """One stored copy of a message in one folder.

    Copies of the same logical message in different folders (e.g. Sent and
    Inbox) share ``message_id``.
    """

    id: int
    account_id: int = 0
    thread_id: int
    message_id: str
    folder_id: int
    seen: bool = False
    flagged: bool = False
    deleted: bool = False
    subject: str = ""
    from_: str = Field("", alias="from")
    to: str = ""
    date_recv: datetime
    text_plain: str = ""

    model_config = {"populate_by_name": True, "extra": "ignore"}
