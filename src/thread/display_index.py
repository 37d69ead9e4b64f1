"""Decide which messages of a thread are shown, opened, or collapsed into groups."""

from typing import Sequence

from src.models.thread import EnrichedMessage, IndexEntry, IndexGroup, IndexMessage


def _flush(pending: list[EnrichedMessage]) -> list[IndexEntry]:
    """Pending run of read messages as a group entry (nothing when empty)."""
    if not pending:
        return []
    return [IndexGroup(messages=list(pending), count=len(pending))]


def build_index(messages: Sequence[EnrichedMessage]) -> list[IndexEntry]:
    """Build the display index of an ordered, deduplicated thread.

    The first and penultimate messages are always shown, opened only when
    unread (or when the thread has a single message). Unread messages and the
    last message are shown opened; the last one is marked current. Every other
    run of read messages collapses into a group.
    """
    count = len(messages)
    entries: list[IndexEntry] = []
    pending: list[EnrichedMessage] = []

    for i, message in enumerate(messages):
        if i == 0 or i == count - 2:
            entries.extend(_flush(pending))
            pending = []
            entries.append(IndexMessage(message=message, open=message.unread or count == 1))
        elif message.unread or i >= count - 1:
            entries.extend(_flush(pending))
            pending = []
            entries.append(IndexMessage(message=message, open=True, current=i >= count - 1))
        else:
            pending.append(message)

    entries.extend(_flush(pending))
    return entries


def flatten_index(entries: Sequence[IndexEntry]) -> list[EnrichedMessage]:
    """Messages of the index in display order, groups expanded."""
    flat: list[EnrichedMessage] = []
    for entry in entries:
        if isinstance(entry, IndexGroup):
            flat.extend(entry.messages)
        else:
            flat.append(entry.message)
    return flat
