"""Pydantic models for the thread view."""

from src.models.message import Folder, RawMessage
from src.models.thread import (
    EnrichedMessage,
    IndexEntry,
    IndexGroup,
    IndexMessage,
    Thread,
)

__all__ = [
    "Folder",
    "RawMessage",
    "EnrichedMessage",
    "IndexEntry",
    "IndexGroup",
    "IndexMessage",
    "Thread",
]
