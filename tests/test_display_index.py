"""Tests for the display index: which messages are shown, opened, grouped."""

import os
import random
import sys
import unittest
from datetime import datetime, timedelta
from pathlib import Path

os.environ["DATABASE_URL"] = "sqlite:///:memory:"
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from src.models.thread import EnrichedMessage, IndexGroup, IndexMessage
from src.thread.display_index import build_index, flatten_index


def _message(i: int, unread: bool = False) -> EnrichedMessage:
    return EnrichedMessage(
        id=i,
        thread_id=1,
        message_id=f"<m{i}@abc.org>",
        folder_id=1,
        seen=not unread,
        unread=unread,
        date_recv=datetime(2026, 1, 1) + timedelta(minutes=i),
    )


def _thread(*unread_flags: bool) -> list[EnrichedMessage]:
    return [_message(i, unread) for i, unread in enumerate(unread_flags)]


def _shape(entries) -> list[str]:
    """Compact layout: "G<n>" for groups, "M"/"O"/"C" for closed, open, current messages."""
    shape = []
    for entry in entries:
        if isinstance(entry, IndexGroup):
            shape.append(f"G{entry.count}")
        elif entry.current:
            shape.append("C")
        else:
            shape.append("O" if entry.open else "M")
    return shape


class TestBuildIndex(unittest.TestCase):
    def test_empty(self):
        self.assertEqual(build_index([]), [])

    def test_single_message_is_open(self):
        entries = build_index(_thread(False))
        self.assertEqual(len(entries), 1)
        self.assertIsInstance(entries[0], IndexMessage)
        self.assertTrue(entries[0].open)
        self.assertFalse(entries[0].current)

    def test_two_unread(self):
        entries = build_index(_thread(True, True))
        self.assertEqual(len(entries), 2)
        self.assertTrue(all(isinstance(e, IndexMessage) and e.open for e in entries))
        self.assertFalse(entries[0].current)
        self.assertTrue(entries[1].current)

    def test_two_read(self):
        self.assertEqual(_shape(build_index(_thread(False, False))), ["M", "C"])

    def test_three_read_has_no_group(self):
        self.assertEqual(_shape(build_index(_thread(False, False, False))), ["M", "M", "C"])

    def test_middle_run_collapses(self):
        entries = build_index(_thread(*[False] * 6))
        self.assertEqual(_shape(entries), ["M", "G3", "M", "C"])
        self.assertEqual([m.id for m in entries[1].messages], [1, 2, 3])

    def test_unread_splits_groups(self):
        entries = build_index(_thread(False, False, True, False, False, False, False))
        self.assertEqual(_shape(entries), ["M", "G1", "O", "G2", "M", "C"])

    def test_unread_first_and_penultimate_open(self):
        entries = build_index(_thread(True, False, False, True, False))
        self.assertEqual(_shape(entries), ["O", "G2", "O", "C"])

    def test_group_entries_are_typed(self):
        entries = build_index(_thread(*[False] * 5))
        self.assertEqual([e.type for e in entries], ["message", "group", "message", "message"])


class TestIndexProperties(unittest.TestCase):
    """Randomized read/unread patterns over thread lengths 1-50."""

    def test_random_threads(self):
        rng = random.Random(20260718)
        for _ in range(300):
            count = rng.randint(1, 50)
            messages = _thread(*[rng.random() < 0.3 for _ in range(count)])
            entries = build_index(messages)

            # Nothing lost, duplicated or reordered
            self.assertEqual(flatten_index(entries), messages)

            groups = [e for e in entries if isinstance(e, IndexGroup)]
            singles = [e for e in entries if isinstance(e, IndexMessage)]
            for group in groups:
                self.assertGreater(group.count, 0)
                self.assertEqual(group.count, len(group.messages))
                self.assertTrue(all(not m.unread for m in group.messages))
            for a, b in zip(entries, entries[1:]):
                self.assertFalse(isinstance(a, IndexGroup) and isinstance(b, IndexGroup))

            self.assertIsInstance(entries[0], IndexMessage)
            self.assertEqual(entries[0].message, messages[0])
            self.assertEqual(flatten_index(entries[-1:]), [messages[-1]])
            self.assertTrue(all(e.open for e in singles if e.message.unread))
            self.assertEqual(sum(e.current for e in singles), 0 if count == 1 else 1)

    def test_deterministic(self):
        messages = _thread(False, True, False, False, False, True, False, False)
        self.assertEqual(build_index(messages), build_index(messages))


if __name__ == "__main__":
    unittest.main()
