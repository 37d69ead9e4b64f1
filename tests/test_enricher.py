"""Tests for per-message display fields: addresses, dates, avatar, enrich()."""

import hashlib
import os
import sys
import unittest
from datetime import datetime, timedelta, timezone
from pathlib import Path

os.environ["DATABASE_URL"] = "sqlite:///:memory:"
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from src.models.message import RawMessage
from src.models.thread import EnrichedMessage
from src.thread.enricher import (
    avatar_url,
    date_labels,
    enrich,
    recipient_names,
    split_name_and_email,
)


class TestSplitNameAndEmail(unittest.TestCase):
    def test_name_and_address(self):
        self.assertEqual(split_name_and_email("John D. <john@abc.org>"), ("John D.", "<john@abc.org>"))

    def test_bare_address_is_the_name(self):
        self.assertEqual(split_name_and_email("jane@xyz.org"), ("jane@xyz.org", ""))

    def test_missing_closing_bracket(self):
        self.assertEqual(split_name_and_email("Bob <bob@x.org"), ("Bob", "<bob@x.org>"))

    def test_stray_closing_bracket(self):
        self.assertEqual(split_name_and_email(" jane@xyz.org> "), ("jane@xyz.org", ""))

    def test_address_only_in_brackets(self):
        self.assertEqual(split_name_and_email("<ops@xyz.org>"), ("", "<ops@xyz.org>"))

    def test_empty(self):
        self.assertEqual(split_name_and_email(""), ("", ""))

    def test_recipient_names(self):
        self.assertEqual(
            recipient_names("Jane Roe <jane@xyz.org>, ops@xyz.org,John D. <john@abc.org>"),
            "Jane Roe, ops@xyz.org, John D.",
        )


class TestDateLabels(unittest.TestCase):
    NOW = datetime(2026, 7, 18, 15, 30)

    def test_today_shows_time(self):
        absolute, contextual = date_labels(datetime(2026, 7, 18, 9, 5), self.NOW)
        self.assertEqual(contextual, "09:05")
        self.assertEqual(absolute, "18 July 2026 09:05")

    def test_ten_days_ago_same_year(self):
        _, contextual = date_labels(self.NOW - timedelta(days=10), self.NOW)
        self.assertEqual(contextual, "8 Jul")

    def test_200_days_ago_previous_year(self):
        received = self.NOW - timedelta(days=200)
        self.assertEqual(received.year, 2025)
        _, contextual = date_labels(received, self.NOW)
        self.assertEqual(contextual, "30/12/2025")

    def test_full_date_pads_month_not_day(self):
        _, contextual = date_labels(datetime(2025, 3, 4, 8, 0), self.NOW)
        self.assertEqual(contextual, "4/03/2025")

    def test_previous_year_but_recent(self):
        """Year mismatch alone is not enough for the full date."""
        now = datetime(2026, 1, 5, 12, 0)
        _, contextual = date_labels(datetime(2025, 12, 20, 10, 0), now)
        self.assertEqual(contextual, "20 Dec")

    def test_same_year_but_old(self):
        now = datetime(2026, 12, 30, 12, 0)
        _, contextual = date_labels(datetime(2026, 1, 3, 10, 0), now)
        self.assertEqual(contextual, "3 Jan")

    def test_calendar_day_not_elapsed_hours(self):
        """A message from 31 minutes ago, but yesterday, is not shown as a time."""
        now = datetime(2026, 7, 18, 0, 30)
        _, contextual = date_labels(datetime(2026, 7, 17, 23, 59), now)
        self.assertEqual(contextual, "17 Jul")

    def test_timezone_aware_inputs(self):
        now = datetime(2026, 7, 18, 10, 0, tzinfo=timezone.utc)
        received = datetime(2026, 7, 18, 11, 30, tzinfo=timezone(timedelta(hours=2)))
        absolute, contextual = date_labels(received, now)
        self.assertEqual(contextual, "09:30")
        self.assertEqual(absolute, "18 July 2026 09:30")


class TestAvatarUrl(unittest.TestCase):
    def test_hash_of_normalized_address(self):
        expected = hashlib.md5(b"john@abc.org").hexdigest()
        self.assertEqual(
            avatar_url("<John@ABC.org> "),
            f"https://www.gravatar.com/avatar/{expected}?d=identicon",
        )
        self.assertEqual(avatar_url("john@abc.org"), avatar_url("<john@abc.org>"))

    def test_empty_address_is_still_a_url(self):
        self.assertTrue(avatar_url("").startswith("https://www.gravatar.com/avatar/"))


def _raw(**overrides) -> RawMessage:
    data = {
        "id": 1,
        "account_id": 1,
        "thread_id": 10,
        "message_id": "<m1@abc.org>",
        "folder_id": 2,
        "seen": False,
        "subject": "Lunch",
        "from": "John D. <john@abc.org>",
        "to": "Jane Roe <jane@xyz.org>, ops@xyz.org",
        "date_recv": datetime(2026, 7, 18, 12, 0),
        "text_plain": "Hello <b>Jane</b>,\r\nsee example.com/menu\r\n> old quote",
    }
    data.update(overrides)
    return RawMessage.model_validate(data)


class TestEnrich(unittest.TestCase):
    NOW = datetime(2026, 7, 18, 15, 30)

    def test_derived_fields(self):
        raw = _raw()
        message = enrich(raw, self.NOW)
        self.assertIsInstance(message, EnrichedMessage)
        self.assertEqual(message.id, 1)
        self.assertEqual(message.from_, "John D. <john@abc.org>")
        self.assertEqual(message.from_name, "John D.")
        self.assertEqual(message.from_email, "<john@abc.org>")
        self.assertEqual(message.to_names, "Jane Roe, ops@xyz.org")
        self.assertEqual(message.date_string, "12:00")
        self.assertEqual(message.datetime_string, "18 July 2026 12:00")
        self.assertEqual(message.timestamp, int(raw.date_recv.timestamp()))
        self.assertEqual(message.avatar_url, avatar_url("<john@abc.org>"))
        self.assertTrue(message.unread)
        self.assertIn('<a href="example.com/menu"', message.body)
        self.assertIn("&lt;b&gt;Jane&lt;/b&gt;", message.body)
        self.assertTrue(message.snippet.startswith("Hello Jane,"))
        self.assertEqual(message.snippet_unquoted, "Hello Jane,see example.com/menu")

    def test_raw_message_is_not_modified(self):
        raw = _raw()
        before = raw.model_dump()
        enrich(raw, self.NOW)
        self.assertEqual(raw.model_dump(), before)
        self.assertFalse(hasattr(raw, "from_name"))

    def test_seen_message_is_read(self):
        self.assertFalse(enrich(_raw(seen=True), self.NOW).unread)

    def test_empty_body(self):
        message = enrich(_raw(text_plain=""), self.NOW)
        self.assertEqual(message.body, "")
        self.assertEqual(message.snippet, "")
        self.assertEqual(message.snippet_unquoted, "")

    def test_snippet_is_bounded_for_multibyte_text(self):
        message = enrich(_raw(text_plain="é漢" * 400), self.NOW)
        self.assertEqual(len(message.snippet), 160)
        short = enrich(_raw(text_plain="é漢" * 400), self.NOW, snippet_length=25)
        self.assertEqual(len(short.snippet), 25)


if __name__ == "__main__":
    unittest.main()
