"""Unit tests for the feed model and parser."""

from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest

from podarchiver.domain.feed import Episode, FeedFormatError, parse_feed, parse_published
from tests.fixtures.feeds import (
    EPISODE_PUBLISHED,
    EPISODE_TIMESTAMP,
    EPISODE_TITLE,
    EPISODE_URL,
    episode_entry,
    feed_bytes,
)
from tests.helpers.time_asserts import assert_strict_utc

# ============================================================================
#                               parse_published
# ============================================================================


def test_gmt_date_parses_to_utc():
    published = parse_published(EPISODE_PUBLISHED)
    assert published == datetime(2025, 1, 10, 13, 0, tzinfo=timezone.utc)
    assert published.timestamp() == EPISODE_TIMESTAMP
    assert_strict_utc(published)


def test_offset_dates_are_normalized_to_utc():
    published = parse_published("Fri, 10 Jan 2025 08:00:00 -0500")
    assert published.timestamp() == EPISODE_TIMESTAMP
    assert_strict_utc(published)


def test_dates_without_zone_are_taken_as_utc():
    published = parse_published("10 Jan 2025 13:00:00 -0000")
    assert published.timestamp() == EPISODE_TIMESTAMP
    assert_strict_utc(published)


@pytest.mark.parametrize("value", ["", "yesterday", "2025-01-10T13:00:00Z"])
def test_invalid_dates_raise(value: str):
    with pytest.raises(FeedFormatError, match="Invalid publication date"):
        parse_published(value)


# ============================================================================
#                               parse_feed
# ============================================================================


def test_single_episode_feed(single_episode_feed: bytes):
    feed = parse_feed(single_episode_feed)

    assert feed.title == "Some Podcast"
    assert feed.episodes == (
        Episode(
            locator=EPISODE_URL,
            title=EPISODE_TITLE,
            published=datetime(2025, 1, 10, 13, 0, tzinfo=timezone.utc),
        ),
    )


def test_episodes_keep_document_order(make_feed):
    feed = parse_feed(make_feed(3))
    assert [e.title for e in feed.episodes] == ["Episode 0", "Episode 1", "Episode 2"]


def test_feed_without_episodes_is_empty():
    assert parse_feed(b'{"title": "Quiet"}').episodes == ()


def test_feed_title_is_optional():
    assert parse_feed(json.dumps({"episodes": []}).encode()).title is None


@pytest.mark.parametrize(
    "data, message",
    [
        (b"not json", "not valid JSON"),
        (b"\xff\xfe\x00", "not valid JSON"),
        (b"[]", "must be a JSON object"),
        (b'{"episodes": {}}', "must be a list"),
        (b'{"episodes": ["x"]}', "Episode 0 must be a JSON object"),
    ],
)
def test_malformed_documents_raise(data: bytes, message: str):
    with pytest.raises(FeedFormatError, match=message):
        parse_feed(data)


@pytest.mark.parametrize("missing", ["url", "title", "published"])
def test_episode_fields_are_required(missing: str):
    entry = episode_entry()
    del entry[missing]
    with pytest.raises(FeedFormatError, match=f"missing a non-empty '{missing}'"):
        parse_feed(feed_bytes(entry))


def test_blank_fields_are_rejected():
    with pytest.raises(FeedFormatError, match="'title'"):
        parse_feed(feed_bytes(episode_entry(title="   ")))


def test_feed_format_error_is_a_value_error():
    assert issubclass(FeedFormatError, ValueError)
