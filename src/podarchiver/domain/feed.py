"""Podcast feed model and JSON feed parser.

The archiver reads feeds in a small JSON format::

    {
      "title": "Some Podcast",
      "episodes": [
        {
          "url": "https://some.podcast/some/episode.mp3",
          "title": "The very first episode ever!",
          "published": "Mon, 10 Jan 2025 13:00:00 GMT"
        }
      ]
    }

`published` is an RFC 5322 date (as used by RSS `pubDate`). The weekday name
is not cross-checked against the date.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any


class FeedFormatError(ValueError):
    """Raised when a feed document cannot be parsed."""


@dataclass(frozen=True)
class Episode:
    """One downloadable episode of a feed."""

    locator: str
    title: str
    published: datetime


@dataclass(frozen=True)
class Feed:
    """A parsed podcast feed."""

    title: str | None
    episodes: tuple[Episode, ...]


def parse_published(value: str) -> datetime:
    """Parse an RFC 5322 date into a timezone-aware UTC datetime.

    Dates without a zone (or with `-0000`) are taken to be UTC.

    Raises:
        FeedFormatError: If `value` is not a valid date.
    """
    try:
        parsed = parsedate_to_datetime(value)
    except (TypeError, ValueError) as exc:
        raise FeedFormatError(f"Invalid publication date: {value!r}") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _require_str(entry: dict[str, Any], key: str, index: int) -> str:
    value = entry.get(key)
    if not isinstance(value, str) or not value.strip():
        raise FeedFormatError(f"Episode {index} is missing a non-empty '{key}'.")
    return value


def parse_feed(data: bytes) -> Feed:
    """Parse a JSON feed document.

    Args:
        data: The raw feed bytes (UTF-8 JSON).

    Returns:
        Feed: The feed, with episodes in document order.

    Raises:
        FeedFormatError: If the document is not valid JSON or an episode is
            malformed.
    """
    try:
        document = json.loads(data)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise FeedFormatError(f"Feed is not valid JSON: {exc}") from exc

    if not isinstance(document, dict):
        raise FeedFormatError("Feed must be a JSON object.")
    entries = document.get("episodes", [])
    if not isinstance(entries, list):
        raise FeedFormatError("'episodes' must be a list.")

    episodes = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise FeedFormatError(f"Episode {index} must be a JSON object.")
        episodes.append(
            Episode(
                locator=_require_str(entry, "url", index),
                title=_require_str(entry, "title", index),
                published=parse_published(_require_str(entry, "published", index)),
            )
        )

    title = document.get("title")
    return Feed(title=title if isinstance(title, str) else None, episodes=tuple(episodes))
