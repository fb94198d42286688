"""Configuration utilities for PODARCHIVER.

This module centralizes the environment variables the CLI and composition
root read. Precedence everywhere is: explicit argument > environment >
built-in default.
"""

import math
import os
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlsplit, urlunsplit

FEED_URL_ENV = "PODARCHIVER_FEED_URL"  # pragma: no mutate
ARCHIVE_DIR_ENV = "PODARCHIVER_ARCHIVE_DIR"  # pragma: no mutate
BASE_URL_ENV = "PODARCHIVER_BASE_URL"  # pragma: no mutate
TIMEOUT_ENV = "PODARCHIVER_TIMEOUT"  # pragma: no mutate

DEFAULT_TIMEOUT_SECONDS = 30.0


class FeedUrlNotSetError(Exception):
    """Raised when no feed URL was given and PODARCHIVER_FEED_URL is not set."""


@dataclass(frozen=True)
class Settings:
    """Resolved settings for one archiving run."""

    feed_url: str
    archive_dir: Path
    timeout_seconds: float


def get_feed_url(feed_url: str | None = None) -> str:
    """Return the feed URL, falling back to the environment.

    If `PODARCHIVER_BASE_URL` is set, the scheme and host of the feed URL are
    replaced with those of the base URL (to point the archiver at a mirror
    or a local test server).

    Raises:
        FeedUrlNotSetError: If neither `feed_url` nor `PODARCHIVER_FEED_URL`
            is set.
    """
    if not (url := feed_url or os.environ.get(FEED_URL_ENV)):
        raise FeedUrlNotSetError
    if base_url := os.environ.get(BASE_URL_ENV):
        url = rebase_url(url, base_url)
    return url


def rebase_url(url: str, base_url: str) -> str:
    """Swap the scheme and network location of `url` for those of `base_url`.

    Examples:
        >>> rebase_url("https://some.podcast/feed.json", "http://localhost:8000")
        'http://localhost:8000/feed.json'
    """
    parts = urlsplit(url)
    base = urlsplit(base_url)
    return urlunsplit((base.scheme, base.netloc, parts.path, parts.query, parts.fragment))


def get_archive_dir(archive_dir: Path | None = None) -> Path:
    """Return the archive directory (default `~/Podcasts`)."""
    if archive_dir is not None:
        return archive_dir
    if env_dir := os.environ.get(ARCHIVE_DIR_ENV):
        return Path(env_dir).expanduser()
    return Path.home() / "Podcasts"


def get_timeout(timeout_seconds: float | None = None) -> float:
    """Return the network timeout in seconds.

    Raises:
        ValueError: If `PODARCHIVER_TIMEOUT` is not a positive, finite number.
    """
    if timeout_seconds is not None:
        return timeout_seconds
    if not (raw := os.environ.get(TIMEOUT_ENV)):
        return DEFAULT_TIMEOUT_SECONDS
    value = float(raw)
    if not math.isfinite(value) or value <= 0:
        raise ValueError(
            f"{TIMEOUT_ENV} must be a positive finite number, got {raw!r}"
        )
    return value


def load_settings(
    feed_url: str | None = None,
    archive_dir: Path | None = None,
    timeout_seconds: float | None = None,
) -> Settings:
    """Resolve all settings for a run."""
    return Settings(
        feed_url=get_feed_url(feed_url),
        archive_dir=get_archive_dir(archive_dir),
        timeout_seconds=get_timeout(timeout_seconds),
    )
