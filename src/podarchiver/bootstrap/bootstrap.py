"""Wire production adapters into the archiver."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from podarchiver import config
from podarchiver.adapters.filesystem import LocalFileAttributes, LocalFileMover
from podarchiver.adapters.http import HttpDataFetcher, HttpDownloader
from podarchiver.service_layer.archiver import ArchivedEpisode, PodcastArchiver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """The wired archiver plus the adapters whose resources need closing."""

    settings: config.Settings
    archiver: PodcastArchiver
    fetcher: HttpDataFetcher
    downloader: HttpDownloader

    async def aclose(self) -> None:
        """Close the HTTP clients."""
        await self.fetcher.aclose()
        await self.downloader.aclose()


def bootstrap(settings: config.Settings) -> AppContainer:
    """Build an archiver backed by httpx and the local filesystem."""
    fetcher = HttpDataFetcher(timeout_seconds=settings.timeout_seconds)
    downloader = HttpDownloader(timeout_seconds=settings.timeout_seconds)
    archiver = PodcastArchiver(
        settings.archive_dir,
        fetcher=fetcher,
        downloader=downloader,
        mover=LocalFileMover(),
        attributes=LocalFileAttributes(),
    )
    logger.debug(
        "Bootstrapped archiver: archive_dir=%s, timeout=%ss, downloads=%s",
        settings.archive_dir,
        settings.timeout_seconds,
        downloader.download_dir,
    )
    return AppContainer(
        settings=settings, archiver=archiver, fetcher=fetcher, downloader=downloader
    )


async def run_archive(
    feed_url: str | None = None,
    archive_dir: Path | None = None,
    timeout_seconds: float | None = None,
) -> list[ArchivedEpisode]:
    """Resolve settings, archive the feed, and release network resources.

    Raises:
        FeedUrlNotSetError: If no feed URL is given or configured.
    """
    settings = config.load_settings(feed_url, archive_dir, timeout_seconds)
    app = bootstrap(settings)
    try:
        return await app.archiver.archive(settings.feed_url)
    finally:
        await app.aclose()
