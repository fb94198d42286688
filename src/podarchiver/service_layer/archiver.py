"""Podcast archiving use case.

`PodcastArchiver` depends only on the four capability interfaces. Each one is
a constructor parameter that defaults to a fresh production adapter, so the
production path needs no wiring while tests pass in-memory doubles:

    fakes = build_fakes(fetch=..., download=...)
    archiver = PodcastArchiver(archive_dir, **fakes.as_kwargs())
    asyncio.run(archiver.archive(feed_url))
    assert fakes.mover.moves == [...]

Flow of `archive(feed_locator)`:

1. fetch and parse the feed;
2. for every episode, concurrently (bounded by `max_concurrency`): download
   it, move the download to `<archive_dir>/<title><suffix>`, and set the
   file's creation date to the episode's publication date.

Failures are not retried or wrapped: the first error propagates unchanged,
and the episodes still in flight are cancelled before `archive` returns.

Adapters the archiver builds itself own network clients; close them with
`await archiver.aclose()` or by using the archiver as an async context
manager. Injected capabilities are left to their owner.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import PurePath, PurePosixPath
from urllib.parse import urlsplit

from podarchiver.adapters.filesystem import LocalFileAttributes, LocalFileMover
from podarchiver.adapters.http import HttpDataFetcher, HttpDownloader
from podarchiver.domain.feed import Episode, parse_feed
from podarchiver.interfaces.attributes import AttributeKey, FileAttributes
from podarchiver.interfaces.downloader import Downloader
from podarchiver.interfaces.fetcher import DataFetcher
from podarchiver.interfaces.mover import FileMover

logger = logging.getLogger(__name__)

DEFAULT_SUFFIX = ".mp3"
DEFAULT_MAX_CONCURRENCY = 4
_UNSAFE_FILENAME_CHARS = str.maketrans({"/": "-", "\\": "-", "\0": ""})


@dataclass(frozen=True)
class ArchivedEpisode:
    """An episode and the path it was archived to."""

    episode: Episode
    path: PurePath


def archive_filename(episode: Episode) -> str:
    """Return the archive file name for `episode`: its title plus suffix.

    The suffix comes from the episode locator's path (`.mp3` if it has none);
    path separators in the title are replaced by dashes.
    """
    suffix = PurePosixPath(urlsplit(episode.locator).path).suffix or DEFAULT_SUFFIX
    title = episode.title.translate(_UNSAFE_FILENAME_CHARS).strip()
    return f"{title}{suffix}"


class PodcastArchiver:
    """Archive every episode of a podcast feed into a directory.

    Args:
        archive_dir: Directory that receives the archived episodes.
        fetcher: Retrieves the feed document.
        downloader: Downloads episodes to temporary files.
        mover: Moves downloads into `archive_dir`.
        attributes: Stamps archived files with their publication date.
        max_concurrency: Maximum number of episodes processed at once.
    """

    def __init__(  # pylint: disable=too-many-arguments
        self,
        archive_dir: PurePath,
        *,
        fetcher: DataFetcher | None = None,
        downloader: Downloader | None = None,
        mover: FileMover | None = None,
        attributes: FileAttributes | None = None,
        max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
    ) -> None:
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        self.archive_dir = archive_dir
        self._owned: list[HttpDataFetcher | HttpDownloader] = []
        if fetcher is None:
            fetcher = HttpDataFetcher()
            self._owned.append(fetcher)
        if downloader is None:
            downloader = HttpDownloader()
            self._owned.append(downloader)
        self.fetcher = fetcher
        self.downloader = downloader
        self.mover = mover if mover is not None else LocalFileMover()
        self.attributes = attributes if attributes is not None else LocalFileAttributes()
        self._max_concurrency = max_concurrency

    async def aclose(self) -> None:
        """Close the default adapters this archiver created."""
        for adapter in self._owned:
            await adapter.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *_: object) -> None:
        await self.aclose()

    async def archive(self, feed_locator: str) -> list[ArchivedEpisode]:
        """Archive all episodes of the feed at `feed_locator`.

        Returns:
            list[ArchivedEpisode]: One entry per episode, in feed order.

        Raises:
            TransportError: If the feed or an episode cannot be retrieved.
            FeedFormatError: If the feed cannot be parsed.
            MoveError: If a download cannot be moved into the archive.
            NotFoundError: If the archived file has vanished before it is
                stamped.
        """
        logger.info("Fetching feed %s", feed_locator)
        data, _ = await self.fetcher.fetch(feed_locator)
        feed = parse_feed(data)
        logger.info(
            "Feed %s lists %d episode(s)", feed.title or feed_locator, len(feed.episodes)
        )

        semaphore = asyncio.Semaphore(self._max_concurrency)

        async def bounded(episode: Episode) -> ArchivedEpisode:
            async with semaphore:
                return await self.archive_episode(episode)

        try:
            async with asyncio.TaskGroup() as group:
                tasks = [group.create_task(bounded(e)) for e in feed.episodes]
        except BaseExceptionGroup as failures:
            first = failures.exceptions[0]
        else:
            return [task.result() for task in tasks]
        # outside the handler: the error keeps its own cause and context
        raise first

    async def archive_episode(self, episode: Episode) -> ArchivedEpisode:
        """Download, move and stamp a single episode."""
        download_path, _ = await self.downloader.download(episode.locator)
        destination = self.archive_dir / archive_filename(episode)

        await self.mover.move(download_path, destination)
        await self.attributes.set_attributes(
            {AttributeKey.CREATION_DATE: episode.published}, destination
        )
        logger.info("Archived '%s' to %s", episode.title, destination)
        return ArchivedEpisode(episode=episode, path=destination)
