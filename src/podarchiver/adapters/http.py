"""httpx-backed DataFetcher and Downloader adapters.

Both adapters wrap an `httpx.AsyncClient` and map its failures onto the
capability error taxonomy:

- `httpx.TimeoutException` → `TimedOut`
- any other `httpx.RequestError` → `TransportError`
- a non-2xx response → `TransportError` carrying the status code

Task cancellation is not translated: `asyncio.CancelledError` propagates
unchanged, and `HttpDownloader` removes the partially written file first.
"""

from __future__ import annotations

import asyncio
import logging
import tempfile
from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager
from pathlib import Path, PurePosixPath
from typing import Any
from urllib.parse import urlsplit

import httpx

from podarchiver.adapters.name_generators import ULIDNameGenerator
from podarchiver.interfaces.downloader import Downloader, DownloadRequest
from podarchiver.interfaces.errors import TimedOut, TransportError
from podarchiver.interfaces.fetcher import DataFetcher, ResponseMetadata
from podarchiver.interfaces.name_generator import NameGenerator

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0
CHUNK_SIZE = 1024 * 1024
USER_AGENT = "podarchiver"


def _metadata(locator: str, response: httpx.Response) -> ResponseMetadata:
    return ResponseMetadata(
        locator=locator,
        status_code=response.status_code,
        headers=dict(response.headers.items()),
    )


def _check_status(locator: str, response: httpx.Response) -> None:
    if response.is_error:
        raise TransportError(
            locator,
            f"HTTP {response.status_code}",
            status_code=response.status_code,
        )


class _HttpAdapter:
    """Shared client ownership and error mapping."""

    def __init__(
        self,
        *,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=timeout_seconds,
            headers={"User-Agent": USER_AGENT},
            follow_redirects=True,
            transport=transport,
        )

    @property
    def closed(self) -> bool:
        """Whether the underlying client has been closed."""
        return self._client.is_closed

    async def aclose(self) -> None:
        """Close the underlying client when owned."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *_: object) -> None:
        await self.aclose()

    @asynccontextmanager
    async def _stream(
        self,
        locator: str,
        headers: Mapping[str, str] | None = None,
        timeout_seconds: float | None = None,
    ) -> AsyncIterator[httpx.Response]:
        """Open a streamed GET, mapping httpx failures to capability errors."""
        kwargs: dict[str, Any] = {}
        if timeout_seconds is not None:
            kwargs["timeout"] = timeout_seconds
        try:
            async with self._client.stream(
                "GET", locator, headers=dict(headers or {}), **kwargs
            ) as response:
                _check_status(locator, response)
                yield response
        except httpx.TimeoutException as exc:
            logger.warning("Timed out retrieving %s", locator)
            raise TimedOut(locator) from exc
        except httpx.RequestError as exc:
            logger.warning("Transport failure retrieving %s: %s", locator, exc)
            raise TransportError(locator, str(exc) or type(exc).__name__) from exc


class HttpDataFetcher(_HttpAdapter, DataFetcher):
    """DataFetcher that reads the whole response body into memory."""

    async def fetch(self, locator: str) -> tuple[bytes, ResponseMetadata]:
        logger.debug("Fetching %s", locator)
        async with self._stream(locator) as response:
            body = await response.aread()
            metadata = _metadata(locator, response)
        logger.debug("Fetched %d bytes from %s", len(body), locator)
        return body, metadata


class HttpDownloader(_HttpAdapter, Downloader):
    """Downloader that streams responses into files under `download_dir`.

    Files are named `<name><suffix>`, where the name comes from the
    `NameGenerator` (ULIDs by default) and the suffix is taken from the
    locator's path.

    Args:
        download_dir: Directory for downloaded files; created if missing.
            Defaults to `<system temp>/podarchiver`.
        name_generator: Source of unique file stems.
        timeout_seconds, transport, client: See `_HttpAdapter`.
    """

    def __init__(
        self,
        download_dir: Path | None = None,
        *,
        name_generator: NameGenerator | None = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(
            timeout_seconds=timeout_seconds, transport=transport, client=client
        )
        self._download_dir = download_dir or Path(tempfile.gettempdir()) / "podarchiver"
        self._names = name_generator or ULIDNameGenerator()

    @property
    def download_dir(self) -> Path:
        return self._download_dir

    async def download(self, locator: str) -> tuple[Path, ResponseMetadata]:
        return await self.download_request(DownloadRequest(locator=locator))

    async def download_request(
        self, request: DownloadRequest
    ) -> tuple[Path, ResponseMetadata]:
        await asyncio.to_thread(self._download_dir.mkdir, parents=True, exist_ok=True)
        suffix = PurePosixPath(urlsplit(request.locator).path).suffix
        target = self._download_dir / f"{self._names.new_name()}{suffix}"

        logger.debug("Downloading %s to %s", request.locator, target)
        fp = None
        try:
            async with self._stream(
                request.locator, request.headers, request.timeout_seconds
            ) as response:
                fp = await asyncio.to_thread(target.open, "wb")
                async for chunk in response.aiter_bytes(CHUNK_SIZE):
                    await asyncio.to_thread(fp.write, chunk)
                await asyncio.to_thread(fp.close)
                metadata = _metadata(request.locator, response)
        except BaseException:
            # no awaits here: cleanup must also run for a cancelled task
            if fp is not None:
                fp.close()
            target.unlink(missing_ok=True)
            raise

        size = (await asyncio.to_thread(target.stat)).st_size
        logger.info("Downloaded %s (%d bytes)", request.locator, size)
        return target, metadata
