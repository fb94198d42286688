"""In-memory Downloader test double."""

from __future__ import annotations

from pathlib import Path

from podarchiver.interfaces.downloader import Downloader, DownloadRequest
from podarchiver.interfaces.fetcher import ResponseMetadata

from .canned import NOT_CONFIGURED, Canned, resolve
from .recorder import Capability, InteractionRecorder


class FakeDownloader(Downloader):
    """Downloader that records each call and answers with canned paths.

    Nothing is written to disk; the returned path is whatever the strategy
    says. The two variants are configured independently, and a variant left
    unconfigured raises `UnimplementedPathError` when called.

    Args:
        recorder: The shared interaction recorder.
        response: Strategy for `download(locator)`.
        request_response: Strategy for `download_request(request)`; it is
            called with the `DownloadRequest`.
    """

    def __init__(
        self,
        recorder: InteractionRecorder,
        response: Canned = NOT_CONFIGURED,
        request_response: Canned = NOT_CONFIGURED,
    ) -> None:
        self.recorder = recorder
        self._response = response
        self._request_response = request_response

    async def download(self, locator: str) -> tuple[Path, ResponseMetadata]:
        self.recorder.record(Capability.DOWNLOADER, "download", locator)
        return await resolve(
            self._response, Capability.DOWNLOADER.value, "download", locator
        )

    async def download_request(
        self, request: DownloadRequest
    ) -> tuple[Path, ResponseMetadata]:
        self.recorder.record(Capability.DOWNLOADER, "download_request", request)
        return await resolve(
            self._request_response,
            Capability.DOWNLOADER.value,
            "download_request",
            request,
        )
