"""Downloader interface definitions."""

from __future__ import annotations

import abc
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .fetcher import ResponseMetadata


@dataclass(frozen=True)
class DownloadRequest:
    """A fully specified download request.

    `timeout_seconds=None` means the downloader's own default applies.
    """

    locator: str
    headers: Mapping[str, str] = field(default_factory=dict)
    timeout_seconds: float | None = None


class Downloader(abc.ABC):
    """Contract for materializing a remote resource as a local file."""

    @abc.abstractmethod
    async def download(self, locator: str) -> tuple[Path, ResponseMetadata]:
        """Download the resource at `locator` to a local temporary file.

        Args:
            locator (str): Absolute URL of the resource.

        Returns:
            tuple[Path, ResponseMetadata]: Where the file was written, and the
            response metadata.

        Raises:
            TransportError: If the resource could not be retrieved.
        """

    @abc.abstractmethod
    async def download_request(
        self, request: DownloadRequest
    ) -> tuple[Path, ResponseMetadata]:
        """Download using a full request (headers, timeout).

        Same contract as `download`. Test doubles that are not configured for
        this variant raise `UnimplementedPathError` instead of answering with
        a default.
        """
