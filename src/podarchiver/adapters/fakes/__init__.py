"""In-memory capability test doubles.

Each double implements one capability interface, records every call into a
shared `InteractionRecorder` before answering, and answers from a canned
strategy. `build_fakes()` wires a full set around one recorder.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import PurePath
from typing import Any

from podarchiver.interfaces.attributes import AttributeKey

from .attributes import FakeFileAttributes
from .canned import NOT_CONFIGURED, Canned, by_locator
from .downloader import FakeDownloader
from .fetcher import FakeDataFetcher
from .mover import FakeFileMover, MoveRecord
from .recorder import Capability, CapabilityCall, InteractionRecorder

__all__ = [
    "NOT_CONFIGURED",
    "Capability",
    "CapabilityCall",
    "FakeCapabilities",
    "FakeDataFetcher",
    "FakeDownloader",
    "FakeFileAttributes",
    "FakeFileMover",
    "InteractionRecorder",
    "MoveRecord",
    "build_fakes",
    "by_locator",
]


@dataclass(frozen=True)
class FakeCapabilities:
    """One scenario's worth of test doubles sharing a recorder."""

    recorder: InteractionRecorder
    fetcher: FakeDataFetcher
    downloader: FakeDownloader
    mover: FakeFileMover
    attributes: FakeFileAttributes

    def as_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for a capability-injected constructor."""
        return {
            "fetcher": self.fetcher,
            "downloader": self.downloader,
            "mover": self.mover,
            "attributes": self.attributes,
        }


def build_fakes(  # pylint: disable=too-many-arguments
    *,
    fetch: Canned = NOT_CONFIGURED,
    download: Canned = NOT_CONFIGURED,
    download_request: Canned = NOT_CONFIGURED,
    move_error: BaseException | None = None,
    attribute_seed: Mapping[PurePath, Mapping[AttributeKey, Any]] | None = None,
) -> FakeCapabilities:
    """Build a fresh recorder and the four doubles wired to it."""
    recorder = InteractionRecorder()
    return FakeCapabilities(
        recorder=recorder,
        fetcher=FakeDataFetcher(recorder, response=fetch),
        downloader=FakeDownloader(
            recorder, response=download, request_response=download_request
        ),
        mover=FakeFileMover(recorder, error=move_error),
        attributes=FakeFileAttributes(recorder, seed=attribute_seed),
    )
