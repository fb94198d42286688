"""In-memory DataFetcher test double."""

from __future__ import annotations

from podarchiver.interfaces.fetcher import DataFetcher, ResponseMetadata

from .canned import NOT_CONFIGURED, Canned, resolve
from .recorder import Capability, InteractionRecorder


class FakeDataFetcher(DataFetcher):
    """DataFetcher that records each call and answers with a canned response.

    Args:
        recorder: The shared interaction recorder.
        response: Strategy producing `(bytes, ResponseMetadata)` for a
            locator. See `podarchiver.adapters.fakes.canned`.
    """

    def __init__(
        self, recorder: InteractionRecorder, response: Canned = NOT_CONFIGURED
    ) -> None:
        self.recorder = recorder
        self._response = response

    async def fetch(self, locator: str) -> tuple[bytes, ResponseMetadata]:
        self.recorder.record(Capability.FETCHER, "fetch", locator)
        return await resolve(
            self._response, Capability.FETCHER.value, "fetch", locator
        )
