"""Interaction recorder shared by the capability test doubles.

Every double appends a `CapabilityCall` here *before* it answers, so a test
can tell "was this called, in which order, with what" apart from "what did it
return".

Ordering
--------
`record()` assigns the sequence number and appends inside one critical
section guarded by a `threading.Lock`. The lock is never held across an
`await`, so it is safe both for asyncio tasks on one loop and for OS threads.
Two calls where one is issued after the other returned therefore appear in
that order; truly concurrent calls appear in whichever order they won the
lock, and that order never changes afterwards.

Typical usage
-------------
    recorder = InteractionRecorder()
    fetcher = FakeDataFetcher(recorder, response=(b"{}", meta))
    ...
    assert recorder.methods() == [(Capability.FETCHER, "fetch")]
"""

from __future__ import annotations

import itertools
import threading
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

__all__ = ["Capability", "CapabilityCall", "InteractionRecorder"]


class Capability(Enum):
    """The capabilities whose calls are recorded."""

    FETCHER = "DataFetcher"
    DOWNLOADER = "Downloader"
    MOVER = "FileMover"
    ATTRIBUTES = "FileAttributes"


@dataclass(frozen=True)
class CapabilityCall:
    """One recorded invocation of a capability method."""

    sequence: int
    capability: Capability
    method: str
    args: tuple[Any, ...]


class InteractionRecorder:
    """Append-only, thread-safe log of capability invocations."""

    def __init__(self) -> None:
        self._calls: list[CapabilityCall] = []
        self._sequence = itertools.count(1)
        self._lock = threading.Lock()

    def record(
        self, capability: Capability, method: str, *args: Any
    ) -> CapabilityCall:
        """Append a call to the log and return it."""
        with self._lock:
            call = CapabilityCall(
                sequence=next(self._sequence),
                capability=capability,
                method=method,
                args=args,
            )
            self._calls.append(call)
        return call

    def snapshot(self) -> tuple[CapabilityCall, ...]:
        """Return the calls recorded so far, oldest first."""
        with self._lock:
            return tuple(self._calls)

    # --- queries ---

    @property
    def count(self) -> int:
        with self._lock:
            return len(self._calls)

    def nth(self, index: int) -> CapabilityCall:
        """Return the call at `index` (0-based; negative indexes allowed).

        Raises:
            IndexError: If fewer calls were recorded.
        """
        with self._lock:
            return self._calls[index]

    def calls_for(self, capability: Capability) -> list[CapabilityCall]:
        """Return the calls made against one capability, oldest first."""
        return [call for call in self.snapshot() if call.capability is capability]

    def methods(self) -> list[tuple[Capability, str]]:
        """Return `(capability, method)` for every call, oldest first."""
        return [(call.capability, call.method) for call in self.snapshot()]

    def __len__(self) -> int:
        return self.count

    def __getitem__(self, index: int) -> CapabilityCall:
        return self.nth(index)

    def __iter__(self) -> Iterator[CapabilityCall]:
        return iter(self.snapshot())
