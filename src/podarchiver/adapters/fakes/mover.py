"""In-memory FileMover test double.

`FakeFileMover` never touches the filesystem: it only remembers what it was
asked to move. Tests assert the *intent* ("move X to Y") here; whether a real
move works belongs to the `LocalFileMover` tests.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import PurePath

from podarchiver.interfaces.mover import FileMover

from .canned import resolve
from .recorder import Capability, InteractionRecorder


@dataclass(frozen=True)
class MoveRecord:
    """A requested move."""

    source: PurePath
    destination: PurePath


class FakeFileMover(FileMover):
    """FileMover that records requests in `moves` instead of moving files.

    Args:
        recorder: The shared interaction recorder.
        error: Optional failure to simulate: an exception instance raised on
            every call, or a callable `(source, destination)` that may raise.
            A failed move is recorded by the recorder but not added to `moves`.
    """

    def __init__(
        self,
        recorder: InteractionRecorder,
        error: BaseException | Callable[[PurePath, PurePath], None] | None = None,
    ) -> None:
        self.recorder = recorder
        self._error = error
        self._moves: list[MoveRecord] = []
        self._lock = threading.Lock()

    @property
    def moves(self) -> list[MoveRecord]:
        """Requested moves, oldest first (a copy)."""
        with self._lock:
            return list(self._moves)

    async def move(self, source: PurePath, destination: PurePath) -> None:
        self.recorder.record(Capability.MOVER, "move", source, destination)
        if self._error is not None:
            await resolve(
                self._error, Capability.MOVER.value, "move", source, destination
            )
        with self._lock:
            self._moves.append(MoveRecord(source=source, destination=destination))
