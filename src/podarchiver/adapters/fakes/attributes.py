"""In-memory FileAttributes test double."""

from __future__ import annotations

import threading
from collections.abc import Mapping
from pathlib import PurePath
from typing import Any

from podarchiver.interfaces.attributes import AttributeKey, FileAttributes
from podarchiver.interfaces.errors import NotFoundError

from .recorder import Capability, InteractionRecorder


class FakeFileAttributes(FileAttributes):
    """FileAttributes backed by an in-memory table.

    Semantics
    ---------
    - **Strict reads**: `get_attributes` on a path that was never written (and
      not seeded) raises `NotFoundError`; it never returns an empty mapping.
    - **Partial writes**: `set_attributes` merges into the existing entry,
      overwriting only the keys it is given.
    - **Thread-safety**: the table is updated under a lock, so concurrent
      partial writes to one path never lose each other's keys.

    Args:
        recorder: The shared interaction recorder.
        seed: Optional initial table, for tests that want files to "exist"
            with attributes before the scenario starts.
    """

    def __init__(
        self,
        recorder: InteractionRecorder,
        seed: Mapping[PurePath, Mapping[AttributeKey, Any]] | None = None,
    ) -> None:
        self.recorder = recorder
        self._table: dict[PurePath, dict[AttributeKey, Any]] = {
            path: dict(attrs) for path, attrs in (seed or {}).items()
        }
        self._lock = threading.Lock()

    @property
    def table(self) -> dict[PurePath, dict[AttributeKey, Any]]:
        """A copy of the attribute table, for assertions."""
        with self._lock:
            return {path: dict(attrs) for path, attrs in self._table.items()}

    async def set_attributes(
        self, attributes: Mapping[AttributeKey, Any], path: PurePath
    ) -> None:
        attributes = dict(attributes)
        self.recorder.record(Capability.ATTRIBUTES, "set_attributes", attributes, path)
        with self._lock:
            self._table.setdefault(path, {}).update(attributes)

    async def get_attributes(self, path: PurePath) -> dict[AttributeKey, Any]:
        self.recorder.record(Capability.ATTRIBUTES, "get_attributes", path)
        with self._lock:
            try:
                return dict(self._table[path])
            except KeyError:
                raise NotFoundError(path) from None
