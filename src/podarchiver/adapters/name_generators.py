"""Temporary file name generators for downloads."""

import threading

from ulid import monotonic

from podarchiver.interfaces.name_generator import NameGenerator

# pylint: disable=too-few-public-methods


class ULIDNameGenerator(NameGenerator):
    """Thread-safe monotonic ULID names.

    ULIDs sort by creation time, so a download directory lists files in the
    order they were started.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def new_name(self) -> str:
        """Generate a new ULID (serialized across threads)."""
        with self._lock:
            return str(monotonic.new())


class SequentialNameGenerator(NameGenerator):
    """Sequential, zero-padded names with an optional prefix.

    Note:
        Deterministic; intended for tests and demos.
    """

    def __init__(self, prefix: str = "download-", width: int = 6) -> None:
        self._counter = 0
        self._prefix = prefix
        self._width = width
        self._lock = threading.Lock()

    def new_name(self) -> str:
        with self._lock:
            self._counter += 1
            return f"{self._prefix}{self._counter:0{self._width}d}"
