"""Local filesystem FileMover and FileAttributes adapters.

Blocking filesystem calls run in a worker thread (`asyncio.to_thread`) so a
slow disk never stalls the event loop.

Creation dates
--------------
POSIX has no portable way to *set* a file's birth time. `LocalFileAttributes`
therefore writes `CREATION_DATE` as the file's access/modification time
(unless `MODIFICATION_DATE` is given in the same call) and reads it back from
`st_birthtime` where the platform reports one, falling back to `st_mtime`.
"""

from __future__ import annotations

import asyncio
import errno
import logging
import os
import shutil
from collections.abc import Mapping
from datetime import datetime, timezone
from pathlib import Path, PurePath
from typing import Any

from podarchiver.interfaces.attributes import AttributeKey, FileAttributes
from podarchiver.interfaces.errors import MoveError, NotFoundError
from podarchiver.interfaces.mover import FileMover

logger = logging.getLogger(__name__)


class LocalFileMover(FileMover):
    """FileMover that renames files on the local filesystem.

    Never overwrites: an existing destination raises `MoveError`. Missing
    parent directories of the destination are created. Moves across devices
    fall back to copy-and-delete.
    """

    async def move(self, source: PurePath, destination: PurePath) -> None:
        await asyncio.to_thread(self._move, Path(source), Path(destination))
        logger.debug("Moved %s to %s", source, destination)

    @staticmethod
    def _move(source: Path, destination: Path) -> None:
        if destination.exists():
            raise MoveError(source, destination, "destination already exists")
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            os.rename(source, destination)
        except OSError as exc:
            if exc.errno != errno.EXDEV:
                raise MoveError(source, destination, exc.strerror or str(exc)) from exc
            try:
                shutil.move(source, destination)
            except OSError as move_exc:
                raise MoveError(source, destination, str(move_exc)) from move_exc


def _as_timestamp(value: Any) -> float:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            raise ValueError("date attributes must be timezone-aware")
        return value.timestamp()
    raise TypeError(f"expected a datetime, got {type(value).__name__}")


class LocalFileAttributes(FileAttributes):
    """FileAttributes backed by `os.stat` and `os.utime`."""

    async def set_attributes(
        self, attributes: Mapping[AttributeKey, Any], path: PurePath
    ) -> None:
        await asyncio.to_thread(self._set, dict(attributes), Path(path))

    async def get_attributes(self, path: PurePath) -> dict[AttributeKey, Any]:
        return await asyncio.to_thread(self._get, Path(path))

    @staticmethod
    def _set(attributes: dict[AttributeKey, Any], path: Path) -> None:
        modified = attributes.get(
            AttributeKey.MODIFICATION_DATE, attributes.get(AttributeKey.CREATION_DATE)
        )
        if modified is None:
            return
        timestamp = _as_timestamp(modified)
        try:
            os.utime(path, (timestamp, timestamp))
        except FileNotFoundError:
            raise NotFoundError(path) from None
        logger.debug("Set %s on %s", sorted(k.value for k in attributes), path)

    @staticmethod
    def _get(path: Path) -> dict[AttributeKey, Any]:
        try:
            stat = path.stat()
        except FileNotFoundError:
            raise NotFoundError(path) from None
        created = getattr(stat, "st_birthtime", stat.st_mtime)
        return {
            AttributeKey.CREATION_DATE: datetime.fromtimestamp(created, timezone.utc),
            AttributeKey.MODIFICATION_DATE: datetime.fromtimestamp(
                stat.st_mtime, timezone.utc
            ),
        }
