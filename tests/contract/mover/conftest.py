"""Fixtures for FileMover contract tests.

- **mover_backend**: parametrized over `"fake"` and `"local"`. Besides the
  mover it offers `source(name)`, which prepares a movable file, and
  `was_moved(src, dst)`, which checks the observable outcome: the request
  log for the fake, the filesystem for the local adapter.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import Callable

import pytest

from podarchiver.adapters.fakes import FakeFileMover, InteractionRecorder, MoveRecord
from podarchiver.adapters.filesystem import LocalFileMover
from podarchiver.interfaces import FileMover


@dataclass
class MoverBackend:
    """A mover plus backend-specific setup and outcome checks."""

    mover: FileMover
    source: Callable[[str], PurePath]
    was_moved: Callable[[PurePath, PurePath], bool]


@pytest.fixture(params=["fake", "local"])
def mover_backend(request: pytest.FixtureRequest, tmp_path: Path) -> MoverBackend:
    """Return a fresh mover for the requested backend."""

    def make_source(name: str) -> PurePath:
        path = tmp_path / "downloads" / name
        path.parent.mkdir(exist_ok=True)
        path.write_bytes(name.encode())
        return path

    match request.param:
        case "fake":
            mover = FakeFileMover(InteractionRecorder())
            return MoverBackend(
                mover,
                source=make_source,
                was_moved=lambda src, dst: MoveRecord(src, dst) in mover.moves,
            )
        case "local":
            return MoverBackend(
                LocalFileMover(),
                source=make_source,
                was_moved=lambda src, dst: (
                    not Path(src).exists()
                    and Path(dst).read_bytes() == Path(src).name.encode()
                ),
            )
        case _:
            raise ValueError(f"unknown mover backend: {request.param}")
