"""Fixtures for FileAttributes contract tests.

Provided fixtures
-----------------
- **attrs_backend**: a fresh `AttributesBackend` per test, parametrized over
  `"fake"` (`FakeFileAttributes`) and `"local"` (`LocalFileAttributes` under
  `tmp_path`). `backend.path(name)` returns a path the backend can be
  written to; for `"local"` it creates an empty file there first.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import Callable

import pytest

from podarchiver.adapters.fakes import FakeFileAttributes, InteractionRecorder
from podarchiver.adapters.filesystem import LocalFileAttributes
from podarchiver.interfaces import FileAttributes


@dataclass
class AttributesBackend:
    """An attribute store plus a way to obtain writable paths for it."""

    attributes: FileAttributes
    path: Callable[[str], PurePath]
    missing: PurePath


@pytest.fixture(params=["fake", "local"])
def attrs_backend(request: pytest.FixtureRequest, tmp_path: Path) -> AttributesBackend:
    """Return a fresh attribute store for the requested backend."""

    def touch(name: str) -> PurePath:
        path = tmp_path / name
        path.touch()
        return path

    missing = tmp_path / "never-written.mp3"

    match request.param:
        case "fake":
            return AttributesBackend(
                FakeFileAttributes(InteractionRecorder()),
                path=lambda name: tmp_path / name,
                missing=missing,
            )
        case "local":
            return AttributesBackend(LocalFileAttributes(), path=touch, missing=missing)
        case _:
            raise ValueError(f"unknown attributes backend: {request.param}")
