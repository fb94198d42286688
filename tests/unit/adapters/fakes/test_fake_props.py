"""Hypothesis property tests for the in-memory test doubles.

Properties:

- **Read-your-writes**: after any sequence of attribute writes, reading a path
  returns the key-wise merge of every write to that path, last write winning.
- **Untouched paths stay unknown**: paths never written raise ``NotFoundError``.
- **Move log fidelity**: the mover lists exactly the requested moves, in order,
  and the recorder holds one call per move.
- **Recorder sequencing**: sequence numbers are ``1..n`` for ``n`` calls.

Each example builds fresh doubles so no state leaks between examples.
"""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from pathlib import PurePath

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from podarchiver.adapters.fakes import (
    Capability,
    FakeFileAttributes,
    FakeFileMover,
    InteractionRecorder,
    MoveRecord,
)
from podarchiver.interfaces import AttributeKey, NotFoundError

pytestmark = [pytest.mark.property]

_PROPSET = settings(max_examples=50, deadline=None)

# ============================================================================
#                               Strategies
# ============================================================================

paths = st.sampled_from([PurePath(f"/archive/{name}.mp3") for name in "abcde"])
timestamps = st.datetimes(
    min_value=datetime(1990, 1, 1),
    max_value=datetime(2100, 1, 1),
    timezones=st.just(timezone.utc),
)
attribute_maps = st.dictionaries(
    keys=st.sampled_from(list(AttributeKey)), values=timestamps, min_size=1
)
writes = st.lists(st.tuples(paths, attribute_maps), max_size=20)
moves = st.lists(st.tuples(paths, paths), max_size=20)


# ============================================================================
#                               Properties
# ============================================================================


@_PROPSET
@given(writes=writes)
def test_reads_return_merged_writes(writes):
    """Each path reads back as the merge of all writes to it."""
    attributes = FakeFileAttributes(InteractionRecorder())
    expected: dict[PurePath, dict] = {}

    async def scenario() -> None:
        for path, attrs in writes:
            await attributes.set_attributes(attrs, path)
            expected.setdefault(path, {}).update(attrs)

        for path, attrs in expected.items():
            assert await attributes.get_attributes(path) == attrs

    asyncio.run(scenario())


@_PROPSET
@given(writes=writes, probe=paths)
def test_unwritten_paths_are_not_found(writes, probe):
    """A path absent from every write is reported missing."""
    attributes = FakeFileAttributes(InteractionRecorder())
    for path, attrs in writes:
        asyncio.run(attributes.set_attributes(attrs, path))

    if probe in {path for path, _ in writes}:
        return
    with pytest.raises(NotFoundError):
        asyncio.run(attributes.get_attributes(probe))


@_PROPSET
@given(moves=moves)
def test_move_log_matches_requests(moves):
    """The mover's log and the recorder agree with the requested moves."""
    recorder = InteractionRecorder()
    mover = FakeFileMover(recorder)

    async def scenario() -> None:
        for source, destination in moves:
            await mover.move(source, destination)

    asyncio.run(scenario())

    assert mover.moves == [MoveRecord(s, d) for s, d in moves]
    assert recorder.calls_for(Capability.MOVER) == list(recorder)
    assert [c.args for c in recorder] == [(s, d) for s, d in moves]
    assert [c.sequence for c in recorder] == list(range(1, len(moves) + 1))
