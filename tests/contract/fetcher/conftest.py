"""Fixtures for DataFetcher contract tests.

- **make_fetcher**: parametrized over `"fake"` and `"http"`. Called with a
  `{locator: body_or_status}` table it returns a `DataFetcher` serving that
  table: bytes are served with status 200, an int is an error status. The
  fake serves through `by_locator`; the httpx adapter through an
  `httpx.MockTransport`.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Mapping

import httpx
import pytest

from podarchiver.adapters.fakes import FakeDataFetcher, InteractionRecorder, by_locator
from podarchiver.adapters.http import HttpDataFetcher
from podarchiver.interfaces import DataFetcher, ResponseMetadata, TransportError

Table = Mapping[str, bytes | int]


def _fake(table: Table) -> FakeDataFetcher:
    responses = {
        locator: (
            TransportError(locator, f"HTTP {entry}", status_code=entry)
            if isinstance(entry, int)
            else (entry, ResponseMetadata(locator=locator))
        )
        for locator, entry in table.items()
    }
    return FakeDataFetcher(InteractionRecorder(), response=by_locator(responses))


def _http(table: Table) -> HttpDataFetcher:
    def handler(request: httpx.Request) -> httpx.Response:
        entry = table[str(request.url)]
        if isinstance(entry, int):
            return httpx.Response(entry)
        return httpx.Response(200, content=entry)

    return HttpDataFetcher(transport=httpx.MockTransport(handler))


@pytest.fixture(params=["fake", "http"])
def make_fetcher(request: pytest.FixtureRequest) -> Callable[[Table], DataFetcher]:
    """Return a factory building a fetcher of the requested backend."""
    built: list[DataFetcher] = []

    def _make(table: Table) -> DataFetcher:
        match request.param:
            case "fake":
                fetcher: DataFetcher = _fake(table)
            case "http":
                fetcher = _http(table)
            case _:
                raise ValueError(f"unknown fetcher backend: {request.param}")
        built.append(fetcher)
        return fetcher

    yield _make

    for fetcher in built:
        if isinstance(fetcher, HttpDataFetcher):
            asyncio.run(fetcher.aclose())
