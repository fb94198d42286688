"""Data fetcher interface definitions."""

from __future__ import annotations

import abc
from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ResponseMetadata:
    """Metadata describing the response to a fetch or download."""

    locator: str
    status_code: int = 200
    headers: Mapping[str, str] = field(default_factory=dict)


class DataFetcher(abc.ABC):
    """Contract for retrieving the raw bytes behind a locator."""

    @abc.abstractmethod
    async def fetch(self, locator: str) -> tuple[bytes, ResponseMetadata]:
        """Retrieve the resource at `locator` into memory.

        Args:
            locator (str): Absolute URL of the resource.

        Returns:
            tuple[bytes, ResponseMetadata]: The body and its response metadata.

        Raises:
            TransportError: If the resource could not be retrieved.
        """
