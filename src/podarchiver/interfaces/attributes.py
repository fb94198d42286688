"""Interfaces for reading and writing local file attributes.

Attributes are keyed by `AttributeKey`; date attributes are timezone-aware
`datetime` values. Writes are partial: only the keys present in the mapping
are changed.
"""

from __future__ import annotations

import abc
from collections.abc import Mapping
from enum import Enum
from pathlib import PurePath
from typing import Any


class AttributeKey(Enum):
    """Attribute names understood by `FileAttributes` implementations."""

    CREATION_DATE = "creation_date"
    MODIFICATION_DATE = "modification_date"


class FileAttributes(abc.ABC):
    """Contract for file metadata access."""

    @abc.abstractmethod
    async def set_attributes(
        self, attributes: Mapping[AttributeKey, Any], path: PurePath
    ) -> None:
        """Write the given attributes to `path`, leaving other keys untouched.

        Args:
            attributes: Attribute values to write.
            path: The file to update.

        Raises:
            NotFoundError: If `path` does not exist (production adapters).
        """

    @abc.abstractmethod
    async def get_attributes(self, path: PurePath) -> dict[AttributeKey, Any]:
        """Read the attributes of `path`.

        Returns:
            dict[AttributeKey, Any]: A fresh mapping; mutating it has no effect
            on the stored attributes.

        Raises:
            NotFoundError: If nothing is known about `path`.
        """
