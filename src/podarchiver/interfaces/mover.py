"""Interface for moving local files."""

import abc
from pathlib import PurePath

# pylint: disable=too-few-public-methods


class FileMover(abc.ABC):
    """Contract for moving a local file to a new path."""

    @abc.abstractmethod
    async def move(self, source: PurePath, destination: PurePath) -> None:
        """Move `source` to `destination`.

        Raises:
            MoveError: If the destination already exists, the source is
                missing, or the move is not permitted.
        """
