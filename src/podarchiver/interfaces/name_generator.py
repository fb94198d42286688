"""Interface for naming downloaded temporary files."""

import abc

# pylint: disable=too-few-public-methods


class NameGenerator(abc.ABC):
    """Contract for a generator of unique file stems."""

    @abc.abstractmethod
    def new_name(self) -> str:
        """Return a file stem no previous call has returned."""
