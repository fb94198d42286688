"""Errors raised through the capability interfaces.

Every production adapter and test double maps its failures onto these types,
so the archiver (and its tests) never depend on a particular HTTP client or
filesystem API.
"""

from __future__ import annotations

from pathlib import PurePath

# ============================================================================
#                           Capability errors
# ============================================================================


class CapabilityError(Exception):
    """Base class for failures of a capability call."""


class TransportError(CapabilityError):
    """A fetch or download failed at the network layer.

    Attributes:
        locator (str): The locator that was being retrieved.
        status_code (int | None): HTTP status of the response, if one arrived.
    """

    def __init__(
        self, locator: str, reason: str, status_code: int | None = None
    ) -> None:
        super().__init__(f"Transport failure for '{locator}': {reason}")
        self.locator = locator
        self.reason = reason
        self.status_code = status_code


class TimedOut(TransportError):
    """A fetch or download did not complete within its timeout."""

    def __init__(self, locator: str) -> None:
        super().__init__(locator, "timed out")


class MoveError(CapabilityError):
    """A local move could not be performed.

    Attributes:
        source (PurePath): The path that was to be moved.
        destination (PurePath): The requested destination.
    """

    def __init__(self, source: PurePath, destination: PurePath, reason: str) -> None:
        super().__init__(f"Cannot move '{source}' to '{destination}': {reason}")
        self.source = source
        self.destination = destination
        self.reason = reason


class NotFoundError(CapabilityError, LookupError):
    """No attributes are known for the requested path.

    Attributes:
        path (PurePath): The path that was looked up.
    """

    def __init__(self, path: PurePath) -> None:
        super().__init__(f"No attributes found for '{path}'.")
        self.path = path


# ============================================================================
#                           Harness errors
# ============================================================================


class UnimplementedPathError(AssertionError):
    """A test double was called on a path it has no canned behavior for.

    This is an assertion failure rather than a `CapabilityError`: it signals a
    gap in the test setup, not a business failure the code under test should
    handle.

    Attributes:
        capability (str): Name of the capability whose double was called.
        method (str): The method that has no configured behavior.
    """

    def __init__(self, capability: str, method: str, detail: str = "") -> None:
        message = f"{capability}.{method} has no canned behavior configured"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.capability = capability
        self.method = method
