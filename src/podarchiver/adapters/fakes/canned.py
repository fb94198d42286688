"""Canned-response strategies for the capability test doubles.

A strategy is one of:

- a fixed value, returned as-is;
- an exception instance or class, raised on every call;
- a callable taking the invocation arguments, whose result (awaited if it is
  awaitable) is the response. It may itself raise.

`NOT_CONFIGURED` marks a method variant the test never set up; calling it
raises `UnimplementedPathError` rather than returning a default.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Mapping
from typing import Any, Final, TypeAlias

from podarchiver.interfaces.errors import UnimplementedPathError

# pylint: disable=too-few-public-methods


class _NotConfigured:
    """Sentinel type for an unconfigured strategy."""

    def __repr__(self) -> str:
        return "NOT_CONFIGURED"


NOT_CONFIGURED: Final = _NotConfigured()

Canned: TypeAlias = Any | BaseException | Callable[..., Any] | _NotConfigured


class NoCannedResponse(LookupError):
    """A lookup strategy has no entry for the call it was given.

    `resolve` turns this into an `UnimplementedPathError` naming the double
    and method that were actually called.
    """


def _is_exception(canned: Any) -> bool:
    return isinstance(canned, BaseException) or (
        isinstance(canned, type) and issubclass(canned, BaseException)
    )


async def resolve(canned: Canned, capability: str, method: str, *args: Any) -> Any:
    """Produce the response configured by `canned` for a call with `args`.

    Raises:
        UnimplementedPathError: If `canned` is `NOT_CONFIGURED`, or is a
            lookup strategy with no entry for `args`.
        BaseException: Whatever exception `canned` is or raises.
    """
    if canned is NOT_CONFIGURED:
        raise UnimplementedPathError(capability, method)
    if _is_exception(canned):
        raise canned
    if callable(canned):
        try:
            result = canned(*args)
            if inspect.isawaitable(result):
                result = await result
        except NoCannedResponse as exc:
            raise UnimplementedPathError(capability, method, str(exc)) from None
        return result
    return canned


def by_locator(responses: Mapping[str, Any]) -> Callable[[str], Any]:
    """Build a strategy that answers from `responses` keyed by locator.

    Values follow the same rules as a fixed strategy: exceptions are raised.
    Locators missing from `responses` make the calling double raise
    `UnimplementedPathError`.
    """
    table = dict(responses)

    def answer(locator: str) -> Any:
        try:
            response = table[locator]
        except KeyError:
            raise NoCannedResponse(f"no response for {locator!r}") from None
        if _is_exception(response):
            raise response
        return response

    return answer
