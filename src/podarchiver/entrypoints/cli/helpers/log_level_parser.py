"""Parsing of `-L NAME=LEVEL` logger-level options.

Values may come from repeated flags or from one environment variable holding
a comma/space separated list. LEVEL is a standard level name (any case) or a
non-negative integer.
"""

import logging
import re

import click

# Quiet the HTTP stack unless asked otherwise.
DEFAULT_LIB_LEVELS = {"httpx": logging.WARNING, "httpcore": logging.WARNING}
_SEPARATORS = re.compile(r"[,\s]+")


def _split_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in _SEPARATORS.split(chunk) if item]


def _to_level(text: str) -> int:
    text = text.strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    if not isinstance(level, int):
        raise click.BadParameter(f"Invalid log level: {text}")
    return level


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback turning NAME=LEVEL items into a name->level dict.

    The result starts from `DEFAULT_LIB_LEVELS`; later items win.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is unknown.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _split_items(value):
        name, sep, level_text = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        levels[name.strip()] = _to_level(level_text)
    return levels
