"""Logging setup for the PODARCHIVER command line.

Two handlers can be attached to the root logger:

- a Rich console handler on stderr, whose level follows -v/-q;
- a "flight recorder": a `MemoryHandler` that keeps recent records at DEBUG
  granularity and dumps them to a file when a WARNING or worse is logged
  (or on exit when force-flush is on).

Records from loggers outside the `podarchiver` namespace (httpx, httpcore,
...) are shown with a short `[library]` prefix on the console.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from dataclasses import dataclass, field
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

import httpx
from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "podarchiver"
ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):
    """Set `record.prefix` to "[lib]" for third-party records, "" otherwise.

    Never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(PROJECT_PREFIX):
            record.prefix = ""
        else:
            # "httpx._client" -> "[httpx]"
            record.prefix = f"[{record.name.split('.')[0]}]"
        return True


@dataclass
class LoggingOptions:  # pylint: disable=too-many-instance-attributes
    """Everything the CLI decided about logging for this run."""

    level: int = logging.WARNING
    debug: bool = False
    color: bool = True
    log_path: Path | None = None
    flight_recorder: bool = True
    flight_recorder_capacity: int = 2000
    force_flush: bool = False
    logger_levels: dict[str, int] = field(default_factory=dict)


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the Rich console handler (stderr).

    In debug mode the handler logs everything, with timestamps, logger names
    and source locations; otherwise it logs at `level` with the third-party
    prefix.
    """
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build the flight recorder: a memory buffer in front of a file handler.

    The file at `path` is truncated, not appended to.

    Args:
        path: File the buffer is flushed to.
        capacity: Number of records buffered before an automatic flush.
        flush_level: Records at or above this level trigger a flush.
        flush_on_close: Also flush whatever is buffered when closed.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(process)d:%(threadName)s] %(levelname)s "
            "%(name)s:%(lineno)d: %(message)s"
        )
    )
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def configure_logging(options: LoggingOptions) -> list[logging.Handler]:
    """Install the console handler (and flight recorder) on the root logger.

    Replaces any existing root configuration and applies per-logger levels.

    Returns:
        list[logging.Handler]: The handlers that were installed.
    """
    handlers: list[logging.Handler] = [
        config_console_handler(
            level=options.level, debug_mode=options.debug, color=options.color
        )
    ]
    if options.flight_recorder and options.log_path is not None:
        handlers.append(
            config_flight_recorder(
                path=options.log_path,
                capacity=options.flight_recorder_capacity,
                flush_on_close=options.force_flush,
            )
        )

    # root captures everything; handlers do the filtering
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    for name, lvl in options.logger_levels.items():
        logging.getLogger(name).setLevel(lvl)
    return handlers


def log_startup(
    logger: Logger,
    *,
    app_version: str,
    options: LoggingOptions,
    handlers: list[logging.Handler],
) -> None:
    """Log a one-line startup summary at INFO and diagnostics at DEBUG.

    Diagnostics cover the Python and platform versions, PID, working
    directory, httpx version, installed handlers, flight-recorder settings
    and per-logger level overrides.
    """
    logger.info(
        "PODARCHIVER %s: console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(options.level),
        "ON" if options.flight_recorder else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    logger.debug("httpx: %s", httpx.__version__)
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if options.flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            options.log_path if options.log_path else "<none>",
            options.flight_recorder_capacity,
            options.force_flush,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {
            name: logging.getLevelName(lvl)
            for name, lvl in options.logger_levels.items()
        }
        or "<none>",
    )
