"""PODARCHIVER CLI entry point.

Defines the top-level ``podarchiver`` command (via Click-Extra), which sets
up console logging and the flight recorder, and registers the subcommands.

Currently available commands
- ``podarchiver archive``: archive every episode of a podcast feed.

Examples
    $ podarchiver --version
    $ podarchiver -v archive https://some.podcast/feed.json --archive-dir ~/Podcasts
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from podarchiver import __version__
from podarchiver.logging import LoggingOptions, configure_logging, log_startup

from .archive import archive
from .helpers import parse_log_level

logger = logging.getLogger(__name__)


HELP = """PODARCHIVER command-line interface.

    Downloads every episode of a podcast feed into a local archive, naming
    each file after the episode title and stamping it with the episode's
    publication date.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Raise the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Lower the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Log everything, with timestamps, logger names and source locations.",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="File the flight recorder writes to.",
    default=Path(user_log_dir("podarchiver", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="PODARCHIVER_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="PODARCHIVER_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last N log records at DEBUG granularity (unaffected by -v/-q) "
        "and write them to --log-path when a WARNING or ERROR is logged."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush",
    is_flag=True,
    help="Also write the flight recorder buffer to --log-path on exit.",
    default=False,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set the minimum LEVEL of logger NAME (NAME=LEVEL), for both the console "
        "and the flight recorder. Repeatable, e.g. -L httpx=INFO -L httpcore=DEBUG."
    ),
    default=("httpx=WARNING", "httpcore=WARNING"),
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def podarchiver(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> None:
    """PODARCHIVER command-line interface."""

    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    options = LoggingOptions(
        level=max(logging.DEBUG, min(logging.CRITICAL, level)),
        debug=debug,
        color=ctx.color is not False,  # None or True => allow color
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_recorder_capacity=flight_recorder_capacity,
        force_flush=force_flush,
        logger_levels=logger_levels,
    )
    handlers = configure_logging(options)
    log_startup(logger, app_version=__version__, options=options, handlers=handlers)

    ctx.call_on_close(logging.shutdown)


podarchiver.add_command(archive)
