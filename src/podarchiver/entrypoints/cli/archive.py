"""``podarchiver archive``: archive every episode of a feed.

Prints the path of each archived file on stdout (one per line); progress,
warnings and errors go to stderr. A feed without episodes is a warning, not
a failure.

Failure modes
- No feed URL given and ``PODARCHIVER_FEED_URL`` unset → ``ClickException``.
- Network, move or attribute failures, or an unparsable feed →
  ``ClickException`` carrying the underlying message (exit code 1).
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import click

from podarchiver import config
from podarchiver.bootstrap import run_archive
from podarchiver.domain.feed import FeedFormatError
from podarchiver.interfaces.errors import CapabilityError

from .helpers import error, success, warn

MISSING_FEED_URL_MSG = (
    "No feed URL given.\n\n"
    "Pass one as an argument or set it in the environment, e.g.:\n"
    "  export PODARCHIVER_FEED_URL='https://some.podcast/feed.json'"
)


@click.command()
@click.argument("feed_url", required=False)
@click.option(
    "--archive-dir",
    "-d",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory to archive into (default: $PODARCHIVER_ARCHIVE_DIR or ~/Podcasts).",
)
@click.option(
    "--timeout",
    "timeout_seconds",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Network timeout in seconds (default: $PODARCHIVER_TIMEOUT or 30).",
)
def archive(
    feed_url: str | None, archive_dir: Path | None, timeout_seconds: float | None
) -> None:
    """Archive every episode of the podcast feed at FEED_URL."""
    try:
        archived = asyncio.run(run_archive(feed_url, archive_dir, timeout_seconds))
    except config.FeedUrlNotSetError as e:
        raise click.ClickException(MISSING_FEED_URL_MSG) from e
    except (CapabilityError, FeedFormatError) as e:
        error("Archiving failed")
        raise click.ClickException(str(e)) from e
    except ValueError as e:  # bad PODARCHIVER_TIMEOUT
        raise click.ClickException(str(e)) from e

    if not archived:
        warn("The feed lists no episodes; nothing was archived")
        return
    for item in archived:
        click.echo(str(item.path))
    success(f"Archived {len(archived)} episode(s)")
