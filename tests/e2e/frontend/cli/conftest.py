"""Fixtures for end-to-end tests of the ``podarchiver`` CLI.

Provides a test-only ``log-demo`` command that logs at every level from a
project logger and a third-party logger, plus a CliRunner and an isolated
filesystem per test.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from podarchiver.entrypoints.cli.main import podarchiver

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Log one message per level on 'podarchiver.demo' and a few on 'some.thirdparty'."""
    logger = logging.getLogger("podarchiver.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _unregister(group: click.Group, name: str) -> None:
    """Remove `name` from the group, including click-extra's help sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Make ``podarchiver log-demo`` available for one test."""
    podarchiver.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _unregister(podarchiver, "log-demo")


@pytest.fixture
def runner():
    """A Click CliRunner."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside a temporary working directory."""
    with runner.isolated_filesystem():
        yield
