"""Fixtures for end-to-end CLI tests."""

import logging

import click
import pytest
from click.testing import CliRunner

from moniker import config
from moniker.entrypoints.cli.main import moniker

# pylint: disable=redefined-outer-name


@pytest.fixture
def runner(monkeypatch: pytest.MonkeyPatch):
    """Return a Click CliRunner with MONIKER environment variables cleared."""
    monkeypatch.delenv(config.DEFAULT_STYLE_ENV, raising=False)
    monkeypatch.delenv(config.LOGGER_LEVELS_ENV, raising=False)
    return CliRunner()


@click.command()
def log_demo():
    """Emit one message per level on a project logger and a third-party logger."""
    logger = logging.getLogger("moniker.demo")
    logger.debug("demo debug message")
    logger.info("demo info message")
    logger.warning("demo warning message")
    logger.error("demo error message")
    third_party = logging.getLogger("some.thirdparty")
    third_party.info("thirdparty info message")
    third_party.warning("thirdparty warning message")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and any click-extra sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the test-only 'log-demo' command for the duration of a test."""
    moniker.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(moniker, "log-demo")


@pytest.fixture(autouse=True)
def reset_logger_levels():
    """Undo per-logger levels set by -L or MONIKER_LOGGER_LEVELS."""
    yield
    for name in ("some", "moniker", "moniker.demo", "click_extra"):
        logging.getLogger(name).setLevel(logging.NOTSET)
