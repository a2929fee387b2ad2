"""Logging helpers used by the MONIKER CLI.

This module configures console logging with Rich and provides a filter that
annotates third-party log records with a short prefix used by console
formatting. The naming core itself never logs; configuration resolution and
the CLI do.
"""

from __future__ import annotations

import logging
import platform
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "moniker"
REPORTED_DISTRIBUTIONS = ("click", "click-extra", "rich")


class ThirdPartyPrefixFilter(logging.Filter):
    """Annotate third-party log records with a short prefix.

    Records from loggers outside the project get `record.prefix` set to a
    bracketed token such as "[click_extra]"; project records get an empty
    prefix. The filter never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not record.name.startswith(PROJECT_PREFIX):
            # e.g. "click_extra.colorize" -> "[click_extra]"
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


def config_console_handler(
    level: int = logging.WARNING, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler writing to stderr.

    Args:
        level: Minimum level for console output (overridden to DEBUG in debug_mode).
        debug_mode: When True, log at DEBUG with timestamps, logger names and
            source paths.
        color: Enable color output when True.

    Returns:
        RichHandler: Configured handler suitable to attach to the root logger.
    """
    # keep in line with click-extra's --color / --no-color option
    ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    fmt = (
        "%(asctime)s %(name)s: %(message)s"
        if debug_mode
        else "%(prefix)s %(message)s"
    )
    handler.setFormatter(logging.Formatter(fmt=fmt))
    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def distribution_version(name: str) -> str:
    """Return the installed version of a distribution, or "<not installed>"."""
    try:
        return version(name)
    except PackageNotFoundError:
        return "<not installed>"


def log_startup(
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    logger_levels: dict[str, int],
) -> None:
    """Log a one-line summary and DEBUG diagnostics at CLI startup.

    Args:
        logger: Logger used to emit startup messages.
        app_version: Application version string to display.
        level: Effective console logging level (numeric).
        handlers: Active logging handlers attached to the root logger.
        logger_levels: Mapping of logger names to their configured numeric levels.
    """
    logger.info(
        "MONIKER %s (console=%s)", app_version, logging.getLevelName(level)
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    for name in REPORTED_DISTRIBUTIONS:
        logger.debug("%s: %s", name, distribution_version(name))
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
        or "<none>",
    )
