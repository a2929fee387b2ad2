"""MONIKER CLI entry point.

Defines the top-level ``moniker`` command (via Click-Extra) and registers its
subcommands.

Currently available commands
- ``moniker names``: preview the display names of a test class.
- ``moniker styles``: list the built-in display name styles.

Examples
    $ moniker --version
    $ moniker names tests.test_calculator:TestCalculator --style underscore
"""

import logging
from typing import TYPE_CHECKING

import click
import click_extra as clickx

from moniker import __version__, config
from moniker.logging import config_console_handler, log_startup

from .helpers import parse_log_level
from .names import names as names_command
from .names import styles as styles_command

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """MONIKER command-line interface.

    MONIKER turns test classes and test methods into human-readable display
    names using a built-in or custom naming strategy. Use it to preview the
    labels a test report will show.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (DEBUG output with logger names and source paths).",
    default=False,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar=config.LOGGER_LEVELS_ENV,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Repeatable "
        "(e.g. -L click_extra=INFO -L moniker=DEBUG) or via "
        f"{config.LOGGER_LEVELS_ENV} (comma/space list)."
    ),
    default=("click_extra=WARNING",),
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def moniker(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    logger_levels: dict[str, int],
) -> None:
    """MONIKER command-line interface."""

    # 0) compute effective verbosity
    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    # 1) configure console handler
    use_color = ctx.color is not False  # None or True => allow color
    handlers: list[Handler] = [
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    ]

    # 2) configure root logger; the handler does the filtering
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 3) per-logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=logging.DEBUG if debug else level,
        handlers=handlers,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


moniker.add_command(names_command)
moniker.add_command(styles_command)
