"""Configuration utilities for MONIKER.

This module centralizes environment-driven settings. Per-class settings are
declared with `moniker.adapters.introspection.display_name_generation` and
resolved by `moniker.bootstrap`.
"""

import os

from moniker.domain.errors import MonikerError
from moniker.domain.value_objects import Style

DEFAULT_STYLE_ENV = "MONIKER_DEFAULT_STYLE"
LOGGER_LEVELS_ENV = "MONIKER_LOGGER_LEVELS"


class InvalidStyleError(MonikerError, ValueError):
    """Raised when a style name does not match any built-in style."""

    def __init__(self, value: str) -> None:
        choices = ", ".join(style.value for style in Style)
        super().__init__(f"Unknown display name style {value!r} (expected: {choices})")
        self.value = value


def parse_style(value: str) -> Style:
    """Parse a style name case-insensitively.

    Raises:
        InvalidStyleError: If ``value`` is not a built-in style name.
    """
    try:
        return Style(value.strip().lower())
    except ValueError as e:
        raise InvalidStyleError(value) from e


def get_default_style() -> Style:
    """Get the fallback display name style from the environment.

    Returns:
        The style named by `MONIKER_DEFAULT_STYLE`, or `Style.DEFAULT` if the
        variable is unset or empty.

    Raises:
        InvalidStyleError: If `MONIKER_DEFAULT_STYLE` names an unknown style.
    """
    if not (value := os.environ.get(DEFAULT_STYLE_ENV, "").strip()):
        return Style.DEFAULT
    return parse_style(value)
