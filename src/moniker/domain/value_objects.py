"""Module including value objects used to configure display name generation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Style(Enum):
    """Enumeration of the built-in display name styles.

    Styles:
    - DEFAULT: class and method names as declared, plus parameter types.
    - UNDERSCORE: like DEFAULT, with underscores in names replaced by spaces.
    """

    DEFAULT = "default"
    UNDERSCORE = "underscore"


@dataclass(frozen=True)
class DisplayNameGeneration:
    """Value object selecting the display name generator for a test class.

    A custom ``generator`` takes precedence over ``style``. It may be given as
    a `DisplayNameGenerator` subclass or as an import reference string such as
    ``"package.module:ClassName"``.
    """

    style: Style = Style.DEFAULT
    generator: type | str | None = None
