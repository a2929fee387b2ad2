"""Preview display names from the command line.

``moniker names`` imports a test class and prints the display names its
generator produces: the class first, then one indented line per test
method, then each nested class the same way, one level deeper.

Generator precedence
- ``--generator`` beats ``--style``.
- Either option beats settings declared with ``display_name_generation``.
- Declared settings beat ``MONIKER_DEFAULT_STYLE``.

Output goes to stdout, one name per line, so it can be piped or diffed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import click

from moniker import config
from moniker.adapters.introspection import (
    describe_class,
    describe_method,
    find_test_methods,
    nested_classes,
)
from moniker.bootstrap import generator_for, resolve_generator
from moniker.domain.descriptors import ClassDescriptor
from moniker.domain.errors import MonikerError
from moniker.domain.value_objects import DisplayNameGeneration, Style
from moniker.interfaces.name_generator import DisplayNameGenerator

from .helpers import import_target

logger = logging.getLogger(__name__)

INDENT = "  "
STYLE_CHOICES = [style.value for style in Style]


@click.command()
@click.argument("target")
@click.option(
    "--style",
    type=click.Choice(STYLE_CHOICES, case_sensitive=False),
    default=None,
    help="Use this built-in style instead of the class's declared settings.",
)
@click.option(
    "--generator",
    "generator_ref",
    default=None,
    metavar="MODULE:CLASS",
    help="Use a custom DisplayNameGenerator (overrides --style).",
)
@click.option(
    "--nested/--no-nested",
    default=True,
    show_default=True,
    help="Also list nested test classes.",
)
@click.option(
    "--prefix",
    default="test",
    show_default=True,
    help="Name prefix identifying test methods.",
)
@click.option(
    "--path",
    "search_path",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Directory to import TARGET from (on sys.path while importing).",
)
def names(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    target: str,
    style: str | None,
    generator_ref: str | None,
    nested: bool,
    prefix: str,
    search_path: Path | None,
) -> None:
    """Print the display names for TARGET (``package.module:ClassName``)."""
    cls = import_target(target, search_path)
    try:
        override = _override_generator(style, generator_ref)
        for depth, line in _render(cls, override, nested=nested, prefix=prefix):
            click.echo(f"{INDENT * depth}{line}")
    except MonikerError as e:
        raise click.ClickException(str(e)) from e


@click.command()
def styles() -> None:
    """List the built-in display name styles."""
    try:
        current = config.get_default_style()
    except config.InvalidStyleError as e:
        raise click.ClickException(str(e)) from e
    for style in Style:
        marker = " (default)" if style is current else ""
        click.echo(f"{style.value}{marker}")


def _override_generator(
    style: str | None, generator_ref: str | None
) -> DisplayNameGenerator | None:
    if style is None and generator_ref is None:
        return None
    generation = DisplayNameGeneration(
        style=config.parse_style(style) if style else Style.DEFAULT,
        generator=generator_ref,
    )
    logger.info("Overriding declared settings with %s", generation)
    return resolve_generator(generation)


def _render(
    cls: type,
    override: DisplayNameGenerator | None,
    *,
    nested: bool,
    prefix: str,
    enclosing: ClassDescriptor | None = None,
    depth: int = 0,
) -> Iterator[tuple[int, str]]:
    descriptor = describe_class(cls, enclosing=enclosing)
    generator = override or generator_for(descriptor)
    if enclosing is None:
        yield depth, generator.generate_display_name_for_class(descriptor)
    else:
        yield depth, generator.generate_display_name_for_nested_class(descriptor)

    methods = find_test_methods(cls, prefix)
    logger.debug("%s: %d test method(s)", descriptor.qualified_name, len(methods))
    for declaring, func in methods:
        method = describe_method(func, describe_class(declaring))
        yield depth + 1, generator.generate_display_name_for_method(descriptor, method)

    if nested:
        for inner in nested_classes(cls):
            yield from _render(
                inner,
                override,
                nested=nested,
                prefix=prefix,
                enclosing=descriptor,
                depth=depth + 1,
            )
