"""Import test classes named on the command line."""

import importlib
import sys
from pathlib import Path

import click


def import_target(reference: str, search_path: Path | None = None) -> type:
    """Import a class from a ``"package.module:ClassName"`` reference.

    Args:
        reference: Module and class, separated by ``":"``. The class part may
            be dotted to reach a nested class.
        search_path: Directory prepended to ``sys.path`` while importing,
            so test modules outside installed packages can be named.

    Raises:
        click.BadParameter: If the module or class cannot be found.
    """
    module_name, sep, qualname = reference.partition(":")
    if not sep or not module_name or not qualname:
        raise click.BadParameter(
            f"Expected 'package.module:ClassName', got {reference!r}"
        )
    inserted = search_path is not None and str(search_path) not in sys.path
    if inserted:
        sys.path.insert(0, str(search_path))
    try:
        target: object = importlib.import_module(module_name)
    except ImportError as e:
        raise click.BadParameter(f"Cannot import module {module_name!r}: {e}") from e
    finally:
        if inserted:
            sys.path.remove(str(search_path))
    for attr in qualname.split("."):
        if (target := getattr(target, attr, None)) is None:
            raise click.BadParameter(f"{qualname!r} not found in {module_name!r}")
    if not isinstance(target, type):
        raise click.BadParameter(f"{reference!r} is not a class")
    return target
