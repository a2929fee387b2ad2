"""Resolve the effective display name generator for a test class."""

from __future__ import annotations

import importlib
import logging

from moniker import config
from moniker.adapters.generators import builtin_generator
from moniker.domain.descriptors import ClassDescriptor
from moniker.domain.errors import GeneratorResolutionError
from moniker.domain.utils import not_none
from moniker.domain.value_objects import DisplayNameGeneration
from moniker.interfaces.name_generator import DisplayNameGenerator

logger = logging.getLogger(__name__)


def find_generation(test_class: ClassDescriptor) -> DisplayNameGeneration | None:
    """Return the settings in effect for a class, following `enclosing` links.

    Settings declared on the class itself win; otherwise the nearest enclosing
    class that declares settings provides them.
    """
    current: ClassDescriptor | None = not_none(
        test_class, "Test class must not be None"
    )
    while current is not None:
        if current.generation is not None:
            return current.generation
        current = current.enclosing
    return None


def resolve_generator(generation: DisplayNameGeneration) -> DisplayNameGenerator:
    """Build the generator selected by a `DisplayNameGeneration`.

    A custom generator (class or import reference) overrides the style.

    Raises:
        GeneratorResolutionError: If the custom generator cannot be loaded or
            instantiated.
    """
    if generation.generator is None:
        return builtin_generator(generation.style)
    return load_generator(generation.generator)


def load_generator(reference: type | str) -> DisplayNameGenerator:
    """Instantiate a custom generator from a class or an import reference.

    Args:
        reference: A `DisplayNameGenerator` subclass, or a string of the form
            ``"package.module:ClassName"`` or ``"package.module.ClassName"``.

    Returns:
        A new instance of the generator class.

    Raises:
        GeneratorResolutionError: If the reference cannot be imported, does
            not name a `DisplayNameGenerator` subclass, or the class cannot be
            instantiated without arguments or fails while being instantiated.
    """
    cls = _import_reference(reference) if isinstance(reference, str) else reference
    if not (isinstance(cls, type) and issubclass(cls, DisplayNameGenerator)):
        raise GeneratorResolutionError(
            reference, "not a DisplayNameGenerator subclass"
        )
    try:
        generator = cls()
    except TypeError as e:
        raise GeneratorResolutionError(
            reference, f"cannot be instantiated without arguments ({e})"
        ) from e
    except Exception as e:  # pylint: disable=broad-except
        raise GeneratorResolutionError(
            reference, f"raised {type(e).__name__} when instantiated ({e})"
        ) from e
    logger.debug("Loaded custom display name generator %s", cls.__qualname__)
    return generator


def generator_for(
    test_class: ClassDescriptor, default: DisplayNameGenerator | None = None
) -> DisplayNameGenerator:
    """Return the display name generator in effect for a test class.

    Precedence: settings declared on the class or an enclosing class, then
    ``default``, then the style named by ``MONIKER_DEFAULT_STYLE``.

    Raises:
        InvalidArgumentError: If ``test_class`` is ``None``.
        GeneratorResolutionError: If a declared custom generator cannot be loaded.
        InvalidStyleError: If ``MONIKER_DEFAULT_STYLE`` is not a known style.
    """
    generation = find_generation(test_class)
    if generation is not None:
        generator = resolve_generator(generation)
        source = "declared"
    elif default is not None:
        generator = default
        source = "caller default"
    else:
        generator = builtin_generator(config.get_default_style())
        source = "environment default"
    logger.debug(
        "Display name generator for %s: %s (%s)",
        test_class.qualified_name,
        type(generator).__name__,
        source,
    )
    return generator


def _import_reference(reference: str) -> object:
    module_name, sep, attr_path = reference.partition(":")
    if not sep:
        module_name, _, attr_path = reference.rpartition(".")
    if not module_name or not attr_path:
        raise GeneratorResolutionError(
            reference, "expected 'package.module:ClassName'"
        )
    try:
        target: object = importlib.import_module(module_name)
    except Exception as e:  # pylint: disable=broad-except
        raise GeneratorResolutionError(
            reference,
            f"module {module_name!r} could not be imported"
            f" ({type(e).__name__}: {e})",
        ) from e
    for attr in attr_path.split("."):
        try:
            target = getattr(target, attr)
        except AttributeError as e:
            raise GeneratorResolutionError(
                reference, f"{attr!r} not found in {module_name!r}"
            ) from e
    return target
