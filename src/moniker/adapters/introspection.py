"""Build descriptors from live Python classes and functions.

This is the only place MONIKER looks at Python objects. Names and parameter
types are resolved once, here, and handed to generators as plain descriptors.

The `display_name_generation` decorator is the declarative way to choose a
generator for a test class. Subclasses inherit it through normal attribute
lookup; nested classes inherit it through `ClassDescriptor.enclosing`.
"""

from __future__ import annotations

import inspect
import types
import typing
from collections.abc import Callable
from typing import Any, TypeVar

from moniker.domain.descriptors import (
    ClassDescriptor,
    MethodDescriptor,
    ParameterTypeDescriptor,
)
from moniker.domain.utils import not_none
from moniker.domain.value_objects import DisplayNameGeneration, Style

if typing.TYPE_CHECKING:
    from moniker.interfaces.name_generator import DisplayNameGenerator

C = TypeVar("C", bound=type)

GENERATION_ATTR = "__moniker_generation__"
RECEIVER_NAMES = ("self", "cls")
UNANNOTATED_TYPE_NAME = "object"
_SKIPPED_KINDS = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


def display_name_generation(
    style: Style = Style.DEFAULT,
    generator: type[DisplayNameGenerator] | str | None = None,
) -> Callable[[C], C]:
    """Class decorator declaring the display name generator for a test class.

    Args:
        style: Built-in style to use.
        generator: Custom generator class or ``"module:ClassName"`` reference.
            Overrides ``style`` when given.

    Example:
        ```py
        @display_name_generation(Style.UNDERSCORE)
        class TestCalculator:
            def test_adds_two_numbers(self): ...
        ```
    """
    generation = DisplayNameGeneration(style=style, generator=generator)

    def decorate(cls: C) -> C:
        setattr(cls, GENERATION_ATTR, generation)
        return cls

    return decorate


def describe_class(
    cls: type, enclosing: ClassDescriptor | None = None
) -> ClassDescriptor:
    """Return the descriptor for a test class.

    Args:
        cls: The test class.
        enclosing: Descriptor of the enclosing class when ``cls`` is nested.

    Raises:
        InvalidArgumentError: If ``cls`` is ``None``.
    """
    not_none(cls, "Test class must not be None")
    return ClassDescriptor(
        qualified_name=f"{cls.__module__}.{cls.__qualname__}",
        simple_name=cls.__name__,
        generation=getattr(cls, GENERATION_ATTR, None),
        enclosing=enclosing,
    )


def describe_method(
    func: Callable[..., Any], declaring_class: ClassDescriptor | None = None
) -> MethodDescriptor:
    """Return the descriptor for a test method.

    A leading ``self``/``cls`` receiver and ``*args``/``**kwargs`` are not
    part of the parameter list.

    Raises:
        InvalidArgumentError: If ``func`` is ``None``.
    """
    not_none(func, "Test method must not be None")
    hints = _type_hints(func)
    params = list(inspect.signature(func).parameters.values())
    if params and params[0].name in RECEIVER_NAMES:
        params = params[1:]
    return MethodDescriptor(
        name=func.__name__,
        parameter_types=tuple(
            ParameterTypeDescriptor(
                simple_type_name(hints.get(p.name, p.annotation))
            )
            for p in params
            if p.kind not in _SKIPPED_KINDS
        ),
        declaring_class=declaring_class,
    )


def simple_type_name(annotation: Any) -> str:
    """Return the simple name of a parameter annotation.

    String annotations that could not be evaluated are read the same way, so
    ``"Optional[pkg.Thing]"`` and ``Optional[Thing]`` give the same name.

    Examples:
        ``int`` -> ``"int"``, ``list[int]`` -> ``"list"``,
        ``"pkg.mod.Thing"`` -> ``"Thing"``, ``int | None`` -> ``"int | None"``.
    """
    if annotation is inspect.Parameter.empty:
        return UNANNOTATED_TYPE_NAME
    if annotation is None or annotation is types.NoneType:
        return "None"
    if isinstance(annotation, str):
        return _string_type_name(annotation)
    origin = typing.get_origin(annotation)
    if origin is typing.Annotated:
        return simple_type_name(typing.get_args(annotation)[0])
    if origin in (typing.Union, types.UnionType):
        return " | ".join(simple_type_name(a) for a in typing.get_args(annotation))
    if origin is not None:
        annotation = origin
    if isinstance(annotation, type):
        return annotation.__name__
    return str(annotation).rsplit(".", 1)[-1]


def find_test_methods(
    cls: type, prefix: str = "test"
) -> list[tuple[type, Callable[..., Any]]]:
    """List the test methods of a class with the class that declares each one.

    Methods are ordered by first definition, base classes first. An override
    keeps the position of the method it overrides. A subclass that rebinds a
    test name to something other than a function (``test_x = None``) removes
    the inherited test.

    Args:
        cls: The test class.
        prefix: Name prefix identifying test methods.

    Returns:
        ``(declaring_class, function)`` pairs.
    """
    found: dict[str, tuple[type, Callable[..., Any]]] = {}
    for klass in reversed(cls.__mro__):
        if klass is object:
            continue
        for name, member in vars(klass).items():
            if not name.startswith(prefix):
                continue
            if inspect.isfunction(member):
                found[name] = (klass, member)
            else:
                found.pop(name, None)
    return list(found.values())


def nested_classes(cls: type) -> list[type]:
    """Return the classes defined in the body of ``cls``, in definition order."""
    return [
        member
        for member in vars(cls).values()
        if isinstance(member, type)
        and member.__qualname__ == f"{cls.__qualname__}.{member.__name__}"
    ]


def _type_hints(func: Callable[..., Any]) -> dict[str, Any]:
    try:
        return typing.get_type_hints(func)
    except (NameError, TypeError):
        pass
    # resolve what can be resolved; the rest stays a string
    globalns = getattr(inspect.unwrap(func), "__globals__", {})
    return {
        name: _evaluate(annotation, globalns)
        for name, annotation in getattr(func, "__annotations__", {}).items()
    }


def _evaluate(annotation: Any, globalns: dict[str, Any]) -> Any:
    if not isinstance(annotation, str):
        return annotation
    try:
        return eval(annotation, globalns)  # pylint: disable=eval-used
    except (NameError, AttributeError, SyntaxError, TypeError):
        return annotation


def _string_type_name(text: str) -> str:
    parts = _split_top_level(text, "|")
    if len(parts) > 1:
        return " | ".join(_string_type_name(p) for p in parts)
    head, bracket, rest = text.strip().partition("[")
    name = head.strip().strip("'\"").rsplit(".", 1)[-1]
    if bracket:
        args = _split_top_level(rest.rstrip().removesuffix("]"), ",")
        if name == "Optional":
            return f"{_string_type_name(args[0])} | None"
        if name == "Union":
            return " | ".join(_string_type_name(a) for a in args)
    return name or text


def _split_top_level(text: str, sep: str) -> list[str]:
    parts: list[str] = []
    depth = start = 0
    for i, char in enumerate(text):
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
        elif char == sep and depth == 0:
            parts.append(text[start:i])
            start = i + 1
    parts.append(text[start:])
    return parts
