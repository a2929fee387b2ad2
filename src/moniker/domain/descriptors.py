"""Descriptors for the test classes and methods being named.

Descriptors carry names that were resolved once, when the test was
discovered, so that display name generators never need to introspect live
objects. See `moniker.adapters.introspection` for building them from Python
classes and functions.
"""

from __future__ import annotations

from dataclasses import dataclass

from .value_objects import DisplayNameGeneration


@dataclass(frozen=True)
class ParameterTypeDescriptor:
    """The declared type of a single method parameter."""

    simple_name: str


@dataclass(frozen=True)
class ClassDescriptor:
    """A test class (top-level or nested).

    Attributes:
        qualified_name: Fully-qualified name, e.g. ``"tests.test_calc.Calculator"``.
        simple_name: Unqualified name, e.g. ``"Calculator"``.
        generation: Display name settings declared on this class, if any.
        enclosing: Descriptor settings are inherited from when ``generation``
            is ``None`` (the enclosing class of a nested test class).
    """

    qualified_name: str
    simple_name: str
    generation: DisplayNameGeneration | None = None
    enclosing: ClassDescriptor | None = None


@dataclass(frozen=True)
class MethodDescriptor:
    """A test method.

    Attributes:
        name: Simple method name.
        parameter_types: Declared parameter types, in declaration order.
        declaring_class: Class the method was declared on. This can differ
            from the class the method is run on when it is inherited.
    """

    name: str
    parameter_types: tuple[ParameterTypeDescriptor, ...] = ()
    declaring_class: ClassDescriptor | None = None
