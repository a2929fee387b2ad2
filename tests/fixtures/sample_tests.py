"""Test classes for introspection and CLI tests.

The class names do not start with ``Test`` so pytest does not collect them.
"""

from moniker.adapters.introspection import display_name_generation
from moniker.domain.value_objects import Style

from .generators import ShoutingGenerator

# pylint: disable=missing-function-docstring, unused-argument


class My_Type:  # pylint: disable=invalid-name
    """A parameter type whose name contains an underscore."""


class CalculatorTests:
    """No settings declared."""

    def helper(self):
        pass

    def test_add_two_numbers(self, a: int, b: int):
        pass

    def test_no_args(self):
        pass

    def test_compute(self, value: My_Type):
        pass


@display_name_generation(Style.UNDERSCORE)
class Underscored_Calculator_Tests:  # pylint: disable=invalid-name
    """Declares the underscore style; nested classes inherit it."""

    def test_add_two_numbers(self, a: int, b: int):
        pass

    class Inner_Fixture:  # pylint: disable=invalid-name
        def test_compute_with_type(self, value: My_Type):
            pass

    @display_name_generation(generator=ShoutingGenerator)
    class Loud_Fixture:  # pylint: disable=invalid-name
        def test_quietly(self):
            pass


class InheritedCalculatorTests(CalculatorTests):
    """Adds one test and overrides one inherited test."""

    def test_no_args(self):
        pass

    def test_subtract(self, a: float, b: float):
        pass


@display_name_generation(generator="tests.fixtures.generators:ShoutingGenerator")
class ReferencedGeneratorTests:
    """Declares a custom generator by import reference."""

    def test_it_works(self):
        pass


@display_name_generation(generator="tests.fixtures.generators:NotAGenerator")
class BrokenGeneratorTests:
    """Declares a reference that is not a generator."""

    def test_never_named(self):
        pass
