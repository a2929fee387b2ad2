"""Built-in display name generators.

Each member of `Style` maps to one shared, stateless generator instance.
The underscore generator reuses the default generator for every base name so
the two never disagree on how parameter types are rendered.
"""

from moniker.domain.descriptors import ClassDescriptor, MethodDescriptor
from moniker.domain.utils import not_none
from moniker.domain.value_objects import Style
from moniker.interfaces.name_generator import (
    DisplayNameGenerator,
    parameter_types_as_string,
)

# pylint: disable=too-few-public-methods

TEST_CLASS_MSG = "Test class must not be None"
NESTED_CLASS_MSG = "Nested test class must not be None"
TEST_METHOD_MSG = "Test method must not be None"


class DefaultGenerator(DisplayNameGenerator):
    """Display names as declared: class names and ``method(ParamType, ...)``."""

    def generate_display_name_for_class(self, test_class: ClassDescriptor) -> str:
        name = not_none(test_class, TEST_CLASS_MSG).qualified_name
        # no dot: rfind() gives -1 and the whole name is kept
        return name[name.rfind(".") + 1 :]

    def generate_display_name_for_nested_class(
        self, nested_class: ClassDescriptor
    ) -> str:
        return not_none(nested_class, NESTED_CLASS_MSG).simple_name

    def generate_display_name_for_method(
        self, test_class: ClassDescriptor, test_method: MethodDescriptor
    ) -> str:
        not_none(test_class, TEST_CLASS_MSG)
        not_none(test_method, TEST_METHOD_MSG)
        return test_method.name + parameter_types_as_string(test_method)


class UnderscoreGenerator(DisplayNameGenerator):
    """Replace all underscore characters in class and method names with spaces.

    Parameter type names are left untouched.
    """

    def generate_display_name_for_class(self, test_class: ClassDescriptor) -> str:
        return replace_underscores(
            DEFAULT.generate_display_name_for_class(test_class)
        )

    def generate_display_name_for_nested_class(
        self, nested_class: ClassDescriptor
    ) -> str:
        return replace_underscores(
            DEFAULT.generate_display_name_for_nested_class(nested_class)
        )

    def generate_display_name_for_method(
        self, test_class: ClassDescriptor, test_method: MethodDescriptor
    ) -> str:
        not_none(test_class, TEST_CLASS_MSG)
        not_none(test_method, TEST_METHOD_MSG)
        # don't replace underscores in parameter type names
        return replace_underscores(test_method.name) + parameter_types_as_string(
            test_method
        )


def replace_underscores(name: str) -> str:
    """Return ``name`` with every ``"_"`` replaced by a single space."""
    return name.replace("_", " ")


DEFAULT = DefaultGenerator()
UNDERSCORE = UnderscoreGenerator()

BUILTIN_GENERATORS: dict[Style, DisplayNameGenerator] = {
    Style.DEFAULT: DEFAULT,
    Style.UNDERSCORE: UNDERSCORE,
}


def builtin_generator(style: Style) -> DisplayNameGenerator:
    """Return the shared generator instance for a built-in style."""
    return BUILTIN_GENERATORS[style]
