"""Interface for display name generators.

A display name generator turns the descriptor of a test class, nested test
class or test method into the label shown in reports and UIs. Implementations
must be pure: the same descriptors always produce the same names.
"""

import abc

from moniker.domain.descriptors import ClassDescriptor, MethodDescriptor
from moniker.domain.utils import not_none


def parameter_types_as_string(method: MethodDescriptor) -> str:
    """Compile a string representation from all simple parameter type names.

    Args:
        method: The method providing parameter types for the result.

    Returns:
        The simple type names in declaration order, separated by ``", "`` and
        wrapped in parentheses, e.g. ``"(int, str)"``; ``"()"`` if the method
        has no parameters.

    Raises:
        InvalidArgumentError: If ``method`` is ``None``.
    """
    not_none(method, "Method must not be None")
    return "(" + ", ".join(t.simple_name for t in method.parameter_types) + ")"


class DisplayNameGenerator(abc.ABC):
    """Contract for generating display names programmatically."""

    parameter_types_as_string = staticmethod(parameter_types_as_string)

    @abc.abstractmethod
    def generate_display_name_for_class(self, test_class: ClassDescriptor) -> str:
        """Generate a display name for a top-level or static nested test class."""

    @abc.abstractmethod
    def generate_display_name_for_nested_class(
        self, nested_class: ClassDescriptor
    ) -> str:
        """Generate a display name for a nested (inner) test class."""

    @abc.abstractmethod
    def generate_display_name_for_method(
        self, test_class: ClassDescriptor, test_method: MethodDescriptor
    ) -> str:
        """Generate a display name for a test method.

        Args:
            test_class: The class the test method is run on.
            test_method: The method to generate a display name for.

        Note:
            ``test_class`` may differ from ``test_method.declaring_class``,
            e.g. when the method is inherited from a base class.
        """
