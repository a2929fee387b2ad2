"""Global pytest fixtures and default marks for MONIKER."""

from pathlib import Path

import pytest

from moniker.domain.descriptors import ClassDescriptor

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()
DIRECTORY_MARKS = {
    "unit": "unit",
    "contract": "contract",
    "integration": "integration",
    "e2e": "e2e",
}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark items with the name of their top-level test directory."""
    for item in items:
        try:
            top = item.path.resolve().relative_to(TESTS_ROOT).parts[0]
        except ValueError:
            continue
        marker_name = DIRECTORY_MARKS.get(top)
        if marker_name is None:
            continue
        if not any(marker.name == marker_name for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, marker_name))


@pytest.fixture
def calculator() -> ClassDescriptor:
    """Descriptor for a top-level ``com.example.Calculator`` test class."""
    return ClassDescriptor(
        qualified_name="com.example.Calculator", simple_name="Calculator"
    )


@pytest.fixture
def inner_fixture(calculator: ClassDescriptor) -> ClassDescriptor:
    """Descriptor for a nested ``Inner_Fixture`` class inside ``calculator``."""
    return ClassDescriptor(
        qualified_name="com.example.Calculator.Inner_Fixture",
        simple_name="Inner_Fixture",
        enclosing=calculator,
    )
