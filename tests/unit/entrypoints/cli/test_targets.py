"""Unit tests for importing CLI targets."""

import sys
from pathlib import Path

import click
import pytest

from moniker.entrypoints.cli.helpers.targets import import_target
from tests.fixtures import sample_tests


def test_import_top_level_class():
    """A module:Class reference returns the class."""
    assert (
        import_target("tests.fixtures.sample_tests:CalculatorTests")
        is sample_tests.CalculatorTests
    )


def test_import_nested_class():
    """The class part may be dotted."""
    target = import_target(
        "tests.fixtures.sample_tests:Underscored_Calculator_Tests.Inner_Fixture"
    )
    assert target is sample_tests.Underscored_Calculator_Tests.Inner_Fixture


def test_import_from_search_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """A directory is on sys.path only while the import runs."""
    monkeypatch.setattr(sys, "path", list(sys.path))
    (tmp_path / "standalone_case_module.py").write_text(
        "class Case:\n    def test_one(self):\n        pass\n", encoding="utf-8"
    )
    target = import_target("standalone_case_module:Case", tmp_path)
    assert target.__name__ == "Case"
    assert str(tmp_path) not in sys.path


@pytest.mark.parametrize(
    ("reference", "message"),
    [
        ("tests.fixtures.sample_tests", "Expected 'package.module:ClassName'"),
        (":CalculatorTests", "Expected 'package.module:ClassName'"),
        ("no_such_module_xyz:Thing", "Cannot import module 'no_such_module_xyz'"),
        ("tests.fixtures.sample_tests:Nope", "'Nope' not found"),
        ("tests.fixtures.generators:NOT_A_CLASS", "is not a class"),
    ],
)
def test_import_failures(reference: str, message: str):
    """Bad references raise click.BadParameter with a helpful message."""
    with pytest.raises(click.BadParameter, match=message):
        import_target(reference)
