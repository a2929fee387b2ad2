"""Unit tests for moniker.config."""

import pytest

from moniker import config
from moniker.domain.value_objects import Style


def test_default_style_when_unset(monkeypatch: pytest.MonkeyPatch):
    """Without MONIKER_DEFAULT_STYLE the default style is used."""
    monkeypatch.delenv(config.DEFAULT_STYLE_ENV, raising=False)
    assert config.get_default_style() is Style.DEFAULT


def test_default_style_when_blank(monkeypatch: pytest.MonkeyPatch):
    """A blank MONIKER_DEFAULT_STYLE counts as unset."""
    monkeypatch.setenv(config.DEFAULT_STYLE_ENV, "  ")
    assert config.get_default_style() is Style.DEFAULT


@pytest.mark.parametrize("value", ["underscore", "UNDERSCORE", " Underscore "])
def test_default_style_from_env(monkeypatch: pytest.MonkeyPatch, value: str):
    """Style names are matched case-insensitively, ignoring surrounding spaces."""
    monkeypatch.setenv(config.DEFAULT_STYLE_ENV, value)
    assert config.get_default_style() is Style.UNDERSCORE


def test_unknown_style_from_env(monkeypatch: pytest.MonkeyPatch):
    """An unknown style name raises InvalidStyleError listing the choices."""
    monkeypatch.setenv(config.DEFAULT_STYLE_ENV, "camel")
    with pytest.raises(config.InvalidStyleError) as excinfo:
        config.get_default_style()
    assert excinfo.value.value == "camel"
    assert str(excinfo.value) == (
        "Unknown display name style 'camel' (expected: default, underscore)"
    )


def test_parse_style():
    """parse_style accepts every built-in style name."""
    for style in Style:
        assert config.parse_style(style.value) is style
    with pytest.raises(ValueError):
        config.parse_style("")
