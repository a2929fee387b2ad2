"""Domain layer utilities."""

from typing import TypeVar

from .errors import InvalidArgumentError

T = TypeVar("T")


def not_none(value: T | None, message: str) -> T:
    """Return ``value`` unchanged, or fail if it is ``None``.

    Args:
        value: The argument to check.
        message: Error message used when ``value`` is ``None``.

    Returns:
        The non-``None`` value.

    Raises:
        InvalidArgumentError: If ``value`` is ``None``.
    """
    if value is None:
        raise InvalidArgumentError(message)
    return value
