"""Argument checks shared by requests and the API client."""

from __future__ import annotations

from typing import Optional, Sized, TypeVar

T = TypeVar("T")
S = TypeVar("S", bound=Sized)


class InvalidArgumentError(ValueError):
    """Raised when an argument is present but unusable, e.g. an empty tag."""


class MissingArgumentError(InvalidArgumentError):
    """Raised when a required argument is ``None``."""


def check_not_none(value: Optional[T], name: str) -> T:
    """Return ``value`` unless it is ``None``.

    Raises:
        MissingArgumentError: If ``value`` is ``None``.
    """

    if value is None:
        raise MissingArgumentError(f"{name} is required")
    return value


def check_string(value: Optional[str], name: str) -> str:
    """Return ``value`` if it is a non-empty string.

    Raises:
        MissingArgumentError: If ``value`` is ``None``.
        InvalidArgumentError: If ``value`` is empty.
    """

    check_not_none(value, name)
    if len(value) == 0:
        raise InvalidArgumentError(f"{name} must not be empty")
    return value


def check_not_empty(values: Optional[S], name: str) -> S:
    """Return ``values`` if it is a non-empty collection.

    ``None`` and an empty collection are both reported as invalid.
    """

    if not values:
        raise InvalidArgumentError(f"{name} must contain at least one element")
    return values


def check_not_string(values: Optional[S], name: str) -> Optional[S]:
    """Reject a bare string where a collection of strings is expected.

    Iterating ``"xyz"`` would otherwise yield ``x``, ``y`` and ``z``.
    """

    if isinstance(values, str):
        raise InvalidArgumentError(f"{name} must be a collection of strings, not a string")
    return values
