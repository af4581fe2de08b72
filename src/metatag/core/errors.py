"""Error types for metatag.

Resolution itself never raises for "nothing found": a missing tag or a
missing equivalent method is reported as ``None``. The errors here cover
misuse only: absent required arguments and malformed tag declarations.
"""
from __future__ import annotations

from typing import Any


class MetatagError(Exception):
    """Mixin base for every error raised by metatag."""


def require(value: Any, argument: str) -> None:
    """Raise ``InvalidArgumentError`` when ``value`` is ``None``."""
    if value is None:
        raise InvalidArgumentError(argument, f"{argument} must not be None")


class InvalidArgumentError(MetatagError, ValueError):
    """Raised when a required argument is absent or empty.

    Parameters
    ----------
    argument:
        Name of the offending parameter, e.g. ``"tag_kind"``.
    message:
        Human-readable description of the problem.
    """

    def __init__(self, argument: str, message: str) -> None:
        self.argument = argument
        super().__init__(message)


class DuplicateTagError(MetatagError, ValueError):
    """Raised when an element is tagged twice with the same tag kind."""

    def __init__(self, kind_name: str, target_name: str) -> None:
        self.kind_name = kind_name
        self.target_name = target_name
        super().__init__(
            f"{target_name!r} already carries a {kind_name!r} tag. "
            "A tag kind may be attached to an element at most once."
        )


class MethodNotFoundError(MetatagError, AttributeError):
    """Raised by ``MethodRef.of`` when a class has no member of that name."""

    def __init__(self, owner_name: str, method_name: str) -> None:
        self.owner_name = owner_name
        self.method_name = method_name
        super().__init__(
            f"{owner_name!r} has no method {method_name!r} "
            "(object's own members are never considered)."
        )
