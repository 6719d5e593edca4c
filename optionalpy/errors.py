from __future__ import annotations
from typing import Any


class OptionalError(Exception):
    pass


class InvariantViolation(OptionalError, ValueError):
    """A caller broke a precondition (absent value for `of`, bad callback, ...)."""


class NoSuchElement(OptionalError, LookupError):
    """A value was requested from an empty Optional."""


def require_callable(fn: Any, name: str) -> None:
    if not callable(fn):
        raise InvariantViolation(f"{name} must be callable, got {type(fn).__name__}")
