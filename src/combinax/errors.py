"""Structured error types for guard and precondition failures."""

from __future__ import annotations

from .config import GUARD_MESSAGE_SEPARATOR


class CombinatorError(Exception):
    """Base class for structured combinax errors."""


class GuardError(CombinatorError):
    """Raised by a ``condition1`` guard when its validators report failures."""

    def __init__(self, messages, separator: str = GUARD_MESSAGE_SEPARATOR) -> None:
        self.messages: tuple[str, ...] = tuple(messages)
        self.separator = separator
        super().__init__(separator.join(self.messages))

    @classmethod
    def from_messages(cls, messages, *, separator: str | None = None) -> "GuardError":
        if separator is None:
            return cls(messages)
        return cls(messages, separator)

    def __reduce__(self):
        return (type(self), (self.messages, self.separator))

    def __str__(self) -> str:
        return self.separator.join(self.messages)


class PreconditionError(CombinatorError):
    """A required argument was absent when a produced function was invoked."""


class CombinatorTypeError(CombinatorError, TypeError):
    """A combinator was built from a value of the wrong kind."""


def require_callable(value: object, *, where: str) -> None:
    if not callable(value):
        raise CombinatorTypeError(f"{where} must be callable, got {type(value).__name__}")
