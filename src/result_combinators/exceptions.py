"""Exceptions raised by result_combinators.

Every exception here marks a contract violation (accessing the wrong variant,
reaching an unreachable state, a collaborator constructor that cannot be
invoked). Ordinary failures travel as ``Err`` values instead.
"""

from __future__ import annotations


class ResultException(Exception):
    """Base exception for the package."""


class UnwrapError(ResultException):
    """Raised when a payload is extracted from the wrong variant.

    Attributes:
        payload: The payload actually held by the variant that was accessed.
    """

    def __init__(self, message: str, payload: object) -> None:
        super().__init__(message)
        self.message = message
        self.payload = payload


class UnwrapOnErrError(UnwrapError):
    """Raised by unwrap() or expect() on an Err."""


class UnwrapErrOnOkError(UnwrapError):
    """Raised by unwrap_err() or expect_err() on an Ok."""


class UnreachableStateError(ResultException):
    """Raised by into_ok() on an Err or into_err() on an Ok."""


class ConstructionError(ResultException):
    """Raised when an Option collaborator constructor could not be invoked.

    Attributes:
        constructor: The callable that failed.
        cause: The exception it raised.
    """

    def __init__(self, constructor: object, cause: Exception) -> None:
        name = getattr(constructor, "__qualname__", repr(constructor))
        super().__init__(f"Could not construct {name}: {cause}")
        self.constructor = constructor
        self.cause = cause


class SettingsError(ResultException):
    """Raised when message settings cannot be parsed from configuration."""
