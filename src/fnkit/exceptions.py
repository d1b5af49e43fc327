"""Exceptions raised when the Option/Result contracts are violated.

Domain failures travel as data (Nothing, Fail). The exceptions below are
reserved for misuse of the API itself: passing None where a value is
required, reading the error of a success, or forcing a value out of an
empty container.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "FnkitError",
    "NullValueError",
    "OptionCastError",
    "OptionError",
    "ResultCastError",
    "ResultStateError",
]


class FnkitError(Exception):
    """Base class for all fnkit contract violations."""


class NullValueError(FnkitError, ValueError):
    """None was given where a value is required."""

    def __init__(self, name: str = "value") -> None:
        self.name = name
        super().__init__(f"{name} must not be None")


class OptionError(FnkitError, RuntimeError):
    """An Option callback produced None."""


class OptionCastError(OptionError):
    """A value was forced out of Nothing."""

    def __init__(self, message: str = "Called unwrap on Nothing") -> None:
        super().__init__(message)


class ResultStateError(FnkitError, RuntimeError):
    """A payload was read from the wrong Result variant."""

    def __init__(self, message: str = "Ok has no error") -> None:
        super().__init__(message)


class ResultCastError(FnkitError, RuntimeError):
    """A value was forced out of Fail.

    The original failure payload is kept on ``error`` so that its provenance
    survives the failed extraction.
    """

    def __init__(self, error: Any, message: str | None = None) -> None:
        self.error = error
        super().__init__(f"{message or 'Called unwrap on Fail'}: {error!r}")
