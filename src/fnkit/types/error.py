"""Error type: the polymorphic failure payload of Result[T]."""

from __future__ import annotations

import msgspec

__all__ = ["Error", "ExceptionError"]


class Error(msgspec.Struct, frozen=True):
    """Base failure reason carried by Fail.

    Subclass it to describe domain failures. Exceptions convert into it
    through ``Error.from_exception`` so that failures look the same whatever
    their origin.

    Examples:
        >>> Error("user not found")
        Error(message='user not found')
        >>> Error.from_exception(KeyError("id")).message
        "'id'"
    """

    message: str

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_exception(cls, exc: BaseException) -> ExceptionError:
        """Wrap an exception as an Error.

        Args:
            exc: The exception to wrap.

        Returns:
            ExceptionError holding the exception and its message. The type
            name is used when the exception has no message.
        """
        return ExceptionError(message=str(exc) or type(exc).__name__, exception=exc)


class ExceptionError(Error, frozen=True):
    """Error that originates from a raised exception."""

    exception: BaseException | None = None
