"""Result type: Ok[T] | Fail[E] for explicit error handling."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from fnkit.exceptions import NullValueError, ResultCastError, ResultStateError
from fnkit.types.error import Error, ExceptionError

if TYPE_CHECKING:
    from fnkit.types.option import NothingType, Some

__all__ = ["Fail", "Ok", "Result"]


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Ok represents the successful outcome of an operation. The value is
    never None; use ``Ok(unit)`` for a success that carries nothing.

    Examples:
        >>> ok = Ok(42)
        >>> ok.match(lambda x: x + 1, lambda e: 0)
        43
        >>> ok.map(lambda x: x * 2)
        Ok(value=84)
    """

    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            raise NullValueError("value")

    @property
    def error(self) -> NoReturn:
        """Ok has no error.

        Raises:
            ResultStateError: Always.
        """
        raise ResultStateError

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True if the result is Ok.

        This method provides type narrowing - after checking is_ok(),
        the type checker knows the result is Ok[T].
        """
        return True

    def is_fail(self) -> TypeIs[Fail[Any]]:
        """Return False since this is Ok."""
        return False

    def unwrap(self) -> T:
        """Return the contained Ok value.

        Since this is Ok, this always succeeds.
        """
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained Ok value, ignoring the message."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying f to the value.
        """
        return Ok(f(self.value))

    def map_err(self, f: Callable[[Any], Any]) -> Ok[T]:  # noqa: ARG002
        """Return self unchanged since this is Ok."""
        return self

    def bimap[U](self, f: Callable[[T], U], g: Callable[[Any], Any]) -> Ok[U]:  # noqa: ARG002
        """Apply f to the value; g is ignored since this is Ok."""
        return Ok(f(self.value))

    def bind[U, E](self, f: Callable[[T], Ok[U] | Fail[E]]) -> Ok[U] | Fail[E]:
        """Apply a function that returns a Result to the contained value.

        Also known as flatmap or and_then.

        Args:
            f: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by f.
        """
        return f(self.value)

    def or_else(self, f: Callable[[Any], Any]) -> Ok[T]:  # noqa: ARG002
        """Return self unchanged since this is Ok."""
        return self

    def match[U](self, on_ok: Callable[[T], U], on_error: Callable[[Any], U]) -> U:  # noqa: ARG002
        """Return ``on_ok(value)``."""
        return on_ok(self.value)

    def to_option(self) -> Some[T]:
        """Convert to Option, returning Some(value)."""
        from fnkit.types.option import Some

        return Some(self.value)

    def to_iterable(self) -> Iterable[T]:
        """Return a one-element iterable holding the value."""
        return (self.value,)

    def as_tuple(self) -> tuple[bool, T, None]:
        """Return ``(True, value, None)``."""
        return True, self.value, None

    def __bool__(self) -> bool:
        return True

    def __iter__(self) -> Iterator[T]:
        yield self.value


class Fail[E](msgspec.Struct, frozen=True, gc=False):
    """Failure variant of Result containing an error of type E.

    Fail represents the failed outcome of an operation. It wraps an error
    value that can be transformed, recovered from, or propagated. The error
    is never None.

    Examples:
        >>> fail = Fail(Error("something went wrong"))
        >>> fail.is_fail()
        True
        >>> fail.match(lambda x: x, lambda e: str(e))
        'something went wrong'
    """

    error: E

    def __post_init__(self) -> None:
        if self.error is None:
            raise NullValueError("error")

    @classmethod
    def from_exception(cls, exc: BaseException) -> Fail[ExceptionError]:
        """Build a Fail whose error wraps ``exc``."""
        return Fail(Error.from_exception(exc))

    def is_ok(self) -> TypeIs[Ok[Any]]:
        """Return False since this is Fail."""
        return False

    def is_fail(self) -> TypeIs[Fail[E]]:
        """Return True if the result is Fail.

        This method provides type narrowing - after checking is_fail(),
        the type checker knows the result is Fail[E].
        """
        return True

    def unwrap(self) -> NoReturn:
        """Raise an exception since this is Fail.

        When the error is an exception, or wraps one, it is chained as the
        cause of the raised exception.

        Raises:
            ResultCastError: Always, carrying the error.
        """
        self._raise(ResultCastError(self.error))

    def expect(self, msg: str) -> NoReturn:
        """Raise an exception with a custom message.

        Args:
            msg: Custom error message.

        Raises:
            ResultCastError: Always, with the custom message.
        """
        self._raise(ResultCastError(self.error, msg))

    def _raise(self, exc: ResultCastError) -> NoReturn:
        cause = _exception_of(self.error)
        if cause is not None:
            raise exc from cause
        raise exc

    def map(self, f: Callable[[Any], Any]) -> Fail[E]:  # noqa: ARG002
        """Return self unchanged since this is Fail."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Fail[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error value.

        Returns:
            Fail containing the transformed error.
        """
        return Fail(f(self.error))

    def bimap[F](self, f: Callable[[Any], Any], g: Callable[[E], F]) -> Fail[F]:  # noqa: ARG002
        """Apply g to the error; f is ignored since this is Fail."""
        return Fail(g(self.error))

    def bind(self, f: Callable[[Any], Any]) -> Fail[E]:  # noqa: ARG002
        """Return self unchanged since this is Fail.

        f is never called.
        """
        return self

    def or_else[T, F](self, f: Callable[[E], Ok[T] | Fail[F]]) -> Ok[T] | Fail[F]:
        """Apply a recovery function to the error.

        Args:
            f: Function that takes the error and returns a new Result.

        Returns:
            The Result returned by f.
        """
        return f(self.error)

    def match[U](self, on_ok: Callable[[Any], U], on_error: Callable[[E], U]) -> U:  # noqa: ARG002
        """Return ``on_error(error)``."""
        return on_error(self.error)

    def to_option(self) -> NothingType:
        """Convert to Option, discarding the error."""
        from fnkit.types.option import Nothing

        return Nothing

    def to_iterable(self) -> Iterable[Any]:
        """Return an empty iterable."""
        return ()

    def as_tuple(self) -> tuple[bool, None, E]:
        """Return ``(False, None, error)``."""
        return False, None, self.error

    def __bool__(self) -> bool:
        return False

    def __iter__(self) -> Iterator[Any]:
        return iter(())


type Result[T, E = Error] = Ok[T] | Fail[E]


def _exception_of(error: object) -> BaseException | None:
    if isinstance(error, BaseException):
        return error
    if isinstance(error, ExceptionError):
        return error.exception
    return None
