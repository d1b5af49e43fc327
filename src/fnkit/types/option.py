"""Option type: Some[T] | Nothing for optional values."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from fnkit.exceptions import NullValueError, OptionCastError, OptionError

if TYPE_CHECKING:
    from fnkit.types.result import Fail, Ok

__all__ = ["Nothing", "NothingType", "Option", "Some", "optional"]


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Some represents the presence of a value. The value is never None:
    constructing ``Some(None)`` raises NullValueError instead of quietly
    producing Nothing.

    Some compares equal to another Some holding an equal value, and also to
    the bare value itself.

    Examples:
        >>> some = Some(42)
        >>> some.if_none(0)
        42
        >>> some.map(lambda x: x * 2)
        Some(value=84)
        >>> Some(42) == 42
        True
    """

    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            raise NullValueError("value")

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True if the option is Some.

        This method provides type narrowing - after checking is_some(),
        the type checker knows the option is Some[T].
        """
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def try_get_value(self) -> tuple[bool, T]:
        """Return ``(True, value)``."""
        return True, self.value

    def unwrap(self) -> T:
        """Return the contained Some value.

        Since this is Some, this always succeeds.
        """
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained Some value, ignoring the message."""
        return self.value

    def if_none(self, fallback: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the fallback."""
        return self.value

    def if_none_else(self, on_fallback: Callable[[], T]) -> T:
        """Return the contained value without calling the fallback function.

        Raises:
            NullValueError: If on_fallback is None.
        """
        if on_fallback is None:
            raise NullValueError("on_fallback")
        return self.value

    def if_none_unsafe(self, fallback: T | None) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the fallback."""
        return self.value

    def if_none_unsafe_else(self, on_fallback: Callable[[], T | None]) -> T:
        """Return the contained value without calling the fallback function."""
        if on_fallback is None:
            raise NullValueError("on_fallback")
        return self.value

    def match[U](self, on_some: Callable[[T], U], on_none: Callable[[], U]) -> U:  # noqa: ARG002
        """Apply on_some to the contained value.

        Args:
            on_some: Function applied to the value.
            on_none: Ignored.

        Returns:
            The result of on_some.

        Raises:
            OptionError: If on_some returns None.
        """
        result = on_some(self.value)
        if result is None:
            raise OptionError("Some function produced None")
        return result

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Some value. It must not return None;
                use map_optional when it may.

        Returns:
            Some containing the result of applying f to the value.

        Raises:
            NullValueError: If f returns None.
        """
        return Some(f(self.value))

    def map_optional[U](self, f: Callable[[T], U | None]) -> Some[U] | NothingType:
        """Apply a function that may return None.

        Returns:
            Some(result), or Nothing if f returned None.
        """
        return optional(f(self.value))

    def bind[U](self, f: Callable[[T], Some[U] | NothingType]) -> Some[U] | NothingType:
        """Apply a function that returns an Option to the contained value.

        Also known as flatmap or and_then.

        Args:
            f: Function that takes T and returns Option[U].

        Returns:
            The Option returned by f.
        """
        return f(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Return Some if the predicate is satisfied, else Nothing.

        Args:
            predicate: Function that returns True to keep the value.

        Returns:
            Some(value) if predicate(value) is True, else Nothing.
        """
        if predicate(self.value):
            return self
        return Nothing

    def try_cast[U](self, cls: type[U]) -> Some[U] | NothingType:
        """Narrow the value to ``cls``.

        Returns:
            Some(value) if the value is an instance of cls, else Nothing.
        """
        if isinstance(self.value, cls):
            return self  # type: ignore[return-value]
        return Nothing

    def fold[U](self, seed: U, folder: Callable[[U, T], U]) -> U:
        """Return ``folder(seed, value)``."""
        return folder(seed, self.value)

    def tee(self, action: Callable[[T], Any]) -> Some[T]:
        """Run a side effect on the value and return self unchanged."""
        action(self.value)
        return self

    def flatten[U](self: Some[Some[U] | NothingType]) -> Some[U] | NothingType:
        """Flatten a nested Option.

        Converts Option[Option[T]] into Option[T].
        """
        return self.value  # type: ignore[return-value]

    def zip[U, R](
        self,
        other: Some[U] | NothingType,
        combine: Callable[[T, U], R] | None = None,
    ) -> Some[R] | NothingType:
        """Combine two Some values.

        If both are Some, returns Some(combine(self.value, other.value)), or
        Some((self.value, other.value)) when no combine function is given.
        If other is Nothing, returns Nothing.
        """
        if isinstance(other, Some):
            if combine is None:
                return Some((self.value, other.value))  # type: ignore[arg-type]
            return Some(combine(self.value, other.value))
        return Nothing

    def or_(self, _other: Some[T] | NothingType) -> Some[T]:
        """Return self if Some, else return other.

        Since this is Some, returns self.
        """
        return self

    def or_else(self, _f: Callable[[], Some[T] | NothingType]) -> Some[T]:
        """Return self unchanged since this is Some."""
        return self

    def to_result[E](self, error: E) -> Ok[T]:  # noqa: ARG002
        """Convert to Result, returning Ok(value).

        Args:
            error: Ignored error value.

        Returns:
            Ok containing the value.
        """
        from fnkit.types.result import Ok

        return Ok(self.value)

    def to_result_else[E](self, on_error: Callable[[], E]) -> Ok[T]:  # noqa: ARG002
        """Convert to Result, returning Ok(value) without calling the factory."""
        from fnkit.types.result import Ok

        return Ok(self.value)

    def __bool__(self) -> bool:
        return True

    def __iter__(self) -> Iterator[T]:
        yield self.value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Some):
            return self.value == other.value
        if isinstance(other, NothingType):
            return False
        return self.value == other

    def __ne__(self, other: object) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return hash(self.value)

    def __or__(self, other: Some[T] | NothingType) -> Some[T]:
        """Alternative operator: ``Some(x) | other`` is ``Some(x)``."""
        if isinstance(other, Some | NothingType):
            return self
        return NotImplemented


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    Nothing represents the absence of a value. Operations on Nothing
    return Nothing or a fallback, never raise, with the exception of the
    explicit unwrap/expect extractions.

    This is a singleton - use the `Nothing` constant instead of
    instantiating directly.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.if_none(0)
        0
        >>> bool(Nothing)
        False
    """

    def is_some(self) -> TypeIs[Some[Any]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True if the option is Nothing.

        This method provides type narrowing - after checking is_none(),
        the type checker knows the option is Nothing.
        """
        return True

    def try_get_value(self) -> tuple[bool, None]:
        """Return ``(False, None)``."""
        return False, None

    def unwrap(self) -> NoReturn:
        """Raise an exception since this is Nothing.

        Raises:
            OptionCastError: Always, since Nothing has no value to unwrap.
        """
        raise OptionCastError

    def expect(self, msg: str) -> NoReturn:
        """Raise an exception with a custom message.

        Raises:
            OptionCastError: Always, with the custom message.
        """
        raise OptionCastError(msg)

    def if_none[T](self, fallback: T) -> T:
        """Return the fallback.

        Raises:
            NullValueError: If the fallback is None. Use if_none_unsafe when
                a None fallback is intended.
        """
        if fallback is None:
            raise NullValueError("fallback")
        return fallback

    def if_none_else[T](self, on_fallback: Callable[[], T]) -> T:
        """Compute and return a fallback value.

        Raises:
            NullValueError: If on_fallback is None.
            OptionError: If on_fallback returns None.
        """
        if on_fallback is None:
            raise NullValueError("on_fallback")
        fallback = on_fallback()
        if fallback is None:
            raise OptionError("Fallback function produced None")
        return fallback

    def if_none_unsafe[T](self, fallback: T | None) -> T | None:
        """Return the fallback, which may be None."""
        return fallback

    def if_none_unsafe_else[T](self, on_fallback: Callable[[], T | None]) -> T | None:
        """Compute and return a fallback value, which may be None."""
        if on_fallback is None:
            raise NullValueError("on_fallback")
        return on_fallback()

    def match[U](self, on_some: Callable[[Any], U], on_none: Callable[[], U]) -> U:  # noqa: ARG002
        """Call on_none.

        Raises:
            OptionError: If on_none returns None.
        """
        result = on_none()
        if result is None:
            raise OptionError("None function produced None")
        return result

    def map(self, _f: Callable[[Any], Any]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def map_optional(self, _f: Callable[[Any], Any]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def bind(self, _f: Callable[[Any], Any]) -> NothingType:
        """Return Nothing since there's no value to bind."""
        return self

    def filter(self, _predicate: Callable[[Any], bool]) -> NothingType:
        """Return Nothing since there's no value to filter."""
        return self

    def try_cast(self, _cls: type) -> NothingType:
        """Return Nothing since there's no value to cast."""
        return self

    def fold[U](self, seed: U, folder: Callable[[U, Any], U]) -> U:  # noqa: ARG002
        """Return the seed unchanged."""
        return seed

    def tee(self, _action: Callable[[Any], Any]) -> NothingType:
        """Return Nothing without running the action."""
        return self

    def flatten(self) -> NothingType:
        """Return Nothing since there's nothing to flatten."""
        return self

    def zip(self, other: Any, combine: Callable[..., Any] | None = None) -> NothingType:  # noqa: ARG002
        """Return Nothing since self is Nothing."""
        return self

    def or_[T](self, other: Some[T] | NothingType) -> Some[T] | NothingType:
        """Return other since self is Nothing."""
        return other

    def or_else[T](self, f: Callable[[], Some[T] | NothingType]) -> Some[T] | NothingType:
        """Apply a recovery function since this is Nothing.

        Args:
            f: Function that returns a new Option.

        Returns:
            The Option returned by f.
        """
        return f()

    def to_result[E](self, error: E) -> Fail[E]:
        """Convert to Result, returning Fail(error).

        Args:
            error: The error value to wrap.

        Returns:
            Fail containing the error.
        """
        from fnkit.types.result import Fail

        return Fail(error)

    def to_result_else[E](self, on_error: Callable[[], E]) -> Fail[E]:
        """Convert to Result, computing the error.

        Args:
            on_error: Function that produces the error value.

        Returns:
            Fail containing the computed error.
        """
        from fnkit.types.result import Fail

        return Fail(on_error())

    def __bool__(self) -> bool:
        return False

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def __or__[T](self, other: Some[T] | NothingType) -> Some[T] | NothingType:
        """Alternative operator: ``Nothing | other`` is ``other``."""
        if isinstance(other, Some | NothingType):
            return other
        return NotImplemented


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


def optional[T](value: T | None) -> Some[T] | NothingType:
    """Lift a possibly-None value into an Option.

    Examples:
        >>> optional(5)
        Some(value=5)
        >>> optional(None)
        NothingType()
    """
    if value is None:
        return Nothing
    return Some(value)
