"""Combinators composing Option and Result values from the outside.

These functions only use the public API of the types, so they work with
any Option or Result regardless of how it was produced.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, overload

from fnkit.types.option import Nothing, NothingType, Some
from fnkit.types.result import Fail, Ok
from fnkit.types.unit import Unit, unit

__all__ = ["collect", "condition", "tee", "traverse", "unless", "when", "zip_with"]


def zip_with[A, B, R](
    a: Some[A] | NothingType,
    b: Some[B] | NothingType,
    combine: Callable[[A, B], R],
) -> Some[R] | NothingType:
    """Combine two options with a function.

    Returns:
        Some(combine(a, b)) if both options are Some, else Nothing.

    Examples:
        >>> zip_with(Some(2), Some(3), lambda x, y: x * y)
        Some(value=6)
        >>> zip_with(Some(2), Nothing, lambda x, y: x * y)
        NothingType()
    """
    return a.zip(b, combine)


def traverse[T, U, E](
    values: Iterable[T],
    f: Callable[[T], Ok[U] | Fail[E]],
) -> Ok[list[U]] | Fail[E]:
    """Apply a fallible function to every value.

    Values are processed in order. The first Fail stops the traversal: f is
    not called for any later value.

    Args:
        values: Values to map.
        f: Function returning a Result for each value.

    Returns:
        Ok with the mapped values in input order if every call succeeded,
        otherwise the first Fail.

    Examples:
        >>> traverse([1, 2, 3], lambda x: Ok(x * 2))
        Ok(value=[2, 4, 6])
        >>> traverse([1, -1, 3], lambda x: Ok(x) if x > 0 else Fail("neg"))
        Fail(error='neg')
    """
    mapped: list[U] = []
    for value in values:
        result = f(value)
        if isinstance(result, Fail):
            return result
        mapped.append(result.value)
    return Ok(mapped)


def collect[T, E](results: Iterable[Ok[T] | Fail[E]]) -> Ok[list[T]] | Fail[E]:
    """Collect an iterable of Results into a Result of list.

    Short-circuits on the first Fail encountered.

    Examples:
        >>> collect([Ok(1), Ok(2), Ok(3)])
        Ok(value=[1, 2, 3])
        >>> collect([Ok(1), Fail("fail"), Ok(3)])
        Fail(error='fail')
    """
    return traverse(results, _identity)


@overload
def condition[E](predicate: Callable[[], bool], error: E) -> Ok[Unit] | Fail[E]: ...


@overload
def condition[E](predicate: bool, error: E) -> Ok[Unit] | Fail[E]: ...  # noqa: FBT001


def condition[E](predicate: Callable[[], bool] | bool, error: E) -> Ok[Unit] | Fail[E]:
    """Guard clause: Ok(unit) if the predicate holds, else Fail(error).

    Useful at the head of a bind chain to stop on the first failed check.

    Args:
        predicate: A zero-argument callable, or a plain bool.
        error: The error to fail with.

    Returns:
        Ok(unit) if the predicate holds, Fail(error) otherwise.

    Example:
        ```python
        def validate(name: str, age: int) -> Result[dict]:
            return (
                condition(lambda: len(name) > 0, Error("name required"))
                .bind(lambda _: condition(age >= 0, Error("age must be non-negative")))
                .map(lambda _: {"name": name, "age": age})
            )
        ```
    """
    holds = predicate() if callable(predicate) else predicate
    if holds:
        return Ok(unit)
    return Fail(error)


def tee(action: Callable[[], Any]) -> Ok[Unit]:
    """Run a side effect and return Ok(unit).

    Lets an effect sit inside a fluent chain:
    ``load().bind(lambda cfg: tee(lambda: log.info("loaded")))``.
    """
    action()
    return Ok(unit)


def when(cond: bool, alternative: Some[Unit] | NothingType) -> Some[Unit] | NothingType:  # noqa: FBT001
    """Return the alternative if cond is true, else Nothing."""
    return alternative if cond else Nothing


def unless(cond: bool, alternative: Some[Unit] | NothingType) -> Some[Unit] | NothingType:  # noqa: FBT001
    """Return the alternative if cond is false, else Nothing."""
    return when(not cond, alternative)


def _identity[T](value: T) -> T:
    return value
