"""Option-returning lookups over plain collections."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping

from fnkit.types.option import Nothing, NothingType, Some, optional

__all__ = ["first_or_none", "try_get_value"]


def first_or_none[T](
    iterable: Iterable[T],
    predicate: Callable[[T], bool] | None = None,
) -> Some[T] | NothingType:
    """Return the first element matching predicate.

    Args:
        iterable: Elements to scan, in order.
        predicate: Match condition. When omitted, the first element matches.

    Returns:
        Some(element) for the first match, Nothing if there is none. A
        matching element that is None also gives Nothing.

    Examples:
        >>> first_or_none([1, 2, 3], lambda x: x > 1)
        Some(value=2)
        >>> first_or_none([], lambda x: x > 1)
        NothingType()
    """
    for item in iterable:
        if predicate is None or predicate(item):
            return optional(item)
    return Nothing


def try_get_value[K, V](mapping: Mapping[K, V], key: K) -> Some[V] | NothingType:
    """Look a key up as an Option.

    Raises:
        NullValueError: If the key is present but maps to None.
    """
    if key not in mapping:
        return Nothing
    return Some(mapping[key])
