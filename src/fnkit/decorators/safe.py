"""@safe decorator for turning raised exceptions into Fail."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, overload

import wrapt

from fnkit._config import get_config
from fnkit._logging import get_logger
from fnkit.types.error import Error, ExceptionError
from fnkit.types.result import Fail, Ok
from fnkit.types.unit import Unit, unit

__all__ = ["safe"]

logger = get_logger(__name__)


@overload
def safe[**P, T](
    func: Callable[P, T],
) -> Callable[P, Ok[T] | Fail[ExceptionError]]: ...


@overload
def safe[**P, T](
    func: None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Ok[T] | Fail[ExceptionError]]]: ...


def safe[**P, T](
    func: Callable[P, T] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Decorator that catches exceptions and returns Fail.

    Wraps a function so that it returns Ok(value) on success and
    Fail(Error.from_exception(exc)) if one of the given exceptions is
    raised. A function returning None succeeds with Ok(unit). Other
    exceptions propagate.

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(ValueError, TypeError))
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to catch. Defaults to the
            ``capture`` setting of the configuration, (Exception,) unless
            changed through init().

    Example:
        ```python
        @safe
        def divide(a: int, b: int) -> float:
            return a / b
        divide(10, 2)
        # Ok(value=5.0)
        divide(10, 0)
        # Fail(error=ExceptionError(message='division by zero', exception=ZeroDivisionError(...)))
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,  # noqa: ARG001
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[T | Unit] | Fail[ExceptionError]:
        catch = exceptions if exceptions is not None else get_config().capture
        try:
            value = wrapped(*args, **kwargs)
        except catch as e:
            logger.debug(
                "exception captured",
                function=getattr(wrapped, "__qualname__", repr(wrapped)),
                exc_type=type(e).__name__,
                exc_message=str(e),
            )
            return Fail(Error.from_exception(e))
        return Ok(unit if value is None else value)

    if func is not None:
        return wrapper(func)
    return wrapper
