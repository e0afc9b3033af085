from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Iterable
from typing import Any

from ._iterator import TryContinueIter
from .result import Success, Failure, Result

logger = logging.getLogger(__name__)


def try_continue[T, E, R](
    outcomes: Iterable[Result[T, E]], func: Callable[[TryContinueIter[T, E]], R]
) -> Result[R, E]:
    """Process the values of successful outcomes as a plain iterator.

    This is useful to use ordinary iteration tools (sum, filter, list, ...) on the
    values produced by a fallible computation, while still knowing if one of the
    computations failed.

    Args:
        outcomes: The outcomes to process.
            Elements can be :class:`Success`/:class:`Failure` instances or
            :mod:`returns` containers.
        func: Called once with an iterator over the values of the successful
            outcomes.
            The iterator stops as soon as a failure is encountered.

    Returns:
        The value returned by `func` wrapped in a :class:`Success` if no failure was
        encountered during iteration, otherwise the first failure encountered.
        The failure is returned even if `func` computed a value.

    Raises:
        TypeError: If an element of `outcomes` pulled during iteration is not an
            outcome.

    Example:
        .. code-block:: python

            >>> try_continue([Success(1), Success(2), Success(3)], sum)
            Success(6)
            >>> try_continue([Success(1), Failure("two"), Success(3)], sum)
            Failure('two')
    """

    iterator = TryContinueIter(outcomes)
    output = func(iterator)
    if (failure := iterator.failure) is not None:
        logger.debug("Discarding %r in favor of %r", output, failure)
        return failure
    return Success(output)


def try_continue_map[S, T, E, R](
    items: Iterable[S],
    fallible: Callable[[S], Result[T, E]],
    func: Callable[[TryContinueIter[T, E]], R],
) -> Result[R, E]:
    """Apply a fallible function to each item and process the successful values.

    The items are mapped lazily, so `fallible` is not called on the items that
    come after the first failure.

    Example:
        .. code-block:: python

            >>> parse = catching(ValueError)(int)
            >>> count_even = lambda values: sum(1 for v in values if v % 2 == 0)
            >>> try_continue_map(["1", "2", "3", "24", "28"], parse, count_even)
            Success(3)
    """

    return try_continue(map(fallible, items), func)


def catching[**P, T](
    *exception_types: type[Exception],
) -> Callable[[Callable[P, T]], Callable[P, Success[T] | Failure[Exception]]]:
    """Decorator to turn the exceptions raised by a function into failures.

    Args:
        exception_types: The exceptions to catch.
            If none are given, all subclasses of :class:`Exception` are caught.
            Other exceptions are propagated.
    """

    caught = exception_types or (Exception,)

    def decorator(
        func: Callable[P, T]
    ) -> Callable[P, Success[T] | Failure[Exception]]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Any:
            try:
                return Success(func(*args, **kwargs))
            except caught as error:
                return Failure(error)

        return wrapper

    return decorator
