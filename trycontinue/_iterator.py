from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Any, Self

from .result import Success, Failure, Result, as_result

logger = logging.getLogger(__name__)


class TryContinueIter[T, E](Iterator[T]):
    """Iterates over the values of successful outcomes.

    Iteration stops at the first failure encountered in the underlying outcomes.
    This failure is kept and can be accessed with :attr:`failure` once iteration
    is over.
    Once a failure has been captured, the underlying outcomes are never pulled
    again.

    Instances are created by :func:`trycontinue.try_continue` and should not be
    used after the function passed to it returns.
    """

    __slots__ = ("_outcomes", "_failure")

    def __init__(self, outcomes: Iterable[Result[T, E] | Any]) -> None:
        self._outcomes = iter(outcomes)
        self._failure: Failure[E] | None = None

    @property
    def failure(self) -> Failure[E] | None:
        """The first failure encountered, or None if no failure was seen yet."""

        return self._failure

    @property
    def failed(self) -> bool:
        return self._failure is not None

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> T:
        if self._failure is not None:
            raise StopIteration
        outcome = as_result(next(self._outcomes))
        if isinstance(outcome, Success):
            return outcome.value
        logger.debug("Stopping iteration on failure %r", outcome)
        self._failure = outcome
        raise StopIteration

    def __repr__(self) -> str:
        return f"{type(self).__name__}(failure={self._failure!r})"
