"""Conversion between the outcomes of this package and :mod:`returns` containers."""

from typing import Any, assert_never

import returns.result

from ._result import Success, Failure, Result
from .._exceptions import with_note


def from_container[T, E](container: returns.result.Result[T, E]) -> Result[T, E]:
    """Convert a :class:`returns.result.Result` container to a native outcome."""

    match container:
        case returns.result.Success():
            return Success(container.unwrap())
        case returns.result.Failure():
            return Failure(container.failure())
        case other:
            assert_never(other)


def to_container[T, E](result: Result[T, E]) -> returns.result.Result[T, E]:
    """Convert a native outcome to a :class:`returns.result.Result` container."""

    match result:
        case Success(value):
            return returns.result.Success(value)
        case Failure(error):
            return returns.result.Failure(error)
        case other:
            assert_never(other)


def as_result(outcome: Any) -> Result[Any, Any]:
    """Return the outcome as a native :class:`Success` or :class:`Failure`.

    Native outcomes are returned unchanged and :mod:`returns` containers are
    converted with :func:`from_container`.

    Raises:
        TypeError: If the outcome is neither a native outcome nor a
            :mod:`returns` container.
    """

    if isinstance(outcome, (Success, Failure)):
        return outcome
    if isinstance(outcome, returns.result.Result):
        return from_container(outcome)
    raise with_note(
        TypeError(f"Expected an outcome, got {type(outcome).__name__}"),
        "Outcomes must be Success/Failure instances or returns.result containers.",
    )
