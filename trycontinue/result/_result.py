from __future__ import annotations

from collections.abc import Callable
from typing import Never, Literal, overload, Any

import attrs
from typing_extensions import TypeIs

from .._exceptions import with_note


@attrs.frozen(repr=False, str=False)
class Success[T]:
    value: T

    def unwrap(self) -> T:
        return self.value

    def map[R](self, func: Callable[[T], R]) -> Success[R]:
        return Success(func(self.value))

    @staticmethod
    def is_success() -> Literal[True]:
        return True

    @staticmethod
    def is_failure() -> Literal[False]:
        return False

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@attrs.frozen(repr=False, str=False)
class Failure[E]:
    error: E

    def unwrap(self) -> Never:
        """Raise the error held by this failure.

        Raises:
            E: If the error is an exception, it is raised as is.
            ValueError: If the error is not an exception.
        """

        if isinstance(self.error, BaseException):
            raise self.error
        raise with_note(
            ValueError("Only exceptions can be unwrapped"), f"Error: {self.error!r}"
        )

    def map(self, func: Callable) -> Failure[E]:
        return self

    @staticmethod
    def is_success() -> Literal[False]:
        return False

    @staticmethod
    def is_failure() -> Literal[True]:
        return True

    def __str__(self) -> str:
        return str(self.error)

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


type Result[T, E] = Success[T] | Failure[E]


def is_success[T](result: Result[T, Any]) -> TypeIs[Success[T]]:
    return result.is_success()


def is_failure[E](result: Result[Any, E]) -> TypeIs[Failure[E]]:
    return result.is_failure()


def is_failure_type[E](result: Result, error_type: type[E]) -> TypeIs[Failure[E]]:
    return is_failure(result) and isinstance(result.error, error_type)


@overload
def unwrap[T](value: Success[T]) -> T: ...


@overload
def unwrap(value: Failure) -> Never: ...


def unwrap(value):
    return value.unwrap()
