"""Defines the outcome type and its variants: success and failure.

An outcome is either a :class:`Success` holding a value or a :class:`Failure`
holding an error.
The error of a failure can be any value, not only an exception.

Example:
    .. code-block:: python

        from trycontinue.result import Success, Failure, is_success

        def parse(text: str) -> Success[int] | Failure[str]:
            if text.isdigit():
                return Success(int(text))
            return Failure(text)

        result = parse("12")
        if is_success(result):
            print(result.value + 1)
"""

from ._result import (
    Failure,
    Result,
    Success,
    is_failure,
    is_failure_type,
    is_success,
    unwrap,
)
from ._returns import as_result, from_container, to_container

__all__ = [
    "Failure",
    "Result",
    "Success",
    "is_failure",
    "is_failure_type",
    "is_success",
    "unwrap",
    "as_result",
    "from_container",
    "to_container",
]
