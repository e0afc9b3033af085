"""Process iterators of fallible outcomes with the usual iteration tools.

:func:`try_continue` hands the values of the successful outcomes to a function as a
plain iterator.
Iteration stops at the first failure, which is then returned in place of the value
computed by the function.
"""

from ._iterator import TryContinueIter
from ._try_continue import try_continue, try_continue_map, catching
from .result import Success, Failure, Result

__all__ = [
    "try_continue",
    "try_continue_map",
    "catching",
    "TryContinueIter",
    "Success",
    "Failure",
    "Result",
]
