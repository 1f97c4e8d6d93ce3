from __future__ import annotations

from collections.abc import Callable
from typing import Optional, TypeVar

__all__ = [
    "ObjectsError",
    "BothAbsentError",
    "first_non_null",
    "first_non_null_or_else",
]

T = TypeVar("T")


# ------------------------
# Errors
# ------------------------
class ObjectsError(ValueError):
    """Base class for errors raised by the object helpers.

    The `code` attribute lets the API map errors to stable machine codes.
    """

    code: str = "invalid_argument"


class BothAbsentError(ObjectsError):
    code = "both_absent"


# ------------------------
# Selectors
# ------------------------

def first_non_null(first: Optional[T], second: Optional[T]) -> T:
    """Return `first` if it is not None, else `second` if it is not None.

    Falsy values such as 0, "" or False count as present.

    Raises:
        BothAbsentError: if both arguments are None.
    """
    if first is not None:
        return first
    if second is not None:
        return second
    raise BothAbsentError("Both parameters are None")


def first_non_null_or_else(first: Optional[T], fallback: Callable[[], Optional[T]]) -> T:
    """Like `first_non_null`, but only computes the second value when needed."""
    if first is not None:
        return first
    second = fallback()
    if second is not None:
        return second
    raise BothAbsentError("First parameter and fallback result are both None")
