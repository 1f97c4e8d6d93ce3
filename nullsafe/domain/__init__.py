"""Pure domain helpers: equality, hashing, selection.

These modules are free of FastAPI/HTTP concerns so they can be unit-tested
and imported on their own.
"""
from .equality import equal
from .hashing import hash_code
from .selection import (
    BothAbsentError,
    ObjectsError,
    first_non_null,
    first_non_null_or_else,
)

__all__ = [
    "equal",
    "hash_code",
    "first_non_null",
    "first_non_null_or_else",
    "ObjectsError",
    "BothAbsentError",
]
