"""Null-safe object helpers.

The helpers themselves live in `nullsafe.domain` and are re-exported here;
the HTTP service is in `nullsafe.main`.
"""
from importlib.metadata import PackageNotFoundError, version

from .domain import (
    BothAbsentError,
    ObjectsError,
    equal,
    first_non_null,
    first_non_null_or_else,
    hash_code,
)

try:
    __version__ = version("nullsafe-objects")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = [
    "equal",
    "hash_code",
    "first_non_null",
    "first_non_null_or_else",
    "ObjectsError",
    "BothAbsentError",
    "__version__",
]
