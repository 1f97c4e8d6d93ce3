from __future__ import annotations

from typing import Any, Optional

__all__ = [
    "HASH_SEED",
    "HASH_MULTIPLIER",
    "NONE_HASH",
    "element_hash",
    "hash_code",
]

HASH_SEED = 1
HASH_MULTIPLIER = 31
NONE_HASH = 0
_INT32_MASK = (1 << 32) - 1
_INT32_SIGN = 1 << 31


def _to_int32(value: int) -> int:
    """Wrap an arbitrary int into the signed 32-bit range."""
    value &= _INT32_MASK
    return value - (1 << 32) if value & _INT32_SIGN else value


def element_hash(value: Optional[Any]) -> int:
    """Hash contribution of a single element.

    None maps to NONE_HASH. Unhashable values (lists, dicts, sets, tuples
    holding those) fall back to their identity hash, so their contents are
    never inspected.
    """
    if value is None:
        return NONE_HASH
    try:
        return hash(value)
    except TypeError:
        return object.__hash__(value)


def hash_code(*values: Optional[Any]) -> int:
    """Generate a hash code for multiple values.

    Useful when implementing `__hash__` next to an `equal()`-based `__eq__`:

        def __hash__(self) -> int:
            return hash_code(self.x, self.y, self.z)

    The result is an order-sensitive fold (seed 1, multiplier 31) wrapped to a
    signed 32-bit int; None elements contribute 0 and no arguments yields 1.

    Note: a sequence passed as the only argument is not unpacked. A list is
    hashed by identity, a tuple by `hash(tuple)`; use `hash_code(*seq)` to
    combine its elements. Likewise `hash_code(x)` does not equal `hash(x)`.
    Equal unhashable values do not hash equally: `equal([1], [1])` holds, but
    two distinct lists give different `hash_code` results.
    """
    result = HASH_SEED
    for value in values:
        result = _to_int32(HASH_MULTIPLIER * result + element_hash(value))
    return result
