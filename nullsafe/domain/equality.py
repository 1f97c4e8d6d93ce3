from __future__ import annotations

from typing import Any, Optional

__all__ = ["equal"]


def equal(a: Optional[Any], b: Optional[Any]) -> bool:
    """Determine whether two possibly-None objects are equal.

    Returns:
    - True if `a` and `b` are the same object (this covers both None).
    - True if `a` is not None and `a == b`.
    - False otherwise.

    Assumes any non-None operand honours the usual `__eq__` contract; that is
    relied on, not checked.
    """
    # bool() because __eq__ may hand back a non-bool (e.g. array-likes)
    return a is b or (a is not None and bool(a == b))
