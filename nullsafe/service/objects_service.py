from __future__ import annotations

from typing import Any, Optional

from ..domain.equality import equal
from ..domain.hashing import hash_code
from ..domain.selection import first_non_null
from ..logging_conf import get_logger

logger = get_logger("service.objects")


# ------------------------
# Use-cases
# ------------------------

def evaluate_equal(*, a: Optional[Any], b: Optional[Any]) -> dict:
    """Compare two possibly-None values."""
    result = equal(a, b)
    logger.info(
        "objects.equal",
        extra={
            "event": "objects_equal",
            "a_absent": a is None,
            "b_absent": b is None,
            "equal": result,
        },
    )
    return {"equal": result}


def evaluate_hash(*, values: list[Optional[Any]]) -> dict:
    """Combine the hashes of `values` in order."""
    result = hash_code(*values)
    logger.info(
        "objects.hash",
        extra={"event": "objects_hash", "count": len(values), "hash": result},
    )
    return {"hash": result, "count": len(values)}


def evaluate_first_non_null(*, first: Optional[Any], second: Optional[Any]) -> dict:
    """Pick the first present value.

    BothAbsentError propagates to the caller.
    """
    value = first_non_null(first, second)
    logger.info(
        "objects.first_non_null",
        extra={"event": "objects_first_non_null", "picked": "first" if first is not None else "second"},
    )
    return {"value": value}
