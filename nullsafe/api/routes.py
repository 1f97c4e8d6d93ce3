from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from ..domain.selection import ObjectsError
from ..logging_conf import get_logger
from ..service import objects_service
from .models import (
    EqualRequest,
    EqualResponse,
    FirstNonNullRequest,
    FirstNonNullResponse,
    HashRequest,
    HashResponse,
)

router = APIRouter(prefix="/objects")
logger = get_logger("api")


@router.post(
    "/equal",
    response_model=EqualResponse,
    summary="Null-safe equality",
)
async def equal(req: EqualRequest) -> EqualResponse:
    """Return whether `a` and `b` are equal, treating two absent values as equal."""
    out = objects_service.evaluate_equal(a=req.a, b=req.b)
    return EqualResponse(**out)


@router.post(
    "/hash",
    response_model=HashResponse,
    summary="Order-sensitive combined hash",
)
async def combined_hash(req: HashRequest | None = None) -> HashResponse:
    """Return the combined hash of `values`; an empty body hashes no values."""
    req = req or HashRequest()
    out = objects_service.evaluate_hash(values=req.values)
    return HashResponse(**out)


@router.post(
    "/first_non_null",
    response_model=FirstNonNullResponse,
    summary="First present of two values",
)
async def first_non_null(req: FirstNonNullRequest) -> FirstNonNullResponse:
    """Return `first` if present, else `second`; 422 if both are absent."""
    try:
        out = objects_service.evaluate_first_non_null(first=req.first, second=req.second)
    except ObjectsError as e:
        logger.info(
            "objects.rejected",
            extra={"event": "objects_rejected", "error_code": e.code},
        )
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"error_code": e.code, "error_message": str(e)},
        )
    return FirstNonNullResponse(**out)
