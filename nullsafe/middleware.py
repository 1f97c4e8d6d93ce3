"""Request correlation and error shaping for the HTTP service."""
from __future__ import annotations

import time
from collections.abc import Awaitable, Callable
from uuid import uuid4

from fastapi import Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .logging_conf import get_logger

REQUEST_ID_HEADER = "X-Request-ID"

logger = get_logger("http")


def _route_fields(request: Request) -> dict:
    return {
        "method": request.method,
        "path": request.url.path,
        "request_id": getattr(request.state, "request_id", None),
    }


async def request_context(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Tag each request with an id, time it and log one line when it ends.

    An incoming X-Request-ID is reused; otherwise a uuid4 is minted. The id is
    echoed back on the response.
    """
    request.state.request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("request.error", extra={"event": "request_error", **_route_fields(request)})
        raise

    response.headers[REQUEST_ID_HEADER] = request.state.request_id
    logger.info(
        "request.done",
        extra={
            "event": "request_done",
            **_route_fields(request),
            "status_code": response.status_code,
            "elapsed_ms": round((time.perf_counter() - started) * 1000.0, 2),
        },
    )
    return response


def _describe(error: dict) -> str:
    loc = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    return f"{loc}: {error.get('msg', 'invalid')}" if loc else error.get("msg", "invalid")


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer 422 in the API's `{error_code, error_message}` shape.

    Raw inputs are left out of the body; they may not be JSON-encodable (NaN).
    """
    message = "; ".join(_describe(err) for err in exc.errors())
    logger.info(
        "request.rejected",
        extra={"event": "request_rejected", **_route_fields(request), "error_message": message},
    )
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": {"error_code": "malformed_request", "error_message": message}},
    )
