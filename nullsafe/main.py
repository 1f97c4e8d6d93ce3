"""FastAPI app factory for the objects service."""
from __future__ import annotations

import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from nullsafe.api import router as objects_router
from nullsafe.logging_conf import get_logger, setup_logging
from nullsafe.middleware import request_context, validation_exception_handler

# Configure logging before anything else.
setup_logging()
logger = get_logger("nullsafe")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    logger.info("startup", extra={"event": "startup", "version": app.version})
    yield
    logger.info("shutdown", extra={"event": "shutdown"})


def create_app() -> FastAPI:
    app = FastAPI(
        title="nullsafe objects",
        version=os.getenv("APP_VERSION", "0.1.0"),
        lifespan=lifespan,
    )
    app.middleware("http")(request_context)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    @app.get("/health", summary="Liveness/readiness check")
    async def health() -> dict:
        return {"ok": True}

    app.include_router(objects_router)
    return app


# ASGI entrypoint: `uvicorn nullsafe.main:app --port 8000`
app = create_app()
