"""FastAPI application factory: middleware, routes, and the mapping of domain exceptions onto HTTP status codes."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api import routes
from src.core.config import Settings, get_settings
from src.core.exceptions import (
    AggregationUnavailableError,
    GameError,
    InvalidRequestError,
    MoveNotImplementedError,
    RepositoryError,
)
from src.db.database import init_db

logger = logging.getLogger(__name__)

# Exception type -> (status code, detail). Looked up along the MRO, most specific first.
ERROR_RESPONSES: dict[type[GameError], tuple[int, Optional[str]]] = {
    InvalidRequestError: (status.HTTP_400_BAD_REQUEST, None),
    MoveNotImplementedError: (status.HTTP_501_NOT_IMPLEMENTED, None),
    AggregationUnavailableError: (
        status.HTTP_503_SERVICE_UNAVAILABLE,
        "Win record unavailable",
    ),
    RepositoryError: (status.HTTP_500_INTERNAL_SERVER_ERROR, "Database error"),
    GameError: (status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal error"),
}


async def handle_game_error(request: Request, exc: Exception) -> JSONResponse:
    """Messages of client errors are returned as-is, server errors get a fixed detail."""
    status_code, detail = next(
        ERROR_RESPONSES[cls] for cls in type(exc).__mro__ if cls in ERROR_RESPONSES
    )
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.warning("%s %s failed: %r", request.method, request.url.path, exc)
    return JSONResponse(status_code=status_code, content={"detail": detail or str(exc)})


async def handle_invalid_body(request: Request, exc: Exception) -> JSONResponse:
    """Body is not JSON, or lacks / mistypes a field."""
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request body"},
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    init_db(app.state.settings)
    logger.info("Database tables ready.")
    yield


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title="Checkers API",
        description="Backend for a checkers game against a bot: new boards and the player's win record.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    app.include_router(routes.router, prefix="/api")
    app.add_exception_handler(GameError, handle_game_error)
    app.add_exception_handler(RequestValidationError, handle_invalid_body)

    @app.get("/health")
    def health_check() -> dict[str, str]:
        return {"status": "ok"}

    return app
