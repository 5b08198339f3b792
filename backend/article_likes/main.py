"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from article_likes.config import Settings, get_settings
from article_likes.domain.exceptions import StorageError, ValidationError
from article_likes.infrastructure.database import Database
from article_likes.infrastructure.logging.log_config import setup_logging
from article_likes.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — open the database, create tables, dispose on shutdown.

    Any failure before ``yield`` aborts startup, so the process never serves
    traffic without a working schema.
    """
    settings: Settings = app.state.settings
    setup_logging(settings)

    database = Database.from_settings(settings)
    try:
        await database.create_all()
    except Exception:
        logger.exception("Database initialisation failed")
        await database.dispose()
        raise
    app.state.database = database
    logger.info("Database ready (%s)", database.engine.url.render_as_string(hide_password=True))

    yield

    # Shutdown
    await database.dispose()


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": _format_validation_errors(exc)},
    )


async def _domain_validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


async def _storage_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("%s %s failed in storage", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "storage failure, please retry"},
    )


def _format_validation_errors(exc: RequestValidationError) -> str:
    """Flatten pydantic error entries into ``loc: msg`` pairs."""
    parts = []
    for error in exc.errors():
        loc = ".".join(str(p) for p in error.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {error.get('msg')}" if loc else str(error.get("msg")))
    return "; ".join(parts) or "invalid request"


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Error mapping: malformed input → 400, storage failure → 500
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(ValidationError, _domain_validation_handler)
    app.add_exception_handler(StorageError, _storage_error_handler)
    app.add_exception_handler(SQLAlchemyError, _storage_error_handler)

    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "article_likes.main:app",
        host="0.0.0.0",
        port=8080,
    )
