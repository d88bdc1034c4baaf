"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from loguru import logger
from starlette.responses import JSONResponse

from src.bookshelf.api.http.app_data import ApplicationDependencies
from src.bookshelf.api.http.routers import books, health
from src.bookshelf.api.http.schemas import StatusResponse
from src.bookshelf.api.utils.app_startup import configure_logging
from src.bookshelf.core.errors import BookshelfError
from src.bookshelf.core.services import DbManageService, DbSessionService
from src.bookshelf.runtime.context import get_config

__all__ = ["app", "create_app"]


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


def _error_response(
    request: Request, status_code: int, message: str, **extra
) -> JSONResponse:
    request_id = _request_id(request)
    content = {"error": message, "request_id": request_id, **extra}
    headers = {"X-Request-ID": request_id} if request_id else None
    return JSONResponse(status_code=status_code, content=content, headers=headers)


async def handle_bookshelf_error(request: Request, exc: BookshelfError) -> JSONResponse:
    logger.bind(status_code=exc.status_code, error_type=type(exc).__name__).warning(
        "request.failed: {}", exc.message
    )
    return _error_response(request, exc.status_code, exc.message)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed bodies, paths and queries are input errors like any other
    logger.bind(status_code=400, error_type=type(exc).__name__).warning(
        "request.validation_error"
    )
    return _error_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        "Invalid request",
        details=jsonable_encoder(exc.errors()),
    )


async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    request.state.request_id = request_id

    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": request.client.host if request.client else "unknown",
    }

    start = time.perf_counter()

    # Everything that logs within this block inherits base_ctx
    with logger.contextualize(**base_ctx):
        try:
            logger.info("request.start")
            response = await call_next(request)

            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=response.status_code,
                duration_ms=round(duration_ms, 1),
            ).info("request.end")

            response.headers.setdefault("X-Request-ID", request_id)
            return response

        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=500,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return JSONResponse(
                status_code=500,
                content={"error": "Internal Server Error", "request_id": request_id},
                headers={"X-Request-ID": request_id},
            )


def create_app(database_service: DbSessionService | None = None) -> FastAPI:
    """Build the application.

    ``database_service`` is the store the app will use; when omitted, one is
    built from the active configuration at startup. Tests pass their own
    in-memory service.
    """
    config = get_config()
    configure_logging(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = database_service is None
        service = database_service or DbSessionService(config.database)
        # Fatal: a StorageUnavailableError here aborts startup
        DbManageService(service).create_all()
        app.state.app_dependencies = ApplicationDependencies(database_service=service)
        logger.info("Starting up application in {} environment", config.app.environment)
        try:
            yield
        finally:
            logger.info("Shutting down application")
            if owned:
                service.dispose()

    is_production = config.app.environment == "production"
    app = FastAPI(
        title=config.app.title,
        version=config.app.version,
        description=config.app.description,
        lifespan=lifespan,
        docs_url=None if is_production else config.app.docs_url,
        redoc_url=None if is_production else "/redoc",
        servers=[{"url": config.app.base_url}],
    )

    app.add_exception_handler(BookshelfError, handle_bookshelf_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.middleware("http")(log_requests)

    app.include_router(books.router)
    app.include_router(health.router)

    @app.get("/", response_model=StatusResponse, tags=["status"])
    def root() -> StatusResponse:
        """Service status."""
        return StatusResponse(status="ok")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=get_config().app.host,
        port=get_config().app.port,
        access_log=False,  # request logging lives in the middleware
    )
