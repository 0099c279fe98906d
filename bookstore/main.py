"""FastAPI application factory."""
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError, ResponseValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookstore.api import api_router
from bookstore.config import Settings, get_settings
from bookstore.core.exceptions import AppException, InvalidPayloadError
from bookstore.core.logging import ErrorSink, RequestErrorLogger
from bookstore.storage import BookStore


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    """Map application and framework errors to ``{"error": ...}`` responses."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException):
        """Handle application exceptions."""
        return _error(exc.status_code, exc.message)

    @app.exception_handler(InvalidPayloadError)
    async def invalid_payload_handler(request: Request, exc: InvalidPayloadError):
        """Handle request bodies that do not decode into a record."""
        request.app.state.error_logger.error("Error when decoding JSON", exc.__cause__ or exc, request)
        return _error(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle request parameters FastAPI itself rejects."""
        payload_error = InvalidPayloadError(reason=str(exc))
        request.app.state.error_logger.error("Error when decoding JSON", exc, request)
        return _error(payload_error.status_code, payload_error.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle HTTP exceptions."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(ResponseValidationError)
    async def response_validation_handler(request: Request, exc: ResponseValidationError):
        """Handle responses that cannot be serialised."""
        request.app.state.error_logger.error("Error when encoding JSON", exc, request)
        return _error(500, "Internal server error")

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        request.app.state.error_logger.error("Unhandled error", exc, request)
        return _error(500, "Internal server error")


def create_app(
    store: Optional[BookStore] = None,
    error_logger: Optional[ErrorSink] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Build the application around a single shared BookStore.

    The store and error logger are attached to ``app.state`` and handed to
    handlers through dependencies. Passing them in lets callers share a
    store or capture log entries.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="In-memory Book CRUD API",
        version="1.0.0",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        redirect_slashes=False,
    )
    app.state.book_store = store if store is not None else BookStore()
    app.state.error_logger = error_logger or RequestErrorLogger()

    register_exception_handlers(app)
    app.include_router(api_router)

    return app
