"""
Exception Handlers - Map application errors to a single JSON error shape.

Every error response body is ``{"message": str}``; request validation
failures additionally carry ``"errors"`` with the per-field details.
"""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.errors import AppError, InternalError
from shared.services.logger import get_logger


logger = get_logger(__name__)


def internal_error_response() -> JSONResponse:
    return JSONResponse(
        status_code=InternalError.status_code,
        content={"message": InternalError.default_message},
    )


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Handle domain errors raised by services and dependencies."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.warning(
            f"{request.method} {request.url.path} -> {exc.status_code} {type(exc).__name__}: {exc.message}"
        )

    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Routing errors (unknown path, wrong method) raised by the framework."""
    logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")

    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Request body/path/query did not match its schema."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    if location:
        message = f"{location}: {message}"

    logger.warning(f"{request.method} {request.url.path} -> 400 validation: {message}")

    return JSONResponse(
        status_code=400,
        content={
            "message": message,
            "errors": [
                {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
                for error in errors
            ],
        },
    )


async def store_error_handler(request: Request, exc: PyMongoError) -> JSONResponse:
    """Database failures surface as a generic 500."""
    logger.error(
        f"Store error in {request.method} {request.url.path}: {exc}",
        exc_info=exc,
    )
    return internal_error_response()


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort handler for anything the routes did not anticipate."""
    logger.error(
        f"Unhandled exception in {request.method} {request.url.path}: {exc}",
        exc_info=exc,
    )
    return internal_error_response()


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(PyMongoError, store_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
    logger.debug("Exception handlers registered")
