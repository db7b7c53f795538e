"""Error Handlers - global exception handlers producing the standard envelope.

Invariants:
    - ClubError -> its own http_status and to_response() body
    - RequestValidationError (query/path/JSON parsing) -> 400 with per-field details
    - Unknown routes -> 404 "Route <path> not found" plus availableRoutes
    - Exception (catch-all) -> 500, message hidden in production
    - DataAccessError messages (SQL, driver text) are hidden in production too

Design Decisions:
    - Four-layer handler: domain (ClubError), validation (FastAPI), routing
      (Starlette HTTPException), catch-all (Exception)
    - Extracted from main.py to keep the entry point small
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from club_api.config import get_settings
from club_api.core.errors import ClubError, DataAccessError, ValidationError
from club_api.core.validation import field_errors

logger = logging.getLogger(__name__)

AVAILABLE_ROUTES = {
    "health": "GET /health",
    "join": "POST /api/join",
    "events": "GET /api/events, POST /api/events",
    "users": "GET /api/users",
    "tasks": "GET /api/tasks, POST /api/tasks",
    "announcements": "GET /api/announcements, POST /api/announcements",
}

INTERNAL_MESSAGE = "Internal server error"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_club_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_club_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ClubError)
    async def club_error_handler(request: Request, exc: ClubError):
        """Handle all domain and data-access errors."""
        extra = {"error_code": exc.code, "path": request.url.path, "method": request.method}
        if exc.http_status >= 500:
            logger.error(f"ClubError: {exc.message}", extra=extra)
        else:
            logger.warning(f"ClubError: {exc.message}", extra=extra)

        body = exc.to_response()
        if isinstance(exc, DataAccessError) and get_settings().is_production:
            body = {"success": False, "error": INTERNAL_MESSAGE}
        return JSONResponse(status_code=exc.http_status, content=body)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """Query, path and JSON-decoding failures share the ValidationError shape."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path, "method": request.method},
        )
        error = ValidationError(field_errors(list(exc.errors())))
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content=error.to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content={
                    "success": False,
                    "error": f"Route {request.url.path} not found",
                    "availableRoutes": AVAILABLE_ROUTES,
                },
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all, never leaks internal details in production."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "method": request.method},
        )
        message = INTERNAL_MESSAGE if get_settings().is_production else str(exc) or INTERNAL_MESSAGE
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "error": message},
        )
