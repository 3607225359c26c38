from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


class ClinicError(Exception):
    """Base error carrying a message safe to show to the user."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ClinicError):
    """Bad or missing input; nothing was written."""

    status_code = 400


class NotFoundError(ClinicError):
    """A referenced record does not exist."""

    status_code = 404


class DoubleBookingError(ClinicError):
    """The doctor already has a booked appointment at that time."""

    status_code = 409


class AuthenticationError(ClinicError):
    """Username and password do not match a stored user."""

    status_code = 401


class StorageError(ClinicError):
    """The database failed underneath an operation."""

    status_code = 500


def create_error_response(error_message: str, status_code: int = 400) -> dict:
    """Create a standardized error response"""
    return {
        "success": False,
        "data": None,
        "error": error_message
    }

async def clinic_exception_handler(request: Request, exc: ClinicError) -> JSONResponse:
    """Render clinic errors in the standard envelope"""
    return JSONResponse(
        status_code=exc.status_code,
        content=create_error_response(exc.message, exc.status_code)
    )

async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Unknown routes, wrong methods and other framework errors"""
    return JSONResponse(
        status_code=exc.status_code,
        content=create_error_response(str(exc.detail), exc.status_code),
        headers=getattr(exc, "headers", None)
    )

async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies or parameters"""
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path"))
        message = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
    else:
        message = "Invalid request"
    return JSONResponse(
        status_code=422,
        content=create_error_response(message, 422)
    )
