"""Application-level exceptions and FastAPI exception handlers."""


import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, status_code: int = 500, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.status_code = status_code
        self.code = code
        super().__init__(message)

class NotFoundError(AppException):
    def __init__(self, entity: str):
        super().__init__(f"{entity} not found", status_code=404, code="NOT_FOUND")

class ValidationError(AppException):
    def __init__(self, message: str):
        super().__init__(message, status_code=400, code="VALIDATION_ERROR")

class DuplicateNameError(AppException):
    def __init__(self, message: str = "Vendor name already exists"):
        super().__init__(message, status_code=400, code="DUPLICATE_NAME")

class VendorNotFoundError(AppException):
    """A referenced parent vendor does not exist."""

    def __init__(self):
        super().__init__("Vendor not found", status_code=404, code="VENDOR_NOT_FOUND")

class BrandNotFoundError(AppException):
    """A referenced brand does not exist."""

    def __init__(self):
        super().__init__("Brand not found", status_code=404, code="BRAND_NOT_FOUND")

class OwnershipMismatchError(AppException):
    """The brand is owned by a different vendor than the one supplied."""

    def __init__(self):
        super().__init__(
            "Brand does not belong to the selected vendor",
            status_code=400,
            code="OWNERSHIP_MISMATCH",
        )

class StorageError(AppException):
    """Raised when the underlying database call fails."""

    def __init__(self, message: str = "Database operation failed"):
        super().__init__(message, status_code=500, code="STORAGE_ERROR")

# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------

def _error_body(code: str, message: str) -> dict:
    return {"error": {"code": code, "message": message}}

def _first_error_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    err = errors[0]
    field = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
    return f"{field}: {err.get('msg', 'invalid value')}" if field else err.get("msg", "Invalid request")

def register_exception_handlers(app: FastAPI) -> None:
    """Attach all custom exception handlers to the FastAPI app."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.code, exc.message),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content=_error_body("VALIDATION_ERROR", _first_error_message(exc)),
        )

    @app.exception_handler(SQLAlchemyError)
    async def storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.exception("Database error in %s %s", request.method, request.url.path)
        err = StorageError()
        return JSONResponse(
            status_code=err.status_code,
            content=_error_body(err.code, err.message),
        )

    @app.exception_handler(404)
    async def not_found_handler(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content=_error_body("NOT_FOUND", "Resource not found"),
        )

    @app.exception_handler(500)
    async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error in %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=_error_body("INTERNAL_ERROR", "Something went wrong"),
        )
