"""Application-level exceptions and FastAPI exception handlers."""


from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, status_code: int = 500, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.status_code = status_code
        self.code = code
        super().__init__(message)

class NotFoundError(AppException):
    def __init__(self, entity: str, entity_id: int | str | None = None):
        msg = f"{entity} not found" if entity_id is None else f"{entity} '{entity_id}' not found"
        super().__init__(msg, status_code=404, code="NOT_FOUND")

class FailedValidationError(AppException):
    """One or more request fields failed validation.

    ``errors`` maps a field name to a single human-readable message, e.g.
    ``{"sort": "invalid sort value"}``.
    """

    def __init__(self, errors: dict[str, str]):
        self.errors = dict(errors)
        super().__init__(
            "The request failed validation",
            status_code=422,
            code="VALIDATION_ERROR",
        )

class QueryTimeoutError(AppException):
    """Raised when a database statement exceeds the configured time budget."""

    def __init__(self, message: str = "The database query took too long to complete"):
        super().__init__(message, status_code=504, code="QUERY_TIMEOUT")

# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------

def _error_body(code: str, message: str, fields: dict[str, str] | None = None) -> dict:
    error: dict = {"code": code, "message": message}
    if fields:
        error["fields"] = fields
    return {"error": error}

def _field_errors(exc: RequestValidationError) -> dict[str, str]:
    """Collapse pydantic error entries into a field -> message map (first error wins)."""
    fields: dict[str, str] = {}
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in ("query", "body", "path")]
        key = ".".join(loc) or "request"
        if key in fields:
            continue
        if err.get("type") == "int_parsing":
            fields[key] = "must be an integer value"
        else:
            fields[key] = str(err.get("msg", "is invalid")).lower()
    return fields

def register_exception_handlers(app: FastAPI) -> None:
    """Attach all custom exception handlers to the FastAPI app."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        fields = exc.errors if isinstance(exc, FailedValidationError) else None
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.code, exc.message, fields),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content=_error_body(
                "VALIDATION_ERROR", "The request failed validation", _field_errors(exc)
            ),
        )

    @app.exception_handler(404)
    async def not_found_handler(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content=_error_body("NOT_FOUND", "Resource not found"),
        )

    @app.exception_handler(500)
    async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(
            status_code=500,
            content=_error_body("INTERNAL_ERROR", "An unexpected error occurred"),
        )
