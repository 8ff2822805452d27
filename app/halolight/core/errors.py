import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException

from app.halolight.core.error_catalog import AppError, ErrorCatalog, UnresolvedPath
from app.halolight.core.logging import log_json

logger = logging.getLogger("halolight.errors")

_HTTP_STATUS_CODES = {
    400: "BAD_REQUEST",
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
}


def _set_error_context(request: Request, code: str, exc: Exception | None = None) -> None:
    request.state.error_code = code
    if exc is not None:
        request.state.error_class = exc.__class__.__name__


def _trace_id(request: Request) -> str:
    return getattr(request.state, "trace_id", "")


def _http_error_code(status_code: int) -> str:
    return _HTTP_STATUS_CODES.get(status_code, "HTTP_ERROR")


def _json_safe(value):
    if isinstance(value, (set, frozenset)):
        return sorted(_json_safe(item) for item in value)
    if isinstance(value, dict):
        return {key: _json_safe(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_safe(item) for item in value]
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)


def _validation_error_details(exc: RequestValidationError) -> dict:
    errors = []
    for error in exc.errors():
        loc = list(error.get("loc", []))
        # Drop the location segment only; a parameter may itself be named "path".
        field = ".".join(str(item) for item in loc[1:]) or None
        errors.append(
            {
                "field": field,
                "message": error.get("msg", "Invalid value"),
                "type": error.get("type", "validation_error"),
                "loc": loc,
            }
        )
    return {"errors": errors}


def _http_error_payload(request: Request, exc: HTTPException) -> dict:
    detail = exc.detail
    return {
        "code": _http_error_code(exc.status_code),
        "message": str(detail) if detail else "HTTP error",
        "details": None,
        "trace_id": _trace_id(request),
    }


def error_response(code: str, message: str, details: object, trace_id: str, status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "code": code,
            "message": message,
            "details": _json_safe(details),
            "trace_id": trace_id,
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(UnresolvedPath)
    async def unresolved_path_handler(request: Request, exc: UnresolvedPath):
        # Not-found collaborator for the access guard.
        _set_error_context(request, exc.error.code, exc)
        return error_response(
            code=exc.error.code,
            message=exc.error.message,
            details=exc.details,
            trace_id=_trace_id(request),
            status_code=exc.error.status_code,
        )

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        _set_error_context(request, exc.error.code, exc)
        return error_response(
            code=exc.error.code,
            message=exc.error.message,
            details=exc.details,
            trace_id=_trace_id(request),
            status_code=exc.error.status_code,
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        payload = _http_error_payload(request, exc)
        _set_error_context(request, payload["code"], exc)
        return JSONResponse(status_code=exc.status_code, content=payload, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        _set_error_context(request, ErrorCatalog.VALIDATION_ERROR.code, exc)
        return error_response(
            code=ErrorCatalog.VALIDATION_ERROR.code,
            message=ErrorCatalog.VALIDATION_ERROR.message,
            details=_validation_error_details(exc),
            trace_id=_trace_id(request),
            status_code=ErrorCatalog.VALIDATION_ERROR.status_code,
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        _set_error_context(request, ErrorCatalog.INTERNAL_ERROR.code, exc)
        log_json(
            logger,
            {
                "event": "unhandled_exception",
                "trace_id": _trace_id(request),
                "error_class": exc.__class__.__name__,
                "message": str(exc),
            },
        )
        return error_response(
            code=ErrorCatalog.INTERNAL_ERROR.code,
            message=ErrorCatalog.INTERNAL_ERROR.message,
            details={"type": exc.__class__.__name__},
            trace_id=_trace_id(request),
            status_code=ErrorCatalog.INTERNAL_ERROR.status_code,
        )
