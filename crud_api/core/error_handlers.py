"""Global exception handlers: every failure leaves the API as a JSON body with a message."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from crud_api.core.errors import CrudError, StorageError, ValidationError

logger = logging.getLogger(__name__)

INTERNAL_MESSAGE = "Erro interno do servidor"


def register_error_handlers(app: FastAPI) -> None:
    """Register domain, validation, storage and catch-all handlers on the app."""

    @app.exception_handler(CrudError)
    async def crud_error_handler(request: Request, exc: CrudError):
        if exc.status_code >= 500:
            logger.error("%s on %s: %s", type(exc).__name__, request.url.path, exc.message, exc_info=exc)
        else:
            logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        err = validation_error_from(exc.errors())
        logger.warning("Validation error on %s: %s", request.url.path, err.message)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=err.to_response())

    @app.exception_handler(SQLAlchemyError)
    async def storage_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error("Storage failure on %s", request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=StorageError(INTERNAL_MESSAGE).to_response(),
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled exception on %s", request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=CrudError(INTERNAL_MESSAGE).to_response(),
        )


def _field_name(loc) -> str:
    # drop the "body"/"path"/"query" prefix FastAPI adds
    parts = [str(part) for part in loc]
    if parts and parts[0] in {"body", "path", "query"}:
        parts = parts[1:]
    return ".".join(parts)


def validation_error_from(errors) -> ValidationError:
    """Build a ValidationError (summary message + field details) from pydantic errors."""
    details = [{"field": _field_name(e.get("loc", ())), "message": e.get("msg", "")} for e in errors]
    summary = "; ".join(f"{d['field']}: {d['message']}" if d["field"] else d["message"] for d in details)
    return ValidationError(summary or "Dados invalidos", details=details)
