"""
Exception handlers translating faults into `{statusCode, message}` bodies.

ClientFault subclasses keep their own status. Request validation failures
become 400 with per-field errors. Anything else is logged with its traceback
and answered with a generic 500.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.domain.errors import ClientFault, ValidationFault

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."


def _body(status_code: int, message: str, **extra: Any) -> dict[str, Any]:
    return {"statusCode": status_code, "message": message, **extra}


async def client_fault_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, ClientFault)
    extra: dict[str, Any] = {}
    if isinstance(exc, ValidationFault):
        extra["errors"] = [{"field": e.field, "message": e.message} for e in exc.errors]
    return JSONResponse(status_code=exc.status_code, content=_body(exc.status_code, exc.message, **extra))


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, StarletteHTTPException)
    return JSONResponse(
        status_code=exc.status_code,
        content=_body(exc.status_code, str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, RequestValidationError)
    errors = []
    for err in exc.errors():
        # Drop the leading "body"/"path"/"query" marker
        loc = [str(part) for part in err.get("loc", ())[1:]]
        errors.append({"field": ".".join(loc), "message": err.get("msg", "Invalid value")})

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_body(status.HTTP_400_BAD_REQUEST, "Validation failed", errors=errors),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_body(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ClientFault, client_fault_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
