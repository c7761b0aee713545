"""
sea_transport.api.errors

Exception handlers mapping errors to `application/problem+json` responses.

Responsibilities:
- 400 for `BadRequestAlertError` (with failure alert headers).
- 400 for request validation failures, with per-field details.
- Problem bodies for every `HTTPException` (401/403/404/405/415...).
- 500 for anything unhandled, logged with its traceback.
"""

from __future__ import annotations

import uuid
from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR

from sea_transport.api.headers import failure_alert
from sea_transport.errors import BadRequestAlertError
from sea_transport.observability.logging import get_logger

log = get_logger(__name__)

PROBLEM_JSON = "application/problem+json"
PROBLEM_WITH_MESSAGE = "urn:sea-transport:problem:problem-with-message"
CONSTRAINT_VIOLATION = "urn:sea-transport:problem:constraint-violation"


def problem(
    status: int,
    *,
    title: str,
    headers: dict[str, str] | None = None,
    type_: str = "about:blank",
    **extra: Any,
) -> JSONResponse:
    body: dict[str, Any] = {"type": type_, "title": title, "status": status}
    body.update(extra)
    return JSONResponse(status_code=status, content=body, headers=headers, media_type=PROBLEM_JSON)


async def bad_request_alert_handler(request: Request, exc: BadRequestAlertError) -> JSONResponse:
    app_name = request.app.state.settings.app_name
    log.info("rest.bad_request", entity=exc.entity_name, error_key=exc.error_key)
    return problem(
        HTTP_400_BAD_REQUEST,
        title=exc.message,
        type_=PROBLEM_WITH_MESSAGE,
        headers=failure_alert(app_name, exc.entity_name, exc.error_key),
        entityName=exc.entity_name,
        errorKey=exc.error_key,
        message=f"error.{exc.error_key}",
        params=exc.entity_name,
    )


def _field_errors(exc: RequestValidationError) -> list[dict[str, str]]:
    field_errors = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ())]
        field_errors.append(
            {
                "objectName": loc[0] if loc else "request",
                "field": ".".join(loc[1:]),
                "message": str(err.get("msg", "")),
            }
        )
    return field_errors


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return problem(
        HTTP_400_BAD_REQUEST,
        title="Method argument not valid",
        type_=CONSTRAINT_VIOLATION,
        message="error.validation",
        fieldErrors=_field_errors(exc),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return problem(
        exc.status_code,
        title=_reason(exc.status_code),
        headers=getattr(exc, "headers", None),
        detail=exc.detail,
        message=f"error.http.{exc.status_code}",
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    error_id = str(uuid.uuid4())
    log.error(
        "rest.unhandled_exception",
        error_id=error_id,
        error_type=type(exc).__name__,
        exc_info=exc,
    )
    return problem(
        HTTP_500_INTERNAL_SERVER_ERROR,
        title="Internal Server Error",
        message="error.http.500",
        errorId=error_id,
    )


def _reason(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def setup_exception_handlers(app: FastAPI) -> None:
    handlers = (
        (BadRequestAlertError, bad_request_alert_handler),
        (RequestValidationError, validation_error_handler),
        (StarletteHTTPException, http_exception_handler),
        (Exception, unhandled_exception_handler),
    )
    for exc_class, handler in handlers:
        app.add_exception_handler(exc_class, handler)  # type: ignore[arg-type]
