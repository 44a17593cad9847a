"""Domain errors and their HTTP translation.

Every error raised by the stores and routers carries the status code and the caller-safe
message it maps to. Anything else that escapes a handler is logged and answered with a
generic 500 so no internal detail leaks to the caller.
"""

import logging
from collections.abc import Iterable
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

logger = logging.getLogger(__name__)


class ECardError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_content(self) -> dict[str, Any]:
        return {"error": self.message}


class UnauthorizedError(ECardError):
    status_code = 401
    message = "Unauthorized"


class NotFoundError(ECardError):
    """Missing and not-owned resources share this error so existence never leaks."""

    status_code = 404
    message = "Not found"


class ValidationFailedError(ECardError):
    status_code = 400
    message = "Invalid data"

    def __init__(self, details: list[dict[str, str]], message: str | None = None) -> None:
        self.details = details
        super().__init__(message)

    @classmethod
    def for_field(cls, field: str, message: str) -> "ValidationFailedError":
        return cls([{"field": field, "message": message}])

    @classmethod
    def from_pydantic(cls, exc: ValidationError) -> "ValidationFailedError":
        return cls(format_issues(exc.errors()))

    def to_content(self) -> dict[str, Any]:
        return {"error": self.message, "details": self.details}


class CapacityExceededError(ECardError):
    """Terminal business rejection; retrying the same submission will not help."""

    status_code = 403
    message = (
        "This event has reached its maximum number of responses. "
        "The host may need to upgrade their plan."
    )


class CapacityConflictError(ECardError):
    status_code = 409
    message = "The response limit of an event cannot be lowered"


class RateLimitedError(ECardError):
    status_code = 429
    message = "Too many requests. Please try again later."

    def __init__(self, retry_after: int, message: str | None = None) -> None:
        self.retry_after = retry_after
        super().__init__(message)


def format_issues(errors: Iterable[Any]) -> list[dict[str, str]]:
    """Flatten pydantic error dicts into ``{"field", "message"}`` pairs.

    The leading ``body`` segment FastAPI adds to request errors is dropped so a bulk
    import row reads ``"2.email"`` and an RSVP field reads ``"respondent_name"``.
    """
    issues = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] == "body":
            loc = loc[1:]
        issues.append({"field": ".".join(loc), "message": error.get("msg", "Invalid value")})
    return issues


async def ecard_error_handler(request: Request, exc: ECardError) -> JSONResponse:
    headers = None
    if isinstance(exc, RateLimitedError):
        headers = {"Retry-After": str(exc.retry_after)}
    return JSONResponse(status_code=exc.status_code, content=exc.to_content(), headers=headers)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid data", "details": format_issues(exc.errors())},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled exception in {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ECardError, ecard_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
