# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Errors tell HOW to fix, not just WHAT failed.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

from lib.utils import ApplicationError


class QuoteAPIException(Exception):
    """
    Base exception for HTTP-level API errors.

    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "QUOTE_API_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


class QuotesNotLoadedError(QuoteAPIException):
    """Raised when a request arrives before the quote collection is loaded."""

    def __init__(self):
        super().__init__(
            message="Quote collection is not loaded",
            code="QUOTES_NOT_LOADED",
            status_code=503,
            suggestion="Wait for startup to finish, or check the logs for quote data errors",
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def quote_api_exception_handler(
    request: Request,
    exc: QuoteAPIException
) -> JSONResponse:
    """
    Convert QuoteAPIException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def application_error_handler(
    request: Request,
    exc: ApplicationError
) -> JSONResponse:
    """
    Convert errors raised by core/lib code to a 500 JSON response.

    These signal bad reference data, not a bad request.
    """
    return JSONResponse(
        status_code=500,
        content=exc.to_dict()
    )
