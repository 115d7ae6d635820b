"""
Global error handler middleware for the FastAPI application.
Catches and formats all exceptions consistently.
"""

import logging
import traceback
from typing import Any, Dict, Optional
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from fastapi import status

from lancer.config import settings

logger = logging.getLogger(__name__)


# Use case error codes that are the caller's fault; anything else is a server failure
CLIENT_ERROR_STATUS_CODES = {
    "INVALID_INPUT": status.HTTP_400_BAD_REQUEST,
    "UNAUTHORIZED": status.HTTP_401_UNAUTHORIZED,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "PAYMENT_NOT_SETTLED": status.HTTP_400_BAD_REQUEST,
    "UNKNOWN_TRANSACTION": status.HTTP_400_BAD_REQUEST,
    "BUSINESS_RULE_VIOLATION": status.HTTP_400_BAD_REQUEST,
}


def status_code_for(error_code: Optional[str], default: int = status.HTTP_500_INTERNAL_SERVER_ERROR) -> int:
    """Map a use case error code to an HTTP status."""
    return CLIENT_ERROR_STATUS_CODES.get(error_code or "", default)


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Middleware to handle all uncaught exceptions and format error responses.
    """

    async def dispatch(self, request: Request, call_next):
        """
        Process the request and handle any exceptions.
        """
        try:
            response = await call_next(request)
            return response
        except Exception as exc:
            return await self.handle_exception(request, exc)

    async def handle_exception(self, request: Request, exc: Exception) -> JSONResponse:
        """
        Log an exception that escaped the routers and return a JSON 500.
        """
        logger.error(
            f"Unhandled exception: {type(exc).__name__}: {str(exc)}",
            exc_info=True,
            extra={
                "request_path": request.url.path,
                "request_method": request.method,
                "client_host": request.client.host if request.client else None
            }
        )

        error_response = self.format_error_response(exc)

        if settings.debug:
            error_response["debug"] = {
                "exception_type": type(exc).__name__,
                "traceback": traceback.format_exc().split("\n")
            }

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_response
        )

    def format_error_response(self, exc: Exception) -> Dict[str, Any]:
        """
        Format exception into the `{error: ...}` body every handler uses.
        """
        if settings.debug:
            return {"error": str(exc) or type(exc).__name__}
        return {"error": "Internal Server Error"}
