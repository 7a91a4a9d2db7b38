"""
PhotoStudio Backend — Unhandled Error Middleware
==================================================

What:  Turns any exception that escaped the route handlers and the typed
       exception handlers into the standard 500 error body.
How:   Sits inside the request ID, logging and no-cache middleware, so the
       response still carries `X-Request-ID`, the no-cache headers and an
       access-log line. The stack trace is logged; the body stays generic.
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from photostudio.middleware.request_id import request_id_var

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred. Please try again or contact support."


def unexpected_error_response(rid: str) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": UNEXPECTED_ERROR_MESSAGE,
            "request_id": rid,
        },
    )


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            rid = request_id_var.get("")
            logger.error(
                "[%s] Unexpected error on %s %s: %s",
                rid,
                request.method,
                request.url.path,
                str(exc),
                exc_info=True,
            )
            return unexpected_error_response(rid)
