"""
PhotoStudio Backend — No-Cache Middleware
===========================================

What:  Marks every response as uncacheable and strips validators.
Why:   The admin views (bookings, messages, portfolio) must always show the
       current rows; an intermediary or the browser serving a stale list
       after a delete looks like the delete failed.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

NO_CACHE_HEADERS = {
    "Cache-Control": "no-store, no-cache, must-revalidate, proxy-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


class NoCacheMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        for name, value in NO_CACHE_HEADERS.items():
            response.headers[name] = value
        for name in ("ETag", "Last-Modified"):
            if name in response.headers:
                del response.headers[name]
        return response
