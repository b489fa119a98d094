"""Middleware that marks every response as readable from any origin."""

from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

ALLOW_ORIGIN_HEADER = "Access-Control-Allow-Origin"
ANY_ORIGIN = "*"

# Methods advertised on OPTIONS responses
ALLOWED_METHODS = "GET,HEAD,PUT,PATCH,POST,DELETE"


class AllowAllOriginsMiddleware(BaseHTTPMiddleware):
    """
    Set Access-Control-Allow-Origin: * on every response.

    Starlette's CORSMiddleware only adds CORS headers when the request carries
    an Origin header, and only answers OPTIONS that carry both Origin and
    Access-Control-Request-Method; this covers the rest (curl, same-origin,
    404s, bare OPTIONS). Allow all origins: local development only.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.method == "OPTIONS":
            return _options_response(request)
        response = await call_next(request)
        response.headers.setdefault(ALLOW_ORIGIN_HEADER, ANY_ORIGIN)
        return response


def _options_response(request: Request) -> Response:
    """204 for any OPTIONS request, reflecting requested headers."""
    headers = {
        ALLOW_ORIGIN_HEADER: ANY_ORIGIN,
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
    }
    requested = request.headers.get("Access-Control-Request-Headers")
    if requested:
        headers["Access-Control-Allow-Headers"] = requested
        headers["Vary"] = "Access-Control-Request-Headers"
    return Response(status_code=204, headers=headers)
