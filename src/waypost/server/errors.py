"""Error rendering for waypost requests.

Maps HTTPError exceptions and unexpected failures to JSON Response
objects. Internal error detail is only ever written to the log.
"""

import logging

from waypost.errors import HTTPError
from waypost.http.request import Request
from waypost.http.response import Response, error_response

logger = logging.getLogger("waypost.server")

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


def handle_http_error(exc: HTTPError, request: Request) -> Response:
    """Render an HTTPError as ``{"error": detail}`` with its status and headers."""
    logger.debug("%d %s %s: %s", exc.status, request.method, request.path, exc.detail)

    response = error_response(exc.detail or f"Error {exc.status}", exc.status)
    for name, value in exc.headers:
        response = response.with_header(name, value)
    return response


def handle_internal_error(exc: Exception, request: Request) -> Response:
    """Log *exc* with its traceback and return a generic 500."""
    logger.error(
        "500 %s %s (%s: %s)",
        request.method,
        request.path,
        type(exc).__name__,
        exc,
        exc_info=exc,
    )
    return error_response(INTERNAL_ERROR_MESSAGE, 500)
