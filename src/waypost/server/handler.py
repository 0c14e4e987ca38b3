"""ASGI handler — translates ASGI scope/messages to waypost types.

The only component that touches raw ASGI for HTTP requests. Converts
the scope to a Request, dispatches it through the route table, and
sends the Response back through ASGI ``send()``.
"""

import logging
import time

from waypost._internal.asgi import Receive, Scope, Send
from waypost.errors import PayloadTooLarge
from waypost.http.request import Request
from waypost.routing.dispatch import dispatch
from waypost.routing.route import RouteTable
from waypost.server.errors import handle_http_error
from waypost.server.sender import send_response

logger = logging.getLogger("waypost.server")


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    routes: RouteTable,
    max_content_length: int,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, receive)
    started = time.perf_counter()

    declared = request.content_length
    if declared is not None and declared > max_content_length:
        response = handle_http_error(
            PayloadTooLarge(f"Request body exceeds {max_content_length} bytes"),
            request,
        )
    else:
        response = await dispatch(routes, request)

    await send_response(response, send)

    logger.info(
        "%s %s %d %.1fms",
        request.method,
        request.url,
        response.status,
        (time.perf_counter() - started) * 1000,
    )
