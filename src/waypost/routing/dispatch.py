"""Request dispatch over an ordered RouteTable.

Routes are scanned in table order. The first route whose pattern
matches the request path decides the outcome:

- a handler is registered for the method: it is invoked with
  ``(request, params)`` and its return value becomes the response;
- no handler for the method: 405 with an ``Allow`` header listing the
  route's methods. Later routes are not consulted, even if their
  pattern would also match.

If no pattern matches, the outcome is 404. ``dispatch()`` is the only
place where these outcomes become status codes.
"""

from waypost._internal.invoke import invoke
from waypost.errors import HTTPError, MethodNotAllowed, NotFound
from waypost.http.request import Request
from waypost.http.response import Response
from waypost.routing.match import match_path
from waypost.routing.route import RouteMatch, RouteTable
from waypost.server.errors import handle_http_error, handle_internal_error
from waypost.server.negotiation import negotiate


def resolve(table: RouteTable, method: str, path: str) -> RouteMatch:
    """Find the route and handler for *method* and *path*.

    Returns a ``RouteMatch`` on success.
    Raises ``NotFound`` if no route pattern matches the path.
    Raises ``MethodNotAllowed`` if the first matching route has no
    handler for the method.
    """
    for route in table:
        params = match_path(route.pattern, path)
        if params is None:
            continue

        handler = route.handler_for(method)
        if handler is None:
            raise MethodNotAllowed(route.methods)
        return RouteMatch(route=route, handler=handler, path_params=params)

    raise NotFound()


async def dispatch(table: RouteTable, request: Request) -> Response:
    """Resolve *request* against *table* and produce a Response.

    Never raises for handler failures: ``HTTPError`` raised by routing
    or by a handler is rendered with its own status, and any other
    exception becomes a generic 500 whose detail is only logged.
    """
    try:
        match = resolve(table, request.method, request.path)
        request = request.with_path_params(match.path_params)
        result = await invoke(match.handler, request, match.path_params)
        return negotiate(result)
    except HTTPError as exc:
        return handle_http_error(exc, request)
    except Exception as exc:
        return handle_internal_error(exc, request)
