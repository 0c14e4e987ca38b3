"""Waypost — a small JSON API server with a first-match path router.

Routes pair a ``:name`` pattern with a method-to-handler table; the
first route whose pattern matches a request path decides the outcome.

Basic usage::

    from waypost import App

    app = App()

    @app.route("/api/hello/:name")
    def hello(request, params):
        return {"message": f"Hello, {params['name']}!"}

    app.run()

Prebuilt tables::

    from waypost import App, Route, RouteTable

    table = RouteTable((Route("/items", {"GET": list_items}),))
    app = App(routes=table)
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "BadRequest",
    "ConfigurationError",
    "HTTPError",
    "MethodNotAllowed",
    "NotFound",
    "Request",
    "Response",
    "Route",
    "RouteTable",
    "WaypostError",
    "dispatch",
    "error_response",
    "json_response",
    "match_path",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import waypost`` fast while providing a clean top-level API.
    """
    if name == "App":
        from waypost.app import App

        return App

    if name == "AppConfig":
        from waypost.config import AppConfig

        return AppConfig

    if name == "Request":
        from waypost.http.request import Request

        return Request

    if name in ("Response", "json_response", "error_response"):
        from waypost.http import response as _resp

        return getattr(_resp, name)

    if name in ("Route", "RouteTable", "dispatch", "match_path"):
        from waypost import routing as _routing

        return getattr(_routing, name)

    if name in (
        "BadRequest",
        "ConfigurationError",
        "HTTPError",
        "MethodNotAllowed",
        "NotFound",
        "WaypostError",
    ):
        from waypost import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
