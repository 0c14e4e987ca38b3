"""Waypost application class.

Mutable during setup (route registration, lifecycle hooks).
Frozen at runtime when app.run() or __call__() is first invoked.
"""

import logging
import threading
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from waypost._internal.asgi import Receive, Scope, Send
from waypost._internal.invoke import invoke
from waypost._internal.types import Handler, Hook
from waypost.config import AppConfig
from waypost.errors import ConfigurationError
from waypost.routing.route import Route, RouteTable
from waypost.server.handler import handle_request

logger = logging.getLogger("waypost.server")


@dataclass(slots=True)
class _PendingRoute:
    """A route registration waiting to be compiled."""

    pattern: str
    methods: tuple[str, ...]
    handler: Handler
    name: str | None


class App:
    """The waypost application.

    Routes come from a prebuilt ``RouteTable`` passed to the constructor,
    from ``@app.route`` / ``add_route`` registrations, or both. Prebuilt
    routes keep their order and come first; registrations for the same
    pattern are merged into one ``Route`` placed where that pattern was
    first registered.

    Thread safety:
        The setup phase is single-threaded (decorators at import time).
        The freeze transition uses a Lock + double-check so exactly one
        thread compiles the route table, even if several ASGI workers call
        ``__call__()`` concurrently on first request.
    """

    __slots__ = (
        "_base_routes",
        "_freeze_lock",
        "_frozen",
        "_pending_routes",
        "_routes",
        "_shutdown_hooks",
        "_startup_hooks",
        "config",
    )

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        routes: RouteTable | Sequence[Route] | None = None,
    ) -> None:
        self.config: AppConfig = config or AppConfig()
        if routes is None:
            self._base_routes: RouteTable = RouteTable()
        elif isinstance(routes, RouteTable):
            self._base_routes = routes
        else:
            self._base_routes = RouteTable(tuple(routes))
        self._pending_routes: list[_PendingRoute] = []
        self._startup_hooks: list[Hook] = []
        self._shutdown_hooks: list[Hook] = []
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

        # Compiled state, set during _freeze()
        self._routes: RouteTable | None = None

    # -- Route registration --

    def route(
        self,
        pattern: str,
        *,
        methods: Sequence[str] | None = None,
        name: str | None = None,
    ) -> Callable[[Handler], Handler]:
        """Register a route handler via decorator.

        The handler is called as ``handler(request, params)`` and may be
        sync or async.

        Args:
            pattern: URL pattern. Use ``:name`` for path parameters,
                e.g. ``"/api/accounts/:id"``.
            methods: HTTP methods. Defaults to ``["GET"]``.
            name: Optional route name, shown by ``waypost routes``.
        """

        def decorator(func: Handler) -> Handler:
            self._check_not_frozen()
            self._pending_routes.append(
                _PendingRoute(pattern, tuple(m.upper() for m in methods or ("GET",)), func, name)
            )
            return func

        return decorator

    def add_route(
        self,
        pattern: str,
        method: str,
        handler: Handler,
        *,
        name: str | None = None,
    ) -> None:
        """Register *handler* for *method* on *pattern* without a decorator."""
        self._check_not_frozen()
        self._pending_routes.append(_PendingRoute(pattern, (method.upper(),), handler, name))

    # -- Lifecycle hooks --

    def on_startup(self, func: Hook) -> Hook:
        """Register a function to run at server startup (sync or async)."""
        self._check_not_frozen()
        self._startup_hooks.append(func)
        return func

    def on_shutdown(self, func: Hook) -> Hook:
        """Register a function to run at server shutdown (sync or async)."""
        self._check_not_frozen()
        self._shutdown_hooks.append(func)
        return func

    @property
    def routes(self) -> RouteTable:
        """The compiled route table. Freezes the app on first access."""
        self._ensure_frozen()
        assert self._routes is not None
        return self._routes

    # -- Server --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Start the server (dev or production based on config.debug).

        Freezes the route table and serves requests with pounce: a single
        reloading worker when ``config.debug`` is set, otherwise
        ``config.workers`` workers.
        """
        self._ensure_frozen()

        _host = host or self.config.host
        _port = port or self.config.port

        if self.config.debug:
            from waypost.server.dev import run_dev_server

            run_dev_server(
                self,
                _host,
                _port,
                reload=True,
                reload_include=self.config.reload_include,
                reload_dirs=self.config.reload_dirs,
            )
        else:
            from waypost.server.production import run_production_server

            run_production_server(
                self,
                host=_host,
                port=_port,
                workers=self.config.workers,
                log_level=self.config.log_level,
            )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        await handle_request(
            scope,
            receive,
            send,
            routes=self.routes,
            max_content_length=self.config.max_content_length,
        )

    async def startup(self) -> None:
        """Freeze the app and run startup hooks in registration order."""
        self._ensure_frozen()
        for hook in self._startup_hooks:
            await invoke(hook)

    async def shutdown(self) -> None:
        """Run shutdown hooks in registration order."""
        for hook in self._shutdown_hooks:
            await invoke(hook)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol.

        Freezes the app at startup (before the first HTTP request), runs
        the registered hooks, and signals completion back to the server.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    await self.startup()
                except Exception as exc:
                    logger.exception("Startup failed")
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                try:
                    await self.shutdown()
                except Exception as exc:
                    logger.exception("Shutdown failed")
                    await send({"type": "lifespan.shutdown.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Compile pending registrations into the immutable RouteTable."""
        base_patterns = {route.pattern for route in self._base_routes}

        merged: dict[str, dict[str, Handler]] = {}
        names: dict[str, str | None] = {}
        for pending in self._pending_routes:
            if pending.pattern in base_patterns:
                msg = (
                    f"Pattern {pending.pattern!r} is already in the route table "
                    "passed to App(routes=...)"
                )
                raise ConfigurationError(msg)
            handlers = merged.setdefault(pending.pattern, {})
            for method in pending.methods:
                if method in handlers:
                    msg = f"Duplicate registration: {method} {pending.pattern!r}"
                    raise ConfigurationError(msg)
                handlers[method] = pending.handler
            if names.get(pending.pattern) is None:
                names[pending.pattern] = pending.name

        compiled = [Route(pattern, handlers, names[pattern]) for pattern, handlers in merged.items()]
        table = RouteTable((*self._base_routes.routes, *compiled))

        for earlier, later in table.shadowed():
            logger.warning(
                "Route %r is unreachable: %r is registered earlier and matches every path it would",
                later.pattern,
                earlier.pattern,
            )

        self._routes = table
        self._frozen = True

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Register routes and hooks before calling app.run()."
            )
            raise RuntimeError(msg)

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "setup"
        count = len(self._routes) if self._routes is not None else len(self._base_routes)
        return f"<App {state} routes={count}>"

