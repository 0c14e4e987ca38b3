"""Route, RouteTable, and RouteMatch frozen dataclasses."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from waypost._internal.types import Handler
from waypost.errors import ConfigurationError
from waypost.routing.match import is_param, split_segments


@dataclass(frozen=True, slots=True)
class Route:
    """A pattern plus its method-to-handler table.

    Method names are normalised to uppercase and kept in registration
    order; that order is what a 405 ``Allow`` header lists.

    Usage::

        Route("/api/accounts/:id", {"GET": get_account, "DELETE": delete_account})
    """

    pattern: str
    handlers: Mapping[str, Handler]
    name: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.pattern, str):
            msg = f"Route pattern must be a string, got {type(self.pattern).__name__}"
            raise ConfigurationError(msg)

        normalised: dict[str, Handler] = {}
        for method, handler in self.handlers.items():
            key = method.upper()
            if key in normalised:
                msg = f"Route {self.pattern!r} registers method {key} more than once"
                raise ConfigurationError(msg)
            if not callable(handler):
                msg = f"Handler for {key} {self.pattern!r} is not callable"
                raise ConfigurationError(msg)
            normalised[key] = handler

        if not normalised:
            msg = f"Route {self.pattern!r} has no handlers"
            raise ConfigurationError(msg)

        # Frozen dataclass: replace the caller's dict with a read-only view
        object.__setattr__(self, "handlers", MappingProxyType(normalised))

    @property
    def methods(self) -> tuple[str, ...]:
        """Registered HTTP methods, in registration order."""
        return tuple(self.handlers)

    def handler_for(self, method: str) -> Handler | None:
        """Return the handler registered for *method*, or ``None``."""
        return self.handlers.get(method.upper())


@dataclass(frozen=True, slots=True)
class RouteTable:
    """Ordered, immutable collection of routes.

    Built once at startup and passed explicitly to ``dispatch()``.
    Routes are scanned in order and the first pattern match wins, so a
    later route whose pattern overlaps an earlier one is never reached.
    """

    routes: tuple[Route, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "routes", tuple(self.routes))

    def __iter__(self) -> Iterator[Route]:
        return iter(self.routes)

    def __len__(self) -> int:
        return len(self.routes)

    def __bool__(self) -> bool:
        return bool(self.routes)

    def shadowed(self) -> list[tuple[Route, Route]]:
        """Return ``(earlier, later)`` pairs where *later* can never match.

        A later route is unreachable when an earlier pattern has the same
        segment count and, at every position, is either a parameter or
        the same literal. Dispatch never falls through, so such a route
        is dead configuration.
        """
        pairs: list[tuple[Route, Route]] = []
        for index, later in enumerate(self.routes):
            for earlier in self.routes[:index]:
                if _covers(earlier.pattern, later.pattern):
                    pairs.append((earlier, later))
                    break
        return pairs


def _covers(general: str, specific: str) -> bool:
    """True if every path matched by *specific* is also matched by *general*."""
    general_segments = split_segments(general)
    specific_segments = split_segments(specific)
    if len(general_segments) != len(specific_segments):
        return False
    for outer, inner in zip(general_segments, specific_segments, strict=True):
        if is_param(outer):
            continue
        if is_param(inner) or outer != inner:
            return False
    return True


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route resolution."""

    route: Route
    handler: Handler
    path_params: dict[str, str]
