"""Waypost exception hierarchy.

Shared across the dispatcher, App, handlers, and the data store so every
module raises and catches the same types.
"""

from dataclasses import dataclass


class WaypostError(Exception):
    """Base for all waypost-specific errors."""


class ConfigurationError(WaypostError):
    """Raised when app configuration or route registration is invalid.

    Typically raised during ``App._freeze()`` or ``AppConfig.from_env()``
    at startup.
    """


class StoreError(WaypostError):
    """Raised when a resource collection cannot be read or written."""


@dataclass(frozen=True, slots=True)
class HTTPError(WaypostError):
    """An error that maps directly to an HTTP status code.

    Raised by the dispatcher or by handlers. ``dispatch()`` catches these
    and renders them with their own status instead of a 500.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class BadRequest(HTTPError):  # noqa: N818
    """400 — malformed body or missing required field."""

    def __init__(self, detail: str = "Bad Request") -> None:
        super().__init__(status=400, detail=detail)


class NotFound(HTTPError):  # noqa: N818
    """404 — no route matched the request path, or the resource is unknown."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class MethodNotAllowed(HTTPError):  # noqa: N818
    """405 — route pattern matched but has no handler for this HTTP method.

    Carries an ``Allow`` header listing the methods registered on the
    matched route, in registration order.
    """

    def __init__(self, allowed: tuple[str, ...], detail: str = "") -> None:
        allow_value = ", ".join(allowed)
        default_detail = f"Method not allowed. Allowed methods: {allow_value}"
        super().__init__(
            status=405,
            detail=detail or default_detail,
            headers=(("Allow", allow_value),),
        )

    @property
    def allowed(self) -> tuple[str, ...]:
        """Methods registered on the matched route."""
        for name, value in self.headers:
            if name == "Allow":
                return tuple(m for m in value.split(", ") if m)
        return ()


class PayloadTooLarge(HTTPError):  # noqa: N818
    """413 — declared request body exceeds ``AppConfig.max_content_length``."""

    def __init__(self, detail: str = "Payload Too Large") -> None:
        super().__init__(status=413, detail=detail)
