"""Shared type aliases used across waypost modules."""

from collections.abc import Awaitable, Callable, Mapping
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
    from waypost.http.request import Request

# Route handler, called as handler(request, params); sync or async
Handler: TypeAlias = Callable[["Request", Mapping[str, str]], Any | Awaitable[Any]]

# Lifecycle hook: no arguments, sync or async
Hook: TypeAlias = Callable[[], Any]
