"""Invoke helpers — call sync or async handlers uniformly.

Route handlers and lifecycle hooks can be ``def`` or ``async def``.
This module keeps the sync/async check in exactly one place.

Usage::

    from waypost._internal.invoke import invoke

    result = await invoke(handler, request, params)
"""

import inspect
from typing import Any


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call a handler and await the result if it's awaitable.

    Works with both sync and async callables::

        # sync: returns immediately
        def healthcheck(request, params):
            return {"status": "healthy"}

        # async: the coroutine is awaited
        async def list_accounts(request, params):
            return await store.read_all("accounts")
    """
    result = handler(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
