"""Request body parsing for JSON handlers."""

from typing import Any

from waypost.http.request import Request


async def parse_json_body(request: Request) -> Any | None:
    """Parse the request body as JSON, or return ``None``.

    An empty body, invalid UTF-8, and malformed JSON all yield ``None``,
    so handlers can treat "no usable body" as a single case. A literal
    JSON ``null`` body is indistinguishable from those and also gives
    ``None``.
    """
    raw = await request.body()
    if not raw.strip():
        return None
    try:
        return await request.json()
    except ValueError:
        return None
