"""ASGI response sending — translates a waypost Response into ASGI messages."""

from waypost._internal.asgi import Send
from waypost.http.response import Response


def body_allowed(status: int) -> bool:
    """Whether an HTTP status code permits a response body."""
    # RFC 9110: 1xx, 204, and 304 responses do not include a message body.
    return not (100 <= status < 200 or status in {204, 304})


async def send_response(response: Response, send: Send) -> None:
    """Emit ``http.response.start`` and a single ``http.response.body``."""
    body = response.body_bytes if body_allowed(response.status) else b""

    raw_headers: list[tuple[bytes, bytes]] = []
    if body or response.status not in {204, 304}:
        raw_headers.append((b"content-type", response.content_type.encode("latin-1")))
    for name, value in response.headers:
        raw_headers.append((name.lower().encode("latin-1"), value.encode("latin-1")))
    raw_headers.append((b"content-length", str(len(body)).encode("latin-1")))

    await send(
        {
            "type": "http.response.start",
            "status": response.status,
            "headers": raw_headers,
        }
    )
    await send(
        {
            "type": "http.response.body",
            "body": body,
        }
    )
