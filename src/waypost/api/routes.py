"""The API route table.

Order matters only where patterns overlap; none of these do, since they
differ in segment count or in a literal segment.
"""

from collections.abc import Mapping

from waypost.api.accounts import AccountHandlers
from waypost.data.store import RecordStore
from waypost.http.body import parse_json_body
from waypost.http.request import Request
from waypost.routing.route import Route, RouteTable


def api_status(request: Request, params: Mapping[str, str]) -> dict[str, str]:
    return {"message": "API is running!"}


def healthcheck(request: Request, params: Mapping[str, str]) -> dict[str, str]:
    return {"status": "healthy"}


def hello(request: Request, params: Mapping[str, str]) -> dict[str, str]:
    return {"message": "Hello, world!"}


async def hello_post(request: Request, params: Mapping[str, str]) -> dict[str, object]:
    body = await parse_json_body(request)
    name = body.get("name") if isinstance(body, dict) else None
    return {"message": f"Hello, {name or 'anonymous'}!", "received": body}


def hello_name(request: Request, params: Mapping[str, str]) -> dict[str, str]:
    return {"message": f"Hello, {params['name']}!"}


def build_routes(store: RecordStore) -> RouteTable:
    """Build the API route table with account handlers bound to *store*."""
    accounts = AccountHandlers(store)
    return RouteTable(
        (
            Route("/api", {"GET": api_status}, name="status"),
            Route("/api/healthcheck", {"GET": healthcheck}, name="healthcheck"),
            Route("/api/hello", {"GET": hello, "POST": hello_post}, name="hello"),
            Route("/api/hello/:name", {"GET": hello_name}, name="hello-name"),
            Route(
                "/api/accounts",
                {"GET": accounts.list_accounts, "POST": accounts.create_account},
                name="accounts",
            ),
            Route(
                "/api/accounts/:id",
                {
                    "GET": accounts.get_account,
                    "PUT": accounts.update_account,
                    "DELETE": accounts.delete_account,
                },
                name="account",
            ),
        )
    )
