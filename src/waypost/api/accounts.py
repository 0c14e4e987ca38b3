"""Account CRUD handlers over a RecordStore.

Accounts are stored as ``{"id": str, "name": str}`` records in the
``accounts`` resource. Handlers are built per store so the store is
passed in, not looked up globally.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from waypost.data.ids import generate_id
from waypost.data.store import Record, RecordStore
from waypost.errors import BadRequest, NotFound
from waypost.http.body import parse_json_body
from waypost.http.request import Request
from waypost.http.response import Response, json_response, no_content

RESOURCE = "accounts"
INVALID_ACCOUNT = "Invalid account data: name is required and must be a string."
ACCOUNT_NOT_FOUND = "Account not found"


def _account_name(body: Any) -> str:
    if not isinstance(body, dict) or not isinstance(body.get("name"), str):
        raise BadRequest(INVALID_ACCOUNT)
    return body["name"]


def _find(accounts: list[Record], account_id: str) -> int:
    for index, account in enumerate(accounts):
        if account.get("id") == account_id:
            return index
    raise NotFound(ACCOUNT_NOT_FOUND)


@dataclass(frozen=True, slots=True)
class AccountHandlers:
    """Bound account handlers; each takes ``(request, params)``."""

    store: RecordStore

    async def list_accounts(self, request: Request, params: Mapping[str, str]) -> Response:
        return json_response(await self.store.read_all(RESOURCE))

    async def create_account(self, request: Request, params: Mapping[str, str]) -> Response:
        name = _account_name(await parse_json_body(request))
        accounts = await self.store.read_all(RESOURCE)
        account = {"id": generate_id({a.get("id") for a in accounts}), "name": name}
        accounts.append(account)
        await self.store.write_all(RESOURCE, accounts)
        return json_response(account, 201)

    async def get_account(self, request: Request, params: Mapping[str, str]) -> Response:
        accounts = await self.store.read_all(RESOURCE)
        return json_response(accounts[_find(accounts, params["id"])])

    async def update_account(self, request: Request, params: Mapping[str, str]) -> Response:
        # Unknown id wins over a bad body: 404 before 400
        accounts = await self.store.read_all(RESOURCE)
        index = _find(accounts, params["id"])
        name = _account_name(await parse_json_body(request))
        accounts[index] = {**accounts[index], "name": name}
        await self.store.write_all(RESOURCE, accounts)
        return json_response(accounts[index])

    async def delete_account(self, request: Request, params: Mapping[str, str]) -> Response:
        accounts = await self.store.read_all(RESOURCE)
        del accounts[_find(accounts, params["id"])]
        await self.store.write_all(RESOURCE, accounts)
        return no_content()
