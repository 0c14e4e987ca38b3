"""Persistence collaborators used by route handlers.

Usage::

    from waypost.data import JsonFileStore, generate_id

    store = JsonFileStore("db")
    accounts = await store.read_all("accounts")
    accounts.append({"id": generate_id({a["id"] for a in accounts}), "name": "Ops"})
    await store.write_all("accounts", accounts)
"""

from waypost.data.ids import generate_id
from waypost.data.store import JsonFileStore, MemoryStore, Record, RecordStore

__all__ = [
    "JsonFileStore",
    "MemoryStore",
    "Record",
    "RecordStore",
    "generate_id",
]
