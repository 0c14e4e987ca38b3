"""Record stores — whole-collection read/write of JSON records.

Each resource is a list of JSON objects. ``JsonFileStore`` keeps one
``<resource>.json`` file per resource and runs the blocking file calls
in a worker thread via ``anyio.to_thread``.

There is no locking: two requests doing read-modify-write on the same
resource can lose an update. Callers that need ordering must provide it.
"""

import json
import logging
import os
import re
import tempfile
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any, Protocol, TypeAlias, runtime_checkable

import anyio

from waypost.errors import StoreError

logger = logging.getLogger("waypost.data")

Record: TypeAlias = dict[str, Any]

_RESOURCE_NAME = re.compile(r"[A-Za-z0-9_-]+")


def _run_sync(func: Callable[..., Any], *args: Any) -> Any:
    """Run blocking call in anyio worker thread."""
    return anyio.to_thread.run_sync(func, *args)  # type: ignore[union-attr]


def _check_resource(resource: str) -> None:
    if not _RESOURCE_NAME.fullmatch(resource):
        msg = f"Invalid resource name {resource!r}: use letters, digits, '-' or '_'"
        raise StoreError(msg)


@runtime_checkable
class RecordStore(Protocol):
    """What handlers need from persistence."""

    async def read_all(self, resource: str) -> list[Record]: ...
    async def write_all(self, resource: str, records: Sequence[Record]) -> None: ...


class JsonFileStore:
    """Flat-file store: ``<data_dir>/<resource>.json`` holds a JSON array.

    A missing file reads as an empty collection. Files are written with
    two-space indentation so they stay diffable.
    """

    __slots__ = ("data_dir",)

    def __init__(self, data_dir: str | Path) -> None:
        self.data_dir = Path(data_dir)

    def path_for(self, resource: str) -> Path:
        """File backing *resource*."""
        _check_resource(resource)
        return self.data_dir / f"{resource}.json"

    async def read_all(self, resource: str) -> list[Record]:
        path = self.path_for(resource)
        return await _run_sync(self._read, path)

    async def write_all(self, resource: str, records: Sequence[Record]) -> None:
        path = self.path_for(resource)
        await _run_sync(self._write, path, list(records))

    @staticmethod
    def _read(path: Path) -> list[Record]:
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except UnicodeDecodeError as exc:
            logger.error("Corrupt data file %s: %s", path, exc)
            msg = f"{path} is not valid UTF-8"
            raise StoreError(msg) from exc
        except OSError as exc:
            msg = f"Cannot read {path}: {exc}"
            raise StoreError(msg) from exc

        if not raw.strip():
            return []
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.error("Corrupt data file %s: %s", path, exc)
            msg = f"{path} does not contain valid JSON"
            raise StoreError(msg) from exc

        if not isinstance(data, list):
            msg = f"{path} must contain a JSON array, got {type(data).__name__}"
            raise StoreError(msg)
        return data

    @staticmethod
    def _write(path: Path, records: list[Record]) -> None:
        payload = json.dumps(records, indent=2)
        tmp_name: str | None = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            # Each write gets its own temp file; readers never see a half-written file
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=path.parent,
                prefix=f"{path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(payload)
            os.replace(tmp_name, path)
        except OSError as exc:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            msg = f"Cannot write {path}: {exc}"
            raise StoreError(msg) from exc
        logger.debug("Wrote %d records to %s", len(records), path)


class MemoryStore:
    """In-process store with the same interface, for tests and demos.

    Records are deep-copied through JSON on the way in and out, so
    callers cannot mutate stored state by accident and non-JSON values
    fail the same way they would on disk.
    """

    __slots__ = ("_data",)

    def __init__(self, initial: dict[str, Sequence[Record]] | None = None) -> None:
        self._data: dict[str, str] = {}
        for resource, records in (initial or {}).items():
            _check_resource(resource)
            self._data[resource] = json.dumps(list(records))

    async def read_all(self, resource: str) -> list[Record]:
        _check_resource(resource)
        return json.loads(self._data.get(resource, "[]"))

    async def write_all(self, resource: str, records: Sequence[Record]) -> None:
        _check_resource(resource)
        self._data[resource] = json.dumps(list(records))
