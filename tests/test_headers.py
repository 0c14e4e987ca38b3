"""Tests for waypost.http.headers and waypost.http.query."""

import pytest

from waypost.http.headers import Headers
from waypost.http.query import QueryParams


def _h(*pairs: tuple[str, str]) -> Headers:
    """Shorthand: build Headers from string pairs."""
    raw = tuple((k.encode("latin-1"), v.encode("latin-1")) for k, v in pairs)
    return Headers(raw)


class TestHeaders:
    def test_case_insensitive(self) -> None:
        h = _h(("Content-Type", "application/json"))
        assert h["content-type"] == "application/json"
        assert h["CONTENT-TYPE"] == "application/json"

    def test_missing_key_raises(self) -> None:
        with pytest.raises(KeyError):
            _h(("Accept", "*/*"))["X-Missing"]

    def test_contains(self) -> None:
        h = _h(("Accept", "*/*"))
        assert "accept" in h
        assert "x-missing" not in h
        assert 42 not in h  # type: ignore[operator]

    def test_get_default(self) -> None:
        assert _h().get("accept") is None
        assert _h().get("accept", "*/*") == "*/*"

    def test_get_list_and_len(self) -> None:
        h = _h(("X-Tag", "a"), ("x-tag", "b"), ("Accept", "*/*"))
        assert h.get_list("X-Tag") == ["a", "b"]
        assert h["x-tag"] == "a"
        assert len(h) == 2
        assert list(h) == ["x-tag", "accept"]


class TestQueryParams:
    def test_parse(self) -> None:
        q = QueryParams(b"limit=10&offset=5")
        assert q["limit"] == "10"
        assert dict(q) == {"limit": "10", "offset": "5"}

    def test_repeated_keys(self) -> None:
        q = QueryParams(b"tag=a&tag=b")
        assert q["tag"] == "a"
        assert q.get_list("tag") == ["a", "b"]
        assert len(q) == 1

    def test_blank_values_kept(self) -> None:
        assert QueryParams(b"q=")["q"] == ""

    def test_raw(self) -> None:
        assert QueryParams(b"x=1").raw == b"x=1"
