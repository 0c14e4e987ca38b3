"""Tests for waypost.http.response — Response and JSON helpers."""

import pytest

from waypost.http.response import Response, error_response, json_response, no_content


class TestResponse:
    def test_defaults(self) -> None:
        response = Response()
        assert response.status == 200
        assert response.content_type == "text/plain; charset=utf-8"
        assert response.headers == ()

    def test_chaining_returns_new_objects(self) -> None:
        original = Response("hi")
        changed = original.with_status(201).with_header("X-One", "1").with_headers({"X-Two": "2"})
        assert original.status == 200
        assert original.headers == ()
        assert changed.status == 201
        assert changed.headers == (("X-One", "1"), ("X-Two", "2"))

    def test_with_content_type(self) -> None:
        assert Response().with_content_type("text/csv").content_type == "text/csv"

    def test_header_lookup_case_insensitive(self) -> None:
        response = Response().with_header("Allow", "GET")
        assert response.header("allow") == "GET"
        assert response.header("content-type") == "text/plain; charset=utf-8"
        assert response.header("x-missing") is None

    def test_body_conversions(self) -> None:
        assert Response("héllo").body_bytes == "héllo".encode()
        assert Response(b"bytes").text == "bytes"

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            Response().status = 500  # type: ignore[misc]


class TestHelpers:
    def test_json_response(self) -> None:
        response = json_response({"status": "healthy"})
        assert response.status == 200
        assert response.content_type == "application/json"
        assert response.json == {"status": "healthy"}

    def test_json_response_status(self) -> None:
        assert json_response([], 201).status == 201

    def test_error_response(self) -> None:
        response = error_response("Account not found", 404)
        assert response.status == 404
        assert response.json == {"error": "Account not found"}

    def test_error_response_default_400(self) -> None:
        assert error_response("bad").status == 400

    def test_no_content(self) -> None:
        response = no_content()
        assert response.status == 204
        assert response.body_bytes == b""
