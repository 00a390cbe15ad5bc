"""Tests for essentio.http.response — Response chaining and factories."""

import json as json_module

import pytest

from essentio.http.response import Response, html, json, redirect, text


class TestResponse:
    def test_defaults(self) -> None:
        r = Response()
        assert r.body == ""
        assert r.status == 200
        assert r.content_type == "text/html; charset=utf-8"
        assert r.headers == ()

    def test_with_status(self) -> None:
        assert Response().with_status(201).status == 201

    def test_with_body(self) -> None:
        assert Response().with_body("hi").body == "hi"

    def test_with_body_converts_values(self) -> None:
        assert Response().with_body(42).body == "42"
        assert Response().with_body(None).body == ""
        assert Response().with_body(b"raw").body == b"raw"

    def test_with_header(self) -> None:
        assert Response().with_header("X-Custom", "value").headers == (("X-Custom", "value"),)

    def test_add_headers_merges(self) -> None:
        r = Response().with_header("A", "1").with_header("B", "2")
        r = r.add_headers({"b": "3", "C": "4"})
        assert r.headers == (("A", "1"), ("b", "3"), ("C", "4"))

    def test_with_headers_replaces(self) -> None:
        r = Response().with_header("A", "1").with_headers({"B": "2"})
        assert r.headers == (("B", "2"),)

    def test_header_lookup_returns_last(self) -> None:
        r = Response().with_header("X-A", "1").with_header("x-a", "2")
        assert r.header("X-A") == "2"
        assert r.header("missing") is None

    def test_with_content_type(self) -> None:
        assert Response().with_content_type("application/json").content_type == "application/json"

    def test_chaining_returns_new_objects(self) -> None:
        r1 = Response("hello")
        r2 = r1.with_status(201)
        r3 = r2.with_header("X-Foo", "bar")

        assert r1.status == 200
        assert r2.status == 201
        assert r2.headers == ()
        assert r3.headers == (("X-Foo", "bar"),)

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            Response().status = 500  # type: ignore[misc]

    def test_body_bytes_and_text(self) -> None:
        assert Response("héllo").body_bytes == "héllo".encode()
        assert Response(b"bytes").text == "bytes"


class TestFactories:
    def test_text(self) -> None:
        r = text("plain", status=201)
        assert r.body == "plain"
        assert r.status == 201
        assert r.content_type.startswith("text/plain")

    def test_html(self) -> None:
        r = html("<p>hi</p>")
        assert r.content_type.startswith("text/html")

    def test_json(self) -> None:
        r = json({"ok": True}, status=202)
        assert r.status == 202
        assert r.content_type == "application/json"
        assert json_module.loads(r.body) == {"ok": True}

    def test_redirect(self) -> None:
        r = redirect("/login")
        assert r.status == 302
        assert r.header("Location") == "/login"
        assert r.body == ""

    def test_redirect_custom_status(self) -> None:
        assert redirect("/new", status=301).status == 301
