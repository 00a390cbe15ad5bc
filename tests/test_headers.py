"""Tests for essentio.http.headers and essentio.http.query."""

from essentio.http.headers import Headers
from essentio.http.query import QueryParams


class TestHeaders:
    def test_from_bytes_pairs(self) -> None:
        h = Headers(((b"Content-Type", b"text/plain"),))
        assert h["content-type"] == "text/plain"

    def test_case_insensitive(self) -> None:
        h = Headers.from_dict({"X-Token": "abc"})
        assert h["X-TOKEN"] == "abc"
        assert "x-token" in h
        assert 1 not in h

    def test_get_default(self) -> None:
        assert Headers().get("missing", "d") == "d"

    def test_get_list(self) -> None:
        h = Headers((("Accept", "a"), ("accept", "b")))
        assert h.get_list("ACCEPT") == ["a", "b"]
        assert h["accept"] == "a"
        assert len(h) == 1
        assert list(h) == ["accept"]


class TestQueryParams:
    def test_parses_bytes_and_str(self) -> None:
        assert QueryParams(b"a=1")["a"] == "1"
        assert QueryParams("a=1")["a"] == "1"

    def test_first_value_and_list(self) -> None:
        q = QueryParams("tag=a&tag=b")
        assert q["tag"] == "a"
        assert q.get_list("tag") == ["a", "b"]

    def test_blank_values_kept(self) -> None:
        assert QueryParams("flag=")["flag"] == ""

    def test_get_int(self) -> None:
        q = QueryParams("page=3&bad=x")
        assert q.get_int("page") == 3
        assert q.get_int("bad", 1) == 1
        assert q.get_int("missing") is None

    def test_get_bool(self) -> None:
        q = QueryParams("on=yes&off=0")
        assert q.get_bool("on") is True
        assert q.get_bool("off") is False
        assert q.get_bool("missing", True) is True

    def test_raw(self) -> None:
        assert QueryParams(b"a=1&b=2").raw == "a=1&b=2"
