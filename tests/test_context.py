"""Tests for essentio.context — request-scoped ContextVar."""

import pytest

from essentio.context import get_request, request_value, request_var
from essentio.http.request import Request


class TestRequestVar:
    def test_get_request_raises_outside_context(self) -> None:
        with pytest.raises(LookupError):
            get_request()

    def test_set_and_get_request(self) -> None:
        request = Request.create("GET", "/test?q=1")
        token = request_var.set(request)
        try:
            assert get_request() is request
        finally:
            request_var.reset(token)

    def test_request_value_reads_attributes(self) -> None:
        request = Request.create("GET", "/search?q=kida")
        token = request_var.set(request)
        try:
            assert request_value("q") == "kida"
            assert request_value("missing", "fallback") == "fallback"
        finally:
            request_var.reset(token)
