"""Tests for essentio.container — lazy service bindings."""

import pytest

from essentio.container import Container
from essentio.errors import ConfigurationError


class TestContainer:
    def test_factory_called_per_resolve(self) -> None:
        c = Container()
        c.bind("list", list)
        assert c.resolve("list") is not c.resolve("list")

    def test_once_caches_instance(self) -> None:
        calls: list[int] = []

        def factory() -> object:
            calls.append(1)
            return object()

        c = Container()
        c.bind("svc", factory, once=True)
        assert calls == []
        assert c.resolve("svc") is c.resolve("svc")
        assert calls == [1]

    def test_type_keys(self) -> None:
        class Mailer:
            pass

        c = Container()
        c.bind(Mailer, Mailer)
        assert isinstance(c.resolve(Mailer), Mailer)
        assert Mailer in c

    def test_rebind_replaces(self) -> None:
        c = Container()
        c.bind("n", lambda: 1)
        c.bind("n", lambda: 2)
        assert c.resolve("n") == 2

    def test_unbound_key(self) -> None:
        with pytest.raises(ConfigurationError, match="missing"):
            Container().resolve("missing")
