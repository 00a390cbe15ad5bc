"""Service container — lazily constructed services keyed by name or type.

Factories are registered during setup and called on first resolve.
Services bound with ``once=True`` are cached after the first call;
the rest are rebuilt on every resolve.
"""

import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from essentio.errors import ConfigurationError


@dataclass(slots=True)
class Binding:
    """A registered factory and, for singletons, its cached instance."""

    factory: Callable[[], Any]
    once: bool = False
    instance: Any = None
    resolved: bool = False


@dataclass(slots=True)
class Container:
    """Registry of service factories.

    Usage::

        container = Container()
        container.bind(Mailer, lambda: Mailer(host="smtp"), once=True)
        mailer = container.resolve(Mailer)
    """

    _bindings: dict[Any, Binding] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock)

    def bind(self, key: Any, factory: Callable[[], Any], *, once: bool = False) -> Binding:
        """Register *factory* under *key*, replacing any earlier binding."""
        binding = Binding(factory=factory, once=once)
        self._bindings[key] = binding
        return binding

    def resolve(self, key: Any) -> Any:
        """Return the service for *key*.

        Raises ``ConfigurationError`` if nothing is bound under *key*.
        """
        binding = self._bindings.get(key)
        if binding is None:
            msg = f"No service bound for {key!r}."
            raise ConfigurationError(msg)

        if not binding.once:
            return binding.factory()

        if not binding.resolved:
            with self._lock:
                if not binding.resolved:
                    binding.instance = binding.factory()
                    binding.resolved = True
        return binding.instance

    def __contains__(self, key: object) -> bool:
        return key in self._bindings
