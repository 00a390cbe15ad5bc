"""Immutable, case-insensitive HTTP request headers.

Built from ``(name, value)`` pairs — raw ASGI byte pairs or plain strings.
Names are lowercased once at construction.
"""

from collections.abc import Iterable, Iterator, Mapping


def _decode(value: str | bytes) -> str:
    if isinstance(value, bytes):
        return value.decode("latin-1")
    return value


class Headers(Mapping[str, str]):
    """Immutable, case-insensitive HTTP headers.

    ``__getitem__`` returns the first matching value.
    ``get_list`` returns all values for a header.
    """

    __slots__ = ("_items",)

    def __init__(self, raw: Iterable[tuple[str | bytes, str | bytes]] = ()) -> None:
        items = tuple((_decode(name).lower(), _decode(value)) for name, value in raw)
        object.__setattr__(self, "_items", items)

    @classmethod
    def from_dict(cls, headers: Mapping[str, str] | None) -> "Headers":
        """Build headers from a plain ``{name: value}`` mapping."""
        return cls(tuple((headers or {}).items()))

    def __getitem__(self, key: str) -> str:
        key_lower = key.lower()
        for name, value in self._items:
            if name == key_lower:
                return value
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        key_lower = key.lower()
        return any(name == key_lower for name, _ in self._items)

    def __iter__(self) -> Iterator[str]:
        seen: set[str] = set()
        for name, _ in self._items:
            if name not in seen:
                seen.add(name)
                yield name

    def __len__(self) -> int:
        return len(set(self))

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self[k]!r}" for k in self)
        return f"Headers({{{items}}})"

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*."""
        key_lower = key.lower()
        return [value for name, value in self._items if name == key_lower]
