"""Command-line arguments for app-defined commands.

An app registers commands with ``App.command(name)``; ``essentio run``
hands the remaining argv to ``App.run_command``, which parses it into
an ``Arguments`` value and calls the matching handler.

Parsing is free-form; commands declare no schema::

    deploy --env=production -v web1 -- --literal

    command     "deploy"
    named       {"env": "production", "v": "web1"}
    positional  ("--literal",)

The first bare word is the command. ``--key=value``, ``--key value`` and
``-kvalue`` set named values, a name with no following value is a flag
(``True``), and everything after ``--`` is positional.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Arguments:
    """Parsed command-line arguments."""

    command: str = ""
    named: dict[str, str | bool] = field(default_factory=dict)
    positional: tuple[str, ...] = ()

    def get(self, key: str | int, default: Any = None) -> Any:
        """Return a named value, or a positional one when *key* is an int."""
        if isinstance(key, int):
            if 0 <= key < len(self.positional):
                return self.positional[key]
            return default
        return self.named.get(key, default)

    def __contains__(self, key: object) -> bool:
        if isinstance(key, int):
            return 0 <= key < len(self.positional)
        return key in self.named


def _takes_value(argv: Sequence[str], index: int) -> bool:
    return index < len(argv) and not argv[index].startswith("-")


def parse_arguments(argv: Sequence[str]) -> Arguments:
    """Parse *argv* (without the program name) into ``Arguments``."""
    command = ""
    named: dict[str, str | bool] = {}
    positional: list[str] = []

    i = 0
    while i < len(argv):
        item = argv[i]
        i += 1

        if item == "--":
            positional.extend(argv[i:])
            break

        if item.startswith("--"):
            key, sep, value = item[2:].partition("=")
            if sep:
                named[key] = value
            elif _takes_value(argv, i):
                named[key] = argv[i]
                i += 1
            else:
                named[key] = True
            continue

        if item.startswith("-") and len(item) > 1:
            key, attached = item[1], item[2:]
            if attached:
                named[key] = attached.removeprefix("=")
            elif _takes_value(argv, i):
                named[key] = argv[i]
                i += 1
            else:
                named[key] = True
            continue

        if not command:
            command = item
        else:
            positional.append(item)

    return Arguments(command=command, named=named, positional=tuple(positional))
