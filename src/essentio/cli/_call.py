"""``essentio call`` — dispatch a single request in-process.

Useful for scripts and cron jobs that drive an app without a server:
the request is handled exactly as the ASGI entry point would handle it.
"""

import argparse
import sys

from essentio.cli._resolve import resolve_app
from essentio.http.request import Request


def _parse_headers(values: list[str]) -> dict[str, str]:
    headers: dict[str, str] = {}
    for item in values:
        name, sep, value = item.partition(":")
        if not sep or not name.strip():
            msg = f"Invalid header {item!r}; expected 'Name: value'"
            raise SystemExit(msg)
        headers[name.strip()] = value.strip()
    return headers


def run_call(args: argparse.Namespace) -> None:
    """Handle ``args.method`` ``args.target`` and print the response.

    Prints the status line to stderr and the body to stdout. Exits with
    status 1 when the response status is 400 or above.
    """
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    request = Request.create(
        args.method.upper(),
        args.target,
        headers=_parse_headers(args.header or []),
        body=args.data or b"",
    )
    response = app.handle(request)

    print(f"{response.status} {response.content_type}", file=sys.stderr)
    print(response.text)

    if response.status >= 400:
        raise SystemExit(1)
