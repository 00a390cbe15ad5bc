"""``essentio run`` — run a command registered with ``App.command``."""

import argparse
import sys

from essentio.cli._resolve import resolve_app
from essentio.errors import CommandNotFound


def run_command(args: argparse.Namespace) -> None:
    """Run the command named in ``args.argv`` and exit with its status."""
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    try:
        status = app.run_command(args.argv)
    except CommandNotFound as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc

    raise SystemExit(status)
