"""Essentio CLI — route listing, one-shot request dispatch and app commands.

Entry point registered as ``essentio`` in ``pyproject.toml``::

    [project.scripts]
    essentio = "essentio.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``essentio`` command."""
    parser = argparse.ArgumentParser(
        prog="essentio",
        description="essentio — a minimalist web and CLI bootstrap framework.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- essentio routes --------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument("app", help="Import string (e.g. myapp:app)")

    # -- essentio call ----------------------------------------------------
    call_parser = subparsers.add_parser("call", help="Dispatch one request in-process")
    call_parser.add_argument("app", help="Import string (e.g. myapp:app)")
    call_parser.add_argument("method", help="HTTP method (e.g. GET)")
    call_parser.add_argument("target", help="Request path, optionally with a query string")
    call_parser.add_argument(
        "-H",
        "--header",
        action="append",
        help="Request header as 'Name: value' (repeatable)",
    )
    call_parser.add_argument("-d", "--data", default=None, help="Request body")

    # -- essentio run ----------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Run a command registered with App.command")
    run_parser.add_argument("app", help="Import string (e.g. myapp:app)")
    run_parser.add_argument(
        "argv",
        nargs=argparse.REMAINDER,
        help="Command name followed by its arguments",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from essentio.cli._routes import run_routes

        run_routes(args)
    elif args.command == "call":
        from essentio.cli._call import run_call

        run_call(args)
    elif args.command == "run":
        from essentio.cli._run import run_command

        run_command(args)
