"""``essentio routes`` — list registered routes in match order."""

import argparse
import sys

from essentio.cli._resolve import resolve_app


def run_routes(args: argparse.Namespace) -> None:
    """Print a METHOD / PATH / HANDLER table for ``args.app``.

    Rows appear in registration order, which is also the order the
    dispatcher tries them.
    """
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    routes = app.router.routes
    if not routes:
        print("No routes registered.")
        return

    rows: list[tuple[str, str, str]] = []
    for route in routes:
        handler_name = getattr(route.handler, "__name__", str(route.handler))
        if route.middleware:
            handler_name = f"{handler_name} (+{len(route.middleware)} middleware)"
        rows.append((route.method, "/" + route.path.strip("/"), handler_name))

    max_method = max(max(len(r[0]) for r in rows), 6)  # "METHOD" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_method}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("METHOD", "PATH", "HANDLER"))
    sep_len = max_method + max_path + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for method, path, handler_name in rows:
        print(fmt.format(method, path, handler_name))
