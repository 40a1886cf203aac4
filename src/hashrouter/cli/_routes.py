"""``hashrouter routes`` — list registered routes.

Resolves an import string to a Router and prints every registered
route with its kind, path or pattern, and handler name.
"""

import argparse
import sys

from hashrouter.cli._resolve import resolve_router
from hashrouter.routing.route import CompiledRoute


def handler_name(route: CompiledRoute) -> str:
    return getattr(route.handler, "__qualname__", None) or repr(route.handler)


def run_routes(args: argparse.Namespace) -> None:
    """List registered routes for a hashrouter Router.

    Literal routes come first, then pattern routes in match-priority order.
    """
    try:
        router = resolve_router(args.router)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    routes = router.registry.routes
    if not routes:
        print("No routes registered.")
        return

    rows = [(route.kind, route.display, handler_name(route)) for route in routes]

    max_kind = max(max(len(r[0]) for r in rows), 4)  # "KIND" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_kind}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("KIND", "PATH", "HANDLER"))
    sep_len = max_kind + max_path + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for kind, path, name in rows:
        print(fmt.format(kind, path, name))
