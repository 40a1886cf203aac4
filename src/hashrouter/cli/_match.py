"""``hashrouter match`` — dry-run a fragment against a router.

Prints the routes a dispatch pass would invoke, in order, with the
captured params and the parsed query. No handler is called.
"""

import argparse
import sys

from hashrouter.cli._resolve import resolve_router
from hashrouter.cli._routes import handler_name
from hashrouter.url import parse_url


def run_match(args: argparse.Namespace) -> None:
    """Exit with status 1 when the fragment is rejected or nothing matches."""
    try:
        router = resolve_router(args.router)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    fragment: str = args.fragment
    if not fragment.startswith("/"):
        print(f"Error: fragment must start with '/', got {fragment!r}", file=sys.stderr)
        raise SystemExit(1)

    url = parse_url(fragment)
    matches = router.registry.query_all(url.path)
    if not matches:
        print(f"No route matches {url.path!r}")
        raise SystemExit(1)

    print(f"path:  {url.path}")
    print(f"query: {dict(url.query)!r}")
    for n, found in enumerate(matches, start=1):
        position = "literal" if found.terminal else f"#{found.position}"
        print(f"@{n} [{position}] {found.route.display} -> {handler_name(found.route)} params={found.params!r}")
