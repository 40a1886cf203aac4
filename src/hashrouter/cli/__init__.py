"""hashrouter CLI — route table inspection and match dry-runs.

Entry point registered as ``hashrouter`` in ``pyproject.toml``::

    [project.scripts]
    hashrouter = "hashrouter.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``hashrouter`` command."""
    parser = argparse.ArgumentParser(
        prog="hashrouter",
        description="hashrouter — fragment routing with named parameters.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log registration and dispatch details",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- hashrouter routes ------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument(
        "router",
        help="Import string (e.g. myapp.nav:router)",
    )

    # -- hashrouter match -------------------------------------------------
    match_parser = subparsers.add_parser(
        "match",
        help="Show which routes a fragment would dispatch to, without running them",
    )
    match_parser.add_argument(
        "router",
        help="Import string (e.g. myapp.nav:router)",
    )
    match_parser.add_argument("fragment", help="Fragment to match (e.g. /user/42?tab=info)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(asctime)s] %(name)s %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    if args.command == "routes":
        from hashrouter.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from hashrouter.cli._match import run_match

        run_match(args)
