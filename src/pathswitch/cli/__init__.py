"""pathswitch CLI — inspect route tables and try paths against them.

Entry point registered as ``pathswitch`` in ``pyproject.toml``::

    [project.scripts]
    pathswitch = "pathswitch.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``pathswitch`` command."""
    parser = argparse.ArgumentParser(
        prog="pathswitch",
        description="pathswitch — match paths to typed alternatives and build them back.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log each route tried (DEBUG level)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- pathswitch routes --------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List routes in priority order")
    routes_parser.add_argument("switch", help="Import string (e.g. myapp.routes:pages)")

    # -- pathswitch match ---------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Match a path and rebuild it")
    match_parser.add_argument("switch", help="Import string (e.g. myapp.routes:pages)")
    match_parser.add_argument("path", help="Path to match (e.g. /forum/test/12)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.command == "routes":
        from pathswitch.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from pathswitch.cli._match import run_match

        run_match(args)
