"""``pathswitch match`` — match one path and show how it rebuilds."""

import argparse
import sys

from pathswitch.cli._resolve import resolve_switch


def run_match(args: argparse.Namespace) -> None:
    """Match ``args.path`` against ``args.switch``.

    Prints the winning template, the alternative, and the rebuilt path.
    Exits with status 1 when nothing matches.
    """
    try:
        switch = resolve_switch(args.switch)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    matched = switch.match(args.path)
    if matched is None:
        print(f"No route in {switch.name} matches {args.path!r}", file=sys.stderr)
        raise SystemExit(1)

    route, value = matched
    print(f"template: {route.template.source}")
    print(f"value:    {value!r}")
    print(f"path:     {switch.to_path(value)}")
