"""``pathswitch routes`` — list a Switch's routes in priority order."""

import argparse
import sys

from pathswitch.cli._resolve import resolve_switch


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of ORDER, TEMPLATE, and VARIANT for ``args.switch``."""
    try:
        switch = resolve_switch(args.switch)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    routes = switch.routes
    if not routes:
        print(f"No routes registered in {switch.name}.")
        return

    rows = [(str(i), r.template.source, r.name) for i, r in enumerate(routes, start=1)]

    max_order = max(max(len(r[0]) for r in rows), 5)  # "ORDER" header
    max_template = max(max(len(r[1]) for r in rows), 8)  # "TEMPLATE" header

    fmt = f"{{:<{max_order}}}  {{:<{max_template}}}  {{}}"
    print(fmt.format("ORDER", "TEMPLATE", "VARIANT"))
    sep_len = max_order + max_template + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for order, template, variant in rows:
        print(fmt.format(order, template, variant))
