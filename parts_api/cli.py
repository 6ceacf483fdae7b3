#!/usr/bin/env python3
"""
Parts API CLI — serve the dataset, or inspect a source file offline.

USAGE:
  python -m parts_api.cli serve                              # Start API server
  python -m parts_api.cli serve --port 8000 --watch          # Auto-reload on file change
  python -m parts_api.cli serve --source /data/LE.txt

  python -m parts_api.cli inspect                            # Load once, print count + first page
  python -m parts_api.cli inspect --query widg --sort-by price --limit 5
  python -m parts_api.cli inspect --serial A1
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from parts_api.config import PORT, SOURCE_FILE
from parts_api.data.loader import load_parts
from parts_api.data.query import list_parts
from parts_api.data.schemas import PartFilter, SortOrder
from parts_api.errors import LoadError


def cmd_serve(args):
    """Start the API server."""
    import uvicorn

    from parts_api.main import create_app

    print(f"\nStarting Parts API on port {args.port}...")
    app = create_app(source=Path(args.source), watch=args.watch or None)
    uvicorn.run(app, host=args.host, port=args.port, timeout_keep_alive=65)


def cmd_inspect(args) -> int:
    """Load the source once and print a page of results."""
    source = Path(args.source)
    try:
        snapshot = load_parts(source)
    except LoadError as e:
        print(f"Load failed: {e}", file=sys.stderr)
        return 1

    print(f"{source}: {snapshot.count:,} parts, {len(snapshot.index):,} distinct serials")
    duplicates = snapshot.count - len(snapshot.index) - sum(1 for p in snapshot.parts if not p.serial)
    if duplicates > 0:
        print(f"  Warning: {duplicates:,} rows share a serial with a later row (listing only)")

    flt = PartFilter(
        query=args.query,
        serial=args.serial,
        sort_by=args.sort_by,
        sort_order=SortOrder(args.sort_order),
        limit=args.limit,
        page=args.page,
    )
    page = list_parts(snapshot, flt)
    print(json.dumps(page.to_dict(), indent=2, ensure_ascii=False))
    return 0


def main():
    parser = argparse.ArgumentParser(
        description="Parts API — in-memory parts dataset",
        epilog=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command")

    # serve subcommand
    serve_parser = subparsers.add_parser("serve", help="Start API server")
    serve_parser.add_argument("--port", type=int, default=PORT, help=f"Port (default {PORT})")
    serve_parser.add_argument("--host", default="0.0.0.0", help="Bind address")
    serve_parser.add_argument("--source", default=str(SOURCE_FILE), help="Source file")
    serve_parser.add_argument("--watch", action="store_true", help="Reload when the source file changes")
    serve_parser.set_defaults(func=cmd_serve)

    # inspect subcommand
    inspect_parser = subparsers.add_parser("inspect", help="Load a source file and print results")
    inspect_parser.add_argument("--source", default=str(SOURCE_FILE), help="Source file")
    inspect_parser.add_argument("--query", help="Substring search in name or serial")
    inspect_parser.add_argument("--serial", help="Exact serial")
    inspect_parser.add_argument("--sort-by", help="Field to sort by")
    inspect_parser.add_argument("--sort-order", choices=["asc", "desc"], default="asc")
    inspect_parser.add_argument("--limit", type=int, default=10, help="Items per page (default 10)")
    inspect_parser.add_argument("--page", type=int, default=1, help="Page number")
    inspect_parser.set_defaults(func=cmd_inspect)

    args = parser.parse_args()
    if not args.command:
        parser.print_help()
        return

    status = args.func(args)
    if status:
        sys.exit(status)


if __name__ == "__main__":
    main()
