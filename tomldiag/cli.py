"""CLI for tomldiag: render decode error records and resolve byte offsets."""

from __future__ import annotations

import argparse
import logging
import sys

from .errors import TomlDiagError
from .records import load_record
from .render import locate, render_compact, render_extended


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tomldiag",
        description="Render TOML decode errors as compiler-style diagnostics",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command")

    # render
    render_p = sub.add_parser("render", help="Render an error record file")
    render_p.add_argument("file", help="Record file (YAML or JSON)")
    render_p.add_argument("--compact", action="store_true", help="One-line output")

    # locate
    locate_p = sub.add_parser("locate", help="Resolve a byte offset to line and column")
    locate_p.add_argument("file", help="Source file")
    locate_p.add_argument("offset", type=int, help="Byte offset")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if not args.command:
        parser.print_help()
        return 1

    try:
        if args.command == "render":
            return _cmd_render(args.file, compact=args.compact)
        elif args.command == "locate":
            return _cmd_locate(args.file, args.offset)
    except FileNotFoundError:
        print(f"Error: file not found: {args.file}", file=sys.stderr)
        return 1
    except TomlDiagError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def _read_file(path: str) -> str:
    with open(path, encoding="utf-8") as f:
        return f.read()


def _cmd_render(path: str, compact: bool = False) -> int:
    record = load_record(path)
    output = render_compact(record) if compact else render_extended(record)
    print(output.rstrip("\n"))
    return 0


def _cmd_locate(path: str, offset: int) -> int:
    if offset < 0:
        print("Error: offset must be >= 0", file=sys.stderr)
        return 1
    loc = locate(_read_file(path), offset)
    print(f"line {loc.line}, column {loc.column}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
