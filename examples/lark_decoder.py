"""Example: a tiny Lark-based key/value decoder reporting tomldiag errors.

Usage:
    python examples/lark_decoder.py config.toml
"""

from __future__ import annotations

import sys

from lark import Lark
from lark.exceptions import UnexpectedInput

from tomldiag import DecodeError, from_lark_error

GRAMMAR = r'''
start: (pair | _NL)*
pair: KEY "=" VALUE _NL
KEY: /[A-Za-z0-9_.-]+/
VALUE: /"[^"\n]*"/ | /[0-9]+/ | "true" | "false"
_NL: /\r?\n/
COMMENT: /#[^\n]*/
%ignore COMMENT
%ignore " "
'''

_parser = Lark(GRAMMAR, parser="lalr", propagate_positions=True)


def decode(source: str) -> dict[str, str]:
    """Decode key = value lines. Raises DecodeError on syntax errors."""
    try:
        tree = _parser.parse(source)
    except UnexpectedInput as e:
        pos = e.pos_in_stream if e.pos_in_stream is not None and e.pos_in_stream >= 0 else len(source)
        raise from_lark_error(e, source, last_key=_last_key(source[:pos])) from e
    return {str(p.children[0]): str(p.children[1]) for p in tree.children}


def _last_key(parsed: str) -> str:
    keys = [line.split("=", 1)[0].strip() for line in parsed.splitlines() if "=" in line]
    return keys[-1] if keys else ""


def main() -> int:
    with open(sys.argv[1], encoding="utf-8") as f:
        source = f.read()
    try:
        print(decode(source))
    except DecodeError as e:
        print(e.ext_error(), file=sys.stderr, end="")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
