"""Compact and extended (compiler-style) rendering of decode errors.

The extended form looks like:

    toml: error: expected '=' after a key
                 on line 3; last key parsed was "server.port"

         1 | [server]
         2 | host = "localhost"
         3 | port 8080
                  ^

Offsets and columns count bytes of the UTF-8 encoded input, not characters.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from .errors import ErrorRecord

logger = logging.getLogger(__name__)

# Width of the "NNNNNN | " prefix in front of every excerpt line
_GUTTER = 9


class Location(NamedTuple):
    """Resolved position of a byte offset: 0-based line index and byte column."""
    index: int
    column: int

    @property
    def line(self) -> int:
        return self.index + 1


def render_compact(record: ErrorRecord) -> str:
    """One-line form, using the line number tracked by the producer."""
    if not record.last_key:
        return f"toml: line {record.line}: {record.message}"
    return (
        f"toml: line {record.line} (last key parsed '{record.last_key}'): "
        f"{record.message}"
    )


def locate(source: str, offset: int) -> Location:
    """Resolve a byte offset in source to a line index and byte column.

    An offset past the end of source resolves to the first line, column 0.
    """
    pos = 0
    for i, raw in enumerate(_split_lines(source)):
        ll = len(raw) + 1  # +1 for the removed newline
        if pos + ll >= offset:
            return Location(index=i, column=max(offset - pos - 1, 0))
        pos += ll
    logger.debug("offset %d is past the end of input (%d bytes)", offset, pos)
    return Location(index=0, column=0)


def render_extended(record: ErrorRecord) -> str:
    """Multi-line form: header, up to two preceding lines, target line, caret.

    Falls back to render_compact when the record has no input.
    """
    if not record.input:
        return render_compact(record)

    lines = [raw.decode("utf-8", errors="replace") for raw in _split_lines(record.input)]
    loc = locate(record.input, record.offset)
    t = loc.index

    out = [f"toml: error: {record.message}\n"]
    header = f"             on line {t + 1}"
    if record.last_key:
        header += f"; last key parsed was {_quote(record.last_key)}"
    out.append(header + "\n\n")

    if t > 1:
        out.append(_excerpt_line(t - 1, lines[t - 2]))
    if t > 0:
        out.append(_excerpt_line(t, lines[t - 1]))
    out.append(_excerpt_line(t + 1, lines[t]))
    out.append(" " * (_GUTTER + loc.column) + "^\n")
    return "".join(out)


def encode_source(source: str) -> bytes:
    """UTF-8 bytes of source.

    Lone surrogates from text read with errors="surrogateescape" turn back
    into the original bytes; any other lone surrogate is passed through.
    """
    try:
        return source.encode("utf-8", errors="surrogateescape")
    except UnicodeEncodeError:
        return source.encode("utf-8", errors="surrogatepass")


def _split_lines(source: str) -> list[bytes]:
    return encode_source(source).split(b"\n")


def _excerpt_line(number: int, content: str) -> str:
    return f"{number:>6} | {content}\n"


_NAMED_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    '"': '\\"',
    "\\": "\\\\",
}


def _quote(key: str) -> str:
    """Double-quote a key.

    Printable characters are kept and quotes and backslashes are escaped.
    Control characters and DEL become \\xNN, other non-printable code points
    \\uNNNN or \\UNNNNNNNN, and escaped surrogates (undecodable input bytes)
    \\xNN of the original byte.
    """
    out = ['"']
    for ch in key:
        cp = ord(ch)
        if ch in _NAMED_ESCAPES:
            out.append(_NAMED_ESCAPES[ch])
        elif 0xDC80 <= cp <= 0xDCFF:
            out.append(f"\\x{cp - 0xDC00:02x}")
        elif ch.isprintable():
            out.append(ch)
        elif cp < 0x20 or cp == 0x7F:
            out.append(f"\\x{cp:02x}")
        elif cp < 0x10000:
            out.append(f"\\u{cp:04x}")
        else:
            out.append(f"\\U{cp:08x}")
    out.append('"')
    return "".join(out)
