"""Helpers a decoder uses to build error records at the failure site.

Decoders track positions as character indices into a ``str``; records carry
byte offsets as seen by a lexer that has just consumed the offending
character, so the caret of the extended rendering lands on that character.
"""

from __future__ import annotations

from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken

from .errors import DecodeError, ErrorRecord
from .render import encode_source


def byte_offset(source: str, char_index: int) -> int:
    """Byte offset of a character index in the UTF-8 encoding of source."""
    char_index = max(0, min(char_index, len(source)))
    return len(encode_source(source[:char_index]))


def line_of(source: str, char_index: int) -> int:
    """1-based line number of a character index."""
    char_index = max(0, min(char_index, len(source)))
    return source.count("\n", 0, char_index) + 1


def make_record(
    message: str,
    source: str,
    char_index: int,
    last_key: str = "",
) -> ErrorRecord:
    """Build a record for a failure at char_index (len(source) for end of input)."""
    return ErrorRecord(
        message=message,
        line=line_of(source, char_index),
        offset=byte_offset(source, char_index) + 1,
        last_key=last_key,
        input=source,
    )


def from_lark_error(exc: UnexpectedInput, source: str, last_key: str = "") -> DecodeError:
    """Translate a Lark parse failure into a DecodeError.

    Use as ``raise from_lark_error(e, source) from e``.
    """
    pos = getattr(exc, "pos_in_stream", None)
    if pos is None or pos < 0:
        pos = len(source)
    return DecodeError(make_record(_lark_message(exc), source, pos, last_key=last_key))


def _lark_message(exc: UnexpectedInput) -> str:
    if isinstance(exc, UnexpectedEOF):
        return "unexpected end of input"
    if isinstance(exc, UnexpectedCharacters):
        return f"unexpected character {exc.char!r}"
    if isinstance(exc, UnexpectedToken):
        if exc.token.type == "$END":
            return "unexpected end of input"
        return f"unexpected {exc.token.type} token {str(exc.token)!r}"
    return str(exc).splitlines()[0] if str(exc) else type(exc).__name__
