"""tomldiag — diagnostics for TOML decode errors."""

from .errors import DecodeError, ErrorRecord, RecordError, TomlDiagError
from .producers import byte_offset, from_lark_error, line_of, make_record
from .records import load_record, parse_record
from .render import Location, locate, render_compact, render_extended

__all__ = [
    "ErrorRecord",
    "DecodeError",
    "RecordError",
    "TomlDiagError",
    "render_compact",
    "render_extended",
    "locate",
    "Location",
    "byte_offset",
    "line_of",
    "make_record",
    "from_lark_error",
    "load_record",
    "parse_record",
]
