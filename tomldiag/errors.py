"""Error types for tomldiag: the decode error record and its exception."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ErrorRecord:
    """One decode failure: message, position and optional source context."""
    message: str
    line: int
    offset: int  # byte offset into input
    last_key: str = ""  # last parsed key, may be blank
    input: str = ""

    def __post_init__(self):
        if not self.message:
            raise ValueError("ErrorRecord message must not be empty")
        if self.offset < 0:
            raise ValueError(f"ErrorRecord offset must be >= 0, got {self.offset}")


class TomlDiagError(Exception):
    """Base error for tomldiag."""


class RecordError(TomlDiagError):
    """Raised when an error record file cannot be loaded."""


class DecodeError(TomlDiagError):
    """Raised by a decoder when TOML input cannot be decoded.

    For example invalid syntax, duplicate keys, etc. ``str(err)`` gives the
    one-line form; ``err.ext_error()`` gives the source excerpt with a caret.
    """

    def __init__(
        self,
        message: str | ErrorRecord,
        line: int = 0,
        offset: int = 0,
        last_key: str = "",
        input: str = "",
    ):
        if isinstance(message, ErrorRecord):
            record = message
        else:
            record = ErrorRecord(
                message=message,
                line=line,
                offset=offset,
                last_key=last_key,
                input=input,
            )
        self._record = record
        super().__init__(record.message)

    @property
    def record(self) -> ErrorRecord:
        return self._record

    @property
    def message(self) -> str:
        return self._record.message

    @property
    def line(self) -> int:
        return self._record.line

    @property
    def offset(self) -> int:
        return self._record.offset

    @property
    def last_key(self) -> str:
        return self._record.last_key

    @property
    def input(self) -> str:
        return self._record.input

    def __str__(self) -> str:
        from .render import render_compact
        return render_compact(self._record)

    def ext_error(self) -> str:
        """Multi-line rendering with surrounding source lines and a caret."""
        from .render import render_extended
        return render_extended(self._record)
