"""Load error records from YAML (or JSON) record files.

A record file is a mapping::

    message: expected '=' after a key
    line: 3
    offset: 34
    last_key: server.port
    input_file: config.toml   # or `input: "..."` inline

``input_file`` is resolved relative to the record file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .errors import ErrorRecord, RecordError

logger = logging.getLogger(__name__)

_REQUIRED_KEYS = ("message", "line", "offset")


def load_record(path: str | Path) -> ErrorRecord:
    """Read and validate a record file. Raises RecordError on bad content."""
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    return parse_record(text, base_dir=path.parent)


def parse_record(text: str, base_dir: str | Path = ".") -> ErrorRecord:
    """Parse record file text. Relative input_file paths resolve against base_dir."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise RecordError(f"Invalid record file: {exc}") from exc

    if not isinstance(data, dict):
        raise RecordError("Record file root must be a mapping")

    missing = [k for k in _REQUIRED_KEYS if k not in data]
    if missing:
        raise RecordError(f"Record file is missing key(s): {', '.join(missing)}")

    if "input" in data and "input_file" in data:
        raise RecordError("Use either 'input' or 'input_file', not both")

    source = data.get("input") or ""
    if data.get("input_file"):
        input_path = Path(base_dir) / str(data["input_file"])
        logger.debug("reading record input from %s", input_path)
        try:
            source = input_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise RecordError(f"Cannot read input file {input_path}: {exc}") from exc

    try:
        return ErrorRecord(
            message=str(data["message"]),
            line=_as_int(data, "line"),
            offset=_as_int(data, "offset"),
            last_key=str(data.get("last_key") or ""),
            input=str(source),
        )
    except ValueError as exc:
        raise RecordError(str(exc)) from exc


def _as_int(data: dict[str, Any], key: str) -> int:
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise RecordError(f"'{key}' must be an integer, got {value!r}")
    return value
