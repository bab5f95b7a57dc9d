"""Shared fixtures for tomldiag tests."""

import pytest

from tomldiag.errors import ErrorRecord


# ---------------------------------------------------------------------------
# Sample TOML sources
# ---------------------------------------------------------------------------

SERVER_TOML = '[server]\nhost = "localhost"\nport 8080\n'

THREE_LINES = "line1\nline2\nline3\n"

SINGLE_LINE = "key = 12345678901"


@pytest.fixture
def server_source():
    return SERVER_TOML


@pytest.fixture
def server_record():
    # offset 34 is just past the "8" of "port 8080"
    return ErrorRecord(
        message="expected '=' after a key",
        line=3,
        offset=34,
        last_key="server.port",
        input=SERVER_TOML,
    )


@pytest.fixture
def bare_record():
    return ErrorRecord(message="bad value", line=5, offset=0)
