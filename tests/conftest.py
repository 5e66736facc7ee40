"""Shared fixtures for the inikit test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from inikit.document import Document, parse_string

SAMPLE_TEXT = """\
; leading comment
[server]
host = example.org
port = 8080
ratio = 3,14
debug = On
empty =
url = http://example.org/?a=1&b=2

[paths]
root=/var/lib/app
"""


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_TEXT


@pytest.fixture
def sample_document() -> Document:
    """Document parsed from a small two-section sample."""
    return parse_string(SAMPLE_TEXT)


@pytest.fixture
def ini_file(tmp_path: Path) -> Path:
    """Write the sample text to a temporary .ini file and return its path."""
    path = tmp_path / "sample.ini"
    path.write_text(SAMPLE_TEXT, encoding="utf-8")
    return path
