"""Line tokenizer and name validation.

Each input line is trimmed, classified, and (for headers and key-value
lines) split and validated on its own. The first defect raises a
:class:`~inikit.errors.ParseError` carrying the 1-based line number.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from inikit.errors import (
    EmptyKeyError,
    EmptyNameError,
    EmptySectionNameError,
    MalformedSectionError,
    MissingEqualsError,
    NameContainsWhitespaceError,
)

__all__ = [
    "COMMENT_MARKER",
    "LineKind",
    "Token",
    "trim",
    "classify_line",
    "parse_section_header",
    "split_key_value",
    "validate_name",
    "tokenize",
]

COMMENT_MARKER = ";"
SECTION_OPEN = "["
SECTION_CLOSE = "]"
KEY_VALUE_DELIMITER = "="

_TRIM_CHARS = " \t"
# Matches C isspace() in the "C" locale.
_WHITESPACE = frozenset(" \t\n\v\f\r")


class LineKind(str, Enum):
    """Classification of a trimmed input line."""

    BLANK = "blank"
    COMMENT = "comment"
    SECTION_HEADER = "section_header"
    KEY_VALUE = "key_value"


@dataclass(frozen=True)
class Token:
    """One classified line.

    ``name`` is set for section headers, ``key`` and ``value`` for
    key-value lines.
    """

    kind: LineKind
    line_num: int
    name: str | None = None
    key: str | None = None
    value: str | None = None


def trim(s: str) -> str:
    """Strip ASCII spaces and tabs from both ends of ``s``."""
    return s.strip(_TRIM_CHARS)


def classify_line(trimmed_line: str) -> LineKind:
    """Classify an already trimmed line by its first character."""
    if not trimmed_line:
        return LineKind.BLANK
    if trimmed_line.startswith(COMMENT_MARKER):
        return LineKind.COMMENT
    if trimmed_line.startswith(SECTION_OPEN):
        return LineKind.SECTION_HEADER
    return LineKind.KEY_VALUE


def validate_name(name: str, context: str, line_num: int) -> None:
    """Check that a section or key name is non-empty and whitespace-free."""
    if not name:
        if context == "section":
            raise EmptySectionNameError(line=line_num)
        if context == "key":
            raise EmptyKeyError(line=line_num)
        raise EmptyNameError(context=context, line=line_num)
    if any(ch in _WHITESPACE for ch in name):
        raise NameContainsWhitespaceError(name=name, context=context, line=line_num)


def parse_section_header(line: str, line_num: int) -> str:
    """Extract and validate the section name from a ``[name]`` line."""
    if not line.endswith(SECTION_CLOSE):
        raise MalformedSectionError(header=line, line=line_num)
    name = trim(line[1:-1])
    validate_name(name, "section", line_num)
    return name


def split_key_value(line: str, line_num: int) -> tuple[str, str]:
    """Split ``key = value`` at the first '='.

    Any further '=' characters stay in the value. The value may be empty.
    """
    key, sep, value = line.partition(KEY_VALUE_DELIMITER)
    if not sep:
        raise MissingEqualsError(text=line, line=line_num)
    key = trim(key)
    if not key:
        raise EmptyKeyError(line=line_num)
    return key, trim(value)


def tokenize(raw_line: str, line_num: int) -> Token:
    """Trim, classify and validate a single raw line."""
    line = trim(raw_line)
    kind = classify_line(line)

    if kind is LineKind.SECTION_HEADER:
        return Token(kind=kind, line_num=line_num, name=parse_section_header(line, line_num))

    if kind is LineKind.KEY_VALUE:
        key, value = split_key_value(line, line_num)
        validate_name(key, "key", line_num)
        return Token(kind=kind, line_num=line_num, key=key, value=value)

    return Token(kind=kind, line_num=line_num)
