"""Document store: builds the section/key mapping and answers path lookups."""

from __future__ import annotations

import io
import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import TypeVar

from inikit.converters import get_converter
from inikit.errors import (
    EmptyPathComponentError,
    IniError,
    KeyNotFoundError,
    KeyValueOutsideSectionError,
    MalformedPathError,
    SectionNotFoundError,
)
from inikit.tokenizer import LineKind, tokenize

__all__ = [
    "PATH_SEPARATOR",
    "Section",
    "Document",
    "ParseResult",
    "parse",
    "parse_string",
    "try_parse",
    "split_path",
    "get_raw",
    "get_typed",
]

logger = logging.getLogger(__name__)

T = TypeVar("T")

PATH_SEPARATOR = "."


class Section(Mapping[str, str]):
    """Read-only mapping of key names to raw (trimmed) values."""

    __slots__ = ("_name", "_values")

    def __init__(self, name: str, values: Mapping[str, str] | None = None) -> None:
        self._name = name
        self._values: dict[str, str] = dict(values or {})

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Section({self._name!r}, {self._values!r})"


class Document(Mapping[str, Section]):
    """Read-only mapping of section names to :class:`Section` objects.

    Sections keep the order in which they were first declared. Two
    documents compare equal when they hold the same sections, keys and
    values.
    """

    __slots__ = ("_sections",)

    def __init__(self, sections: Mapping[str, Mapping[str, str]] | None = None) -> None:
        self._sections: dict[str, Section] = {
            name: Section(name, values) for name, values in (sections or {}).items()
        }

    def __getitem__(self, name: str) -> Section:
        return self._sections[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    def __repr__(self) -> str:
        inner = ", ".join(f"{name!r}: {dict(section)!r}" for name, section in self._sections.items())
        return f"Document({{{inner}}})"

    def paths(self) -> Iterator[str]:
        """Yield every ``section.key`` path in declaration order."""
        for name, section in self._sections.items():
            for key in section:
                yield f"{name}{PATH_SEPARATOR}{key}"

    def get_raw(self, path: str) -> str:
        return get_raw(self, path)

    def get_typed(self, path: str, target: type[T]) -> T:
        return get_typed(self, path, target)


def parse(line_source: Iterable[str]) -> Document:
    """Parse a sequence of lines into a :class:`Document`.

    A trailing ``\\n`` or ``\\r\\n`` is removed from each line. The first
    syntax error aborts the parse; nothing is returned in that case.
    """
    sections: dict[str, dict[str, str]] = {}
    current_section: str | None = None
    line_num = 0

    for raw_line in line_source:
        line_num += 1
        token = tokenize(raw_line.rstrip("\r\n"), line_num)

        if token.kind is LineKind.SECTION_HEADER:
            current_section = token.name
            if current_section in sections:
                logger.debug(f"Line {line_num}: section '{current_section}' declared again")
            else:
                sections[current_section] = {}
            continue

        if token.kind is LineKind.KEY_VALUE:
            if current_section is None:
                raise KeyValueOutsideSectionError(line=line_num)
            section = sections[current_section]
            if token.key in section:
                logger.debug(f"Line {line_num}: overwriting '{current_section}.{token.key}'")
            section[token.key] = token.value

    logger.debug(f"Parsed {line_num} lines into {len(sections)} sections")
    return Document(sections)


def parse_string(text: str) -> Document:
    """Parse a whole document held in a string, splitting lines on ``\\n`` only."""
    return parse(io.StringIO(text))


@dataclass
class ParseResult:
    """Outcome of :func:`try_parse`: either a document or the error that stopped parsing."""

    ok: bool
    document: Document | None = None
    error: IniError | None = None

    def unwrap(self) -> Document:
        """Return the document, or raise the stored error."""
        if self.error is not None:
            raise self.error
        if self.document is None:
            raise ValueError("ParseResult holds neither a document nor an error")
        return self.document


def try_parse(line_source: Iterable[str]) -> ParseResult:
    """Like :func:`parse`, but report failure as a value instead of raising."""
    try:
        document = parse(line_source)
    except IniError as e:
        return ParseResult(ok=False, error=e)
    return ParseResult(ok=True, document=document)


def split_path(path: str) -> tuple[str, str]:
    """Split ``section.key`` at the first '.'; the key keeps any further dots."""
    section, sep, key = path.partition(PATH_SEPARATOR)
    if not sep:
        raise MalformedPathError(path=path)
    if not section:
        raise EmptyPathComponentError(path=path, component="section")
    if not key:
        raise EmptyPathComponentError(path=path, component="key")
    return section, key


def get_raw(document: Mapping[str, Mapping[str, str]], path: str) -> str:
    """Return the raw string stored at ``path``.

    Misses raise :class:`SectionNotFoundError` or :class:`KeyNotFoundError`
    listing what is available at that level.
    """
    section_name, key = split_path(path)

    section = document.get(section_name)
    if section is None:
        raise SectionNotFoundError(section=section_name, available_sections=list(document))

    value = section.get(key)
    if value is None:
        raise KeyNotFoundError(section=section_name, key=key, available_keys=list(section))
    return value


def get_typed(document: Mapping[str, Mapping[str, str]], path: str, target: type[T]) -> T:
    """Return the value at ``path`` converted to ``target`` (int, float, str or bool).

    An unsupported ``target`` is rejected before the path is looked up.
    """
    converter = get_converter(target)
    return converter(get_raw(document, path))
