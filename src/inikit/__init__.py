"""inikit - INI-style configuration parser with typed lookups."""

from __future__ import annotations

# Tokenizer
from inikit.tokenizer import (
    LineKind,
    Token,
    classify_line,
    parse_section_header,
    split_key_value,
    tokenize,
    trim,
    validate_name,
)

# Document store
from inikit.document import (
    Document,
    ParseResult,
    Section,
    get_raw,
    get_typed,
    parse,
    parse_string,
    try_parse,
)

# Conversion
from inikit.converters import convert, register_converter

# Defaults and loading
from inikit.defaults import DEFAULT_DOCUMENT_TEXT, render_default_document
from inikit.config import Config
from inikit.loader import IniLoader, LoaderSettings, load

# Errors
from inikit.errors import (
    ConfigError,
    ConfigNotFoundError,
    ConversionError,
    EmptyKeyError,
    EmptyNameError,
    EmptyPathComponentError,
    EmptySectionNameError,
    ErrorCodes,
    IniError,
    KeyNotFoundError,
    KeyValueOutsideSectionError,
    LookupPathError,
    MalformedPathError,
    MalformedSectionError,
    MissingEqualsError,
    NameContainsWhitespaceError,
    ParseError,
    SectionNotFoundError,
    SourceUnavailableError,
    UnsupportedTypeError,
)

__version__ = "0.1.0"

__all__ = [
    # Tokenizer
    "LineKind",
    "Token",
    "trim",
    "classify_line",
    "parse_section_header",
    "split_key_value",
    "validate_name",
    "tokenize",
    # Document store
    "Document",
    "Section",
    "ParseResult",
    "parse",
    "parse_string",
    "try_parse",
    "get_raw",
    "get_typed",
    # Conversion
    "convert",
    "register_converter",
    # Defaults and loading
    "DEFAULT_DOCUMENT_TEXT",
    "render_default_document",
    "Config",
    "IniLoader",
    "LoaderSettings",
    "load",
    # Errors
    "ErrorCodes",
    "IniError",
    "ParseError",
    "MalformedSectionError",
    "EmptyNameError",
    "EmptySectionNameError",
    "EmptyKeyError",
    "NameContainsWhitespaceError",
    "MissingEqualsError",
    "KeyValueOutsideSectionError",
    "LookupPathError",
    "MalformedPathError",
    "EmptyPathComponentError",
    "SectionNotFoundError",
    "KeyNotFoundError",
    "ConversionError",
    "UnsupportedTypeError",
    "SourceUnavailableError",
    "ConfigNotFoundError",
    "ConfigError",
]
