"""Error hierarchy for the inikit parser."""

from __future__ import annotations

from typing import Any

__all__ = [
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
    "ErrorCodes",
]


class IniError(Exception):
    """Base error for all inikit errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
        line: int | None = None,
    ) -> None:
        if line is not None:
            message = f"Line {line}: {message}"
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.line = line

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


# === Parse errors (always carry a line number) ===


class ParseError(IniError):
    """Base class for syntax errors found while reading lines."""

    def __init__(self, code: str, message: str, line: int, **kwargs: Any) -> None:
        super().__init__(code=code, message=message, line=line, **kwargs)


class MalformedSectionError(ParseError):
    """Raised when a section header is missing its closing bracket."""

    def __init__(self, header: str, line: int, **kwargs: Any) -> None:
        super().__init__(
            code="MALFORMED_SECTION",
            message=f"Malformed section header '{header}' (missing ']')",
            line=line,
            details={"header": header},
            **kwargs,
        )


class EmptyNameError(ParseError):
    """Raised when a section or key name is empty after trimming."""

    code_value = "EMPTY_NAME"

    def __init__(self, context: str, line: int, **kwargs: Any) -> None:
        super().__init__(
            code=self.code_value,
            message=f"Empty {context} name",
            line=line,
            details={"context": context},
            **kwargs,
        )

    @property
    def context(self) -> str:
        """What was being named: ``section`` or ``key``."""
        return self.details["context"]


class EmptySectionNameError(EmptyNameError):
    """Raised for a header like ``[ ]``."""

    code_value = "EMPTY_SECTION_NAME"

    def __init__(self, line: int, **kwargs: Any) -> None:
        super().__init__(context="section", line=line, **kwargs)


class EmptyKeyError(EmptyNameError):
    """Raised for a key-value line like ``= value``."""

    code_value = "EMPTY_KEY"

    def __init__(self, line: int, **kwargs: Any) -> None:
        super().__init__(context="key", line=line, **kwargs)


class NameContainsWhitespaceError(ParseError):
    """Raised when a section or key name contains whitespace."""

    def __init__(self, name: str, context: str, line: int, **kwargs: Any) -> None:
        super().__init__(
            code="NAME_CONTAINS_WHITESPACE",
            message=f"The {context} name '{name}' contains whitespace",
            line=line,
            details={"name": name, "context": context},
            **kwargs,
        )

    @property
    def name(self) -> str:
        return self.details["name"]

    @property
    def context(self) -> str:
        return self.details["context"]


class MissingEqualsError(ParseError):
    """Raised when a key-value line has no '=' delimiter."""

    def __init__(self, text: str, line: int, **kwargs: Any) -> None:
        super().__init__(
            code="MISSING_EQUALS",
            message=f"Invalid line format (missing '='): '{text}'",
            line=line,
            details={"text": text},
            **kwargs,
        )


class KeyValueOutsideSectionError(ParseError):
    """Raised when a key-value line appears before any section header."""

    def __init__(self, line: int, **kwargs: Any) -> None:
        super().__init__(
            code="KEY_VALUE_OUTSIDE_SECTION",
            message="Key-value pair outside of any section",
            line=line,
            **kwargs,
        )


# === Lookup errors ===


class LookupPathError(IniError):
    """Base class for errors raised while resolving a ``section.key`` path."""


class MalformedPathError(LookupPathError):
    """Raised when a lookup path contains no '.'."""

    def __init__(self, path: str, **kwargs: Any) -> None:
        super().__init__(
            code="MALFORMED_PATH",
            message=f"Malformed path '{path}' (expected 'section.key')",
            details={"path": path},
            **kwargs,
        )


class EmptyPathComponentError(LookupPathError):
    """Raised when the section or key part of a path is empty."""

    def __init__(self, path: str, component: str, **kwargs: Any) -> None:
        super().__init__(
            code="EMPTY_PATH_COMPONENT",
            message=f"Empty {component} in path '{path}'",
            details={"path": path, "component": component},
            **kwargs,
        )


class SectionNotFoundError(LookupPathError):
    """Raised when the requested section does not exist."""

    def __init__(self, section: str, available_sections: list[str], **kwargs: Any) -> None:
        super().__init__(
            code="SECTION_NOT_FOUND",
            message=(
                f"Section '{section}' not found. "
                f"Available sections: {', '.join(available_sections)}"
            ),
            details={"section": section, "available_sections": available_sections},
            **kwargs,
        )

    @property
    def section(self) -> str:
        return self.details["section"]

    @property
    def available_sections(self) -> list[str]:
        """Section names present in the document, in declaration order."""
        return self.details["available_sections"]


class KeyNotFoundError(LookupPathError):
    """Raised when the requested key does not exist in an existing section."""

    def __init__(self, section: str, key: str, available_keys: list[str], **kwargs: Any) -> None:
        super().__init__(
            code="KEY_NOT_FOUND",
            message=(
                f"Key '{key}' not found in section '{section}'. "
                f"Available keys in section '{section}': {', '.join(available_keys)}"
            ),
            details={"section": section, "key": key, "available_keys": available_keys},
            **kwargs,
        )

    @property
    def section(self) -> str:
        return self.details["section"]

    @property
    def key(self) -> str:
        return self.details["key"]

    @property
    def available_keys(self) -> list[str]:
        """Keys present in the section, in insertion order."""
        return self.details["available_keys"]


# === Conversion errors ===


class ConversionError(IniError):
    """Raised when a raw value does not match the grammar of the requested type."""

    def __init__(self, value: str, target: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONVERSION_ERROR",
            message=f"Cannot convert '{value}' to {target}",
            details={"value": value, "target": target},
            **kwargs,
        )

    @property
    def value(self) -> str:
        return self.details["value"]

    @property
    def target(self) -> str:
        return self.details["target"]


class UnsupportedTypeError(IniError):
    """Raised when no converter is registered for the requested type."""

    def __init__(self, target: Any, **kwargs: Any) -> None:
        name = getattr(target, "__name__", repr(target))
        super().__init__(
            code="UNSUPPORTED_TYPE",
            message=f"Unsupported type for conversion: {name}",
            details={"target": name},
            **kwargs,
        )


# === Source and configuration errors ===


class SourceUnavailableError(IniError):
    """Raised when the backing file cannot be opened or created."""

    def __init__(self, path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="SOURCE_UNAVAILABLE",
            message=f"Cannot open file '{path}': {reason}",
            details={"path": path, "reason": reason},
            **kwargs,
        )

    @property
    def path(self) -> str:
        return self.details["path"]


class ConfigNotFoundError(IniError):
    """Raised when a settings file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(IniError):
    """Raised when settings are invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class ErrorCodes:
    """All inikit error codes as constants.

    Example:
        if error.code == ErrorCodes.KEY_NOT_FOUND:
            print(error.available_keys)
    """

    MALFORMED_SECTION = "MALFORMED_SECTION"
    EMPTY_NAME = "EMPTY_NAME"
    EMPTY_SECTION_NAME = "EMPTY_SECTION_NAME"
    EMPTY_KEY = "EMPTY_KEY"
    NAME_CONTAINS_WHITESPACE = "NAME_CONTAINS_WHITESPACE"
    MISSING_EQUALS = "MISSING_EQUALS"
    KEY_VALUE_OUTSIDE_SECTION = "KEY_VALUE_OUTSIDE_SECTION"
    MALFORMED_PATH = "MALFORMED_PATH"
    EMPTY_PATH_COMPONENT = "EMPTY_PATH_COMPONENT"
    SECTION_NOT_FOUND = "SECTION_NOT_FOUND"
    KEY_NOT_FOUND = "KEY_NOT_FOUND"
    CONVERSION_ERROR = "CONVERSION_ERROR"
    UNSUPPORTED_TYPE = "UNSUPPORTED_TYPE"
    SOURCE_UNAVAILABLE = "SOURCE_UNAVAILABLE"
    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
