"""Tests for the inikit error hierarchy."""

from __future__ import annotations

import pytest

from inikit.errors import (
    ConfigError,
    ConversionError,
    EmptyKeyError,
    EmptyNameError,
    EmptySectionNameError,
    ErrorCodes,
    IniError,
    KeyNotFoundError,
    KeyValueOutsideSectionError,
    LookupPathError,
    MalformedPathError,
    ParseError,
    SectionNotFoundError,
    SourceUnavailableError,
)


class TestIniError:
    def test_str_includes_code(self) -> None:
        err = IniError(code="X", message="boom")
        assert str(err) == "[X] boom"
        assert err.details == {}
        assert err.line is None

    def test_line_prefix(self) -> None:
        err = IniError(code="X", message="boom", line=12)
        assert err.message == "Line 12: boom"
        assert err.line == 12

    def test_cause_kept(self) -> None:
        cause = OSError("disk")
        err = SourceUnavailableError(path="a.ini", reason="disk", cause=cause)
        assert err.cause is cause
        assert err.path == "a.ini"


class TestParseErrors:
    def test_key_value_outside_section(self) -> None:
        err = KeyValueOutsideSectionError(line=1)
        assert err.code == ErrorCodes.KEY_VALUE_OUTSIDE_SECTION
        assert err.message.startswith("Line 1: ")
        assert isinstance(err, ParseError)

    def test_empty_name_family(self) -> None:
        assert EmptySectionNameError(line=1).code == ErrorCodes.EMPTY_SECTION_NAME
        assert EmptyKeyError(line=1).code == ErrorCodes.EMPTY_KEY
        assert issubclass(EmptySectionNameError, EmptyNameError)
        assert issubclass(EmptyKeyError, EmptyNameError)


class TestLookupErrors:
    def test_section_not_found(self) -> None:
        err = SectionNotFoundError(section="x", available_sections=["a", "b"])
        assert err.available_sections == ["a", "b"]
        assert "Available sections: a, b" in err.message
        assert isinstance(err, LookupPathError)

    def test_key_not_found(self) -> None:
        err = KeyNotFoundError(section="s", key="k", available_keys=["a"])
        assert err.details == {"section": "s", "key": "k", "available_keys": ["a"]}

    def test_malformed_path_has_no_line(self) -> None:
        assert MalformedPathError(path="x").line is None


class TestMisc:
    def test_conversion_error(self) -> None:
        err = ConversionError(value="abc", target="int")
        assert err.message == "Cannot convert 'abc' to int"

    def test_config_error_code(self) -> None:
        assert ConfigError(message="bad").code == ErrorCodes.CONFIG_INVALID

    def test_error_codes_immutable(self) -> None:
        with pytest.raises(AttributeError):
            ErrorCodes().KEY_NOT_FOUND = "other"

    def test_all_are_ini_errors(self) -> None:
        for cls in (ParseError, LookupPathError, ConversionError, SourceUnavailableError, ConfigError):
            assert issubclass(cls, IniError)
