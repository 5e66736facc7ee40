"""String-to-type conversion strategies for typed lookups."""

from __future__ import annotations

import logging
import math
import re
from typing import Any, Callable, TypeVar

from inikit.errors import ConversionError, UnsupportedTypeError

__all__ = [
    "TRUE_TOKENS",
    "FALSE_TOKENS",
    "Converter",
    "convert",
    "get_converter",
    "register_converter",
    "supported_types",
    "to_bool",
    "to_float",
    "to_int",
    "to_str",
]

logger = logging.getLogger(__name__)

T = TypeVar("T")
Converter = Callable[[str], Any]

TRUE_TOKENS = frozenset({"true", "1", "yes", "on"})
FALSE_TOKENS = frozenset({"false", "0", "no", "off"})

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def _ascii_lower(value: str) -> str:
    return "".join(chr(ord(ch) + 32) if "A" <= ch <= "Z" else ch for ch in value)


def to_int(value: str) -> int:
    """Parse a base-10 signed integer made of ASCII digits only.

    Python integers have no range limit, so large values never overflow.
    """
    if not _INT_PATTERN.fullmatch(value):
        raise ConversionError(value=value, target="int")
    return int(value)


def to_float(value: str) -> float:
    """Parse a double precision number, accepting ',' as the decimal separator.

    Only ASCII digits, an optional sign, fraction and exponent are accepted.
    Values outside the double range raise instead of becoming ``inf``.
    """
    normalized = value.replace(",", ".")
    if not _FLOAT_PATTERN.fullmatch(normalized):
        raise ConversionError(value=value, target="float")
    result = float(normalized)
    if math.isinf(result):
        raise ConversionError(value=value, target="float")
    return result


def to_str(value: str) -> str:
    return value


def to_bool(value: str) -> bool:
    """Map the accepted true/false tokens, case-insensitively, to a bool."""
    lowered = _ascii_lower(value)
    if lowered in TRUE_TOKENS:
        return True
    if lowered in FALSE_TOKENS:
        return False
    raise ConversionError(value=value, target="bool")


_CONVERTERS: dict[type, Converter] = {
    int: to_int,
    float: to_float,
    str: to_str,
    bool: to_bool,
}


def register_converter(target: type, func: Converter) -> None:
    """Register (or replace) the conversion strategy for ``target``.

    ``func`` receives the raw string and should raise
    :class:`~inikit.errors.ConversionError` when the value is not valid.
    """
    if target in _CONVERTERS:
        logger.debug(f"Replacing converter for type '{target.__name__}'")
    _CONVERTERS[target] = func


def supported_types() -> list[type]:
    """Types that :func:`convert` currently accepts."""
    return list(_CONVERTERS)


def get_converter(target: type) -> Converter:
    """Return the strategy registered for exactly ``target``.

    Lookup is by exact type, so ``bool`` is never handled by the ``int``
    strategy.
    """
    func = _CONVERTERS.get(target)
    if func is None:
        raise UnsupportedTypeError(target=target)
    return func


def convert(value: str, target: type[T]) -> T:
    """Convert a raw value to ``target``."""
    return get_converter(target)(value)
