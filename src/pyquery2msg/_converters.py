"""String-to-value converters keyed by field kind."""

from __future__ import annotations

import math
import struct
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from pyquery2msg._errors import (
    ERR_MSG_INVALID_VALUE,
    ERR_MSG_UNSUPPORTED_TYPE,
    UnsupportedFieldTypeError,
    ValueConversionError,
)
from pyquery2msg.schema import Kind

Converter = Callable[[str], Any]
"""Parses one raw query value; raises ValueError or OverflowError on bad input."""

_TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})
_FLOAT_SPECIALS = frozenset({"inf", "infinity", "nan"})


def _check_literal(value: str) -> None:
    # int()/float() accept whitespace and non-ASCII digits; query values must not
    if not value or not value.isascii() or value != value.strip():
        raise ValueError(f"invalid syntax: {value!r}")


def _parse_integer(value: str, *, signed: bool) -> int:
    """Parse an integer literal with base prefix detection.

    ``0x``/``0o``/``0b`` select hex, octal and binary, a bare leading zero
    selects octal, anything else is decimal.
    """
    _check_literal(value)
    sign, digits = "", value
    if value.startswith(("+", "-")):
        if not signed:
            raise ValueError(f"sign not allowed for unsigned value: {value!r}")
        sign, digits = value[0], value[1:]
    if len(digits) > 1 and digits[0] == "0" and digits[1] in "0123456789_":
        digits = "0o" + digits[1:]
    return int(sign + digits, 0)


def _bounded(lo: int, hi: int, *, signed: bool) -> Converter:
    def convert(value: str) -> int:
        result = _parse_integer(value, signed=signed)
        if not lo <= result <= hi:
            raise OverflowError(f"value out of range [{lo}, {hi}]: {value!r}")
        return result

    return convert


def parse_bool(value: str) -> bool:
    if value in _TRUE_LITERALS:
        return True
    if value in _FALSE_LITERALS:
        return False
    raise ValueError(f"invalid boolean literal: {value!r}")


def parse_float64(value: str) -> float:
    _check_literal(value)
    if "_" in value:
        raise ValueError(f"invalid syntax: {value!r}")
    body = value.lstrip("+-").lower()
    if body in _FLOAT_SPECIALS:
        return float(value)
    if body.startswith("0x"):
        result = float.fromhex(value)
    else:
        result = float(value)
    if math.isinf(result):
        raise OverflowError(f"value out of range: {value!r}")
    return result


def parse_float32(value: str) -> float:
    """Parse as float64, then round to IEEE-754 single precision."""
    return struct.unpack("f", struct.pack("f", parse_float64(value)))[0]


def parse_string(value: str) -> str:
    return value


CONVERTERS: Mapping[Kind, Converter] = MappingProxyType({
    Kind.BOOL: parse_bool,
    Kind.INT32: _bounded(-(1 << 31), (1 << 31) - 1, signed=True),
    Kind.INT64: _bounded(-(1 << 63), (1 << 63) - 1, signed=True),
    Kind.UINT32: _bounded(0, (1 << 32) - 1, signed=False),
    Kind.UINT64: _bounded(0, (1 << 64) - 1, signed=False),
    Kind.FLOAT32: parse_float32,
    Kind.FLOAT64: parse_float64,
    Kind.STRING: parse_string,
})


def get_converter(kind: Kind, *, path: str = "") -> Converter:
    """Look up the converter for ``kind``."""
    converter = CONVERTERS.get(kind)
    if converter is None:
        raise UnsupportedFieldTypeError(
            ERR_MSG_UNSUPPORTED_TYPE,
            f"no converter for field kind {kind}",
            path=path,
        )
    return converter


def convert_value(kind: Kind, value: str, *, path: str = "") -> Any:
    """Convert one raw string to the typed value for ``kind``."""
    converter = get_converter(kind, path=path)
    try:
        return converter(value)
    except (ValueError, OverflowError) as e:
        raise ValueConversionError(
            ERR_MSG_INVALID_VALUE,
            f"cannot parse {value!r} as {kind} for {path or 'field'}: {e}",
            e,
            path=path,
        ) from e
