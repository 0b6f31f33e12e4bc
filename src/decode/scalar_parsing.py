"""Strict scalar grammars for textual field values.

This module parses integers, booleans and floats with fixed grammars
instead of Python's permissive constructors, which accept whitespace,
underscores and non-ASCII digits.
"""

from __future__ import annotations

import math
import re
import struct

from core.constants import FALSE_LITERALS, TRUE_LITERALS
from core.errors import ParseError

INVALID_SYNTAX = "invalid syntax"
OUT_OF_RANGE = "value out of range"

_SIGNED_PATTERN = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_PATTERN = re.compile(r"[0-9]+")
_DECIMAL_FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX_FLOAT_PATTERN = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)
_SPECIAL_FLOAT_PATTERN = re.compile(r"[+-]?(?:inf|infinity)|nan", re.IGNORECASE)


def parse_signed(token: str, bits: int) -> int:
    """Parse a base-10 signed integer for a destination width.

    Args:
        token: Raw text.
        bits: Destination width in bits.

    Returns:
        Parsed integer within ``[-2**(bits-1), 2**(bits-1) - 1]``.

    Raises:
        ParseError: On malformed text or overflow.
    """
    target = f"int{bits}"
    if not _SIGNED_PATTERN.fullmatch(token):
        raise ParseError(token, target, INVALID_SYNTAX)
    limit = 1 << (bits - 1)
    digits = _significant_digits(token)
    if len(digits) > len(str(limit)):
        raise ParseError(token, target, OUT_OF_RANGE)
    value = -int(digits) if token.startswith("-") else int(digits)
    if value < -limit or value >= limit:
        raise ParseError(token, target, OUT_OF_RANGE)
    return value


def parse_unsigned(token: str, bits: int) -> int:
    """Parse a base-10 unsigned integer for a destination width.

    Args:
        token: Raw text without sign.
        bits: Destination width in bits.

    Returns:
        Parsed integer within ``[0, 2**bits - 1]``.

    Raises:
        ParseError: On malformed text or overflow.
    """
    target = f"uint{bits}"
    if not _UNSIGNED_PATTERN.fullmatch(token):
        raise ParseError(token, target, INVALID_SYNTAX)
    digits = _significant_digits(token)
    if len(digits) > len(str(1 << bits)):
        raise ParseError(token, target, OUT_OF_RANGE)
    value = int(digits)
    if value >= 1 << bits:
        raise ParseError(token, target, OUT_OF_RANGE)
    return value


def parse_bool(token: str) -> bool:
    """Parse one of the canonical boolean literals."""
    if token in TRUE_LITERALS:
        return True
    if token in FALSE_LITERALS:
        return False
    raise ParseError(token, "bool", INVALID_SYNTAX)


def parse_float(token: str, bits: int) -> float:
    """Parse a decimal, hexadecimal or special float literal.

    Args:
        token: Raw text.
        bits: Precision in bits, 32 or 64.

    Returns:
        Parsed float, rounded to single precision when ``bits`` is 32.

    Raises:
        ParseError: On malformed text or when a finite literal overflows.
    """
    target = f"float{bits}"
    if _SPECIAL_FLOAT_PATTERN.fullmatch(token):
        return float(token)
    try:
        if _DECIMAL_FLOAT_PATTERN.fullmatch(token):
            value = float(token)
        elif _HEX_FLOAT_PATTERN.fullmatch(token):
            value = float.fromhex(token)
        else:
            raise ParseError(token, target, INVALID_SYNTAX)
    except OverflowError as error:
        raise ParseError(token, target, OUT_OF_RANGE) from error
    if math.isinf(value):
        raise ParseError(token, target, OUT_OF_RANGE)
    if bits == 32:
        return round_float32(value, token)
    return value


def round_float32(value: float, token: str = "") -> float:
    """Round a float to the nearest single-precision value.

    Raises:
        ParseError: When the value exceeds the float32 range.
    """
    try:
        return float(struct.unpack("f", struct.pack("f", value))[0])
    except OverflowError as error:
        raise ParseError(token or repr(value), "float32", OUT_OF_RANGE) from error


def _significant_digits(token: str) -> str:
    """Strip the sign and leading zeros, keeping at least one digit."""
    return token.lstrip("+-").lstrip("0") or "0"
