"""Explicit parsing helpers for raw request text.

Every function here is total: it gives a defined answer for any string,
including empty and malformed input, instead of raising.
"""

import math
import re
from typing import Any

_WHITESPACE = " \t\n\r\v\f"

_DIGITS_RE = re.compile(r"[0-9]+")
_NUMERIC_RE = re.compile(r"[ \t\n\r\v\f]*[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?[ \t\n\r\v\f]*")
_LEADING_NUMBER_RE = re.compile(r"[ \t\n\r\v\f]*([+-]?([0-9]+)(\.[0-9]*)?([eE][+-]?[0-9]+)?|[+-]?\.[0-9]+([eE][+-]?[0-9]+)?)")


def is_digits(text: str) -> bool:
    """True when text is non-empty and made only of the characters 0-9 (no sign, no decimal point)."""
    if not isinstance(text, str):
        return False
    return _DIGITS_RE.fullmatch(text) is not None


def is_numeric(text: str) -> bool:
    """True when text is an integer or decimal number, optionally signed and with an exponent.

    Surrounding whitespace is tolerated. Hex, underscores, "inf" and "nan" are rejected.
    """
    if not isinstance(text, str):
        return False
    return _NUMERIC_RE.fullmatch(text) is not None


def _leading_number(text: str) -> str | None:
    match = _LEADING_NUMBER_RE.match(text)
    if not match:
        return None
    return match.group(1)


def to_int(value: Any) -> int:
    """
    Converts a value to int the way a loose integer cast does.

    The leading numeric part of a string is used and truncated toward zero
    ("12abc" -> 12, "3.9" -> 3, "1e3" -> 1000); text without a leading
    number gives 0.
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0

    number = _leading_number(str(value))
    if number is None:
        return 0
    if _DIGITS_RE.fullmatch(number.lstrip("+-")):
        return int(number)

    parsed = float(number)
    if not math.isfinite(parsed):
        return 0
    return int(parsed)


def strip_text(value: Any) -> str:
    """Returns value as a string with surrounding whitespace removed; None becomes ""."""
    if value is None:
        return ""
    return str(value).strip(_WHITESPACE + "\0")
