"""Pattern validators for email, free text and Brazilian phone numbers."""

from __future__ import annotations

import math
import re

from validation_fields.core.primitives import has_repeated_digits, is_number, only_digits

# Both letter cases listed; IGNORECASE would also fold non-ASCII letters
EMAIL_PATTERN = re.compile(r"[-0-9a-zA-Z.+_]+@[-0-9a-zA-Z.+_]+\.[a-zA-Z]{2,4}")

# Two word or accented characters (uppercase range skips ×), then at least one more character
TEXT_PATTERN = re.compile(r"[A-Za-z0-9_à-úÀ-ÖØ-Ú]{2,}\s?.+")

# Area code, line type 2-5, then 7 digits
LANDLINE_PATTERN = re.compile(r"[1-9]{2}[2-5][0-9]{3}[0-9]{4}")

# Area code, mobile prefix 6-9, then 8 digits
CELL_PHONE_PATTERN = re.compile(r"[1-9]{2}[6-9][0-9]{8}")

_WHITESPACE = re.compile(r"\s+")
_DECIMAL_LITERAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_PREFIXED_INTEGER = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
_INFINITY = re.compile(r"[+-]?Infinity")


def to_number(value: str) -> float:
    """Coerce a string to a number the way a browser form field would.

    Rules:
    - Surrounding whitespace is ignored; an empty string is 0
    - 0x / 0o / 0b prefixed integers are accepted
    - "Infinity" with an optional sign is infinite
    - Decimal literals with optional sign and exponent are parsed
    - Anything else is NaN
    """
    stripped = value.strip()
    if not stripped:
        return 0.0
    if _PREFIXED_INTEGER.fullmatch(stripped):
        return float(int(stripped, 0))
    if _INFINITY.fullmatch(stripped):
        return -math.inf if stripped.startswith("-") else math.inf
    if _DECIMAL_LITERAL.fullmatch(stripped):
        return float(stripped)
    return math.nan


def _is_integer(number: float) -> bool:
    return math.isfinite(number) and number.is_integer()


def email(value: str) -> bool:
    """Check if the value, ignoring surrounding whitespace, is an email address.

    The domain tail must be 2-4 letters, so "a@b.co" is valid and "a@b.museum" is not.
    """
    return EMAIL_PATTERN.fullmatch(value.strip()) is not None


def text(value: str) -> bool:
    """Check if the value looks like free-form text rather than a number.

    Integer-like input ("42", "1e3", " 7 ") is rejected. The remaining input,
    with all whitespace removed, must start with two word or accented characters
    followed by at least one more character.
    """
    if _is_integer(to_number(value)):
        return False

    compact = _WHITESPACE.sub("", value.strip())
    return TEXT_PATTERN.fullmatch(compact) is not None


def _matches_phone(value: str, pattern: re.Pattern[str]) -> bool:
    digits = only_digits(value)
    if not is_number(digits):
        return False
    if has_repeated_digits(digits):
        return False
    return pattern.fullmatch(digits) is not None


def is_landline(value: str) -> bool:
    """Check if the value is a Brazilian fixed-line number (10 digits, line type 2-5).

    Formatting characters are ignored: "(11) 3333-4444" is valid.
    Numbers made of a single repeated digit are rejected.
    """
    return _matches_phone(value, LANDLINE_PATTERN)


def is_cell_phone(value: str) -> bool:
    """Check if the value is a Brazilian mobile number (11 digits, prefix 6-9)."""
    return _matches_phone(value, CELL_PHONE_PATTERN)
