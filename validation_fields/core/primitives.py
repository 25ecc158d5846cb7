"""Primitive checks for absent values and digit-only strings."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Final

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

_DIGITS_ONLY = re.compile(r"[0-9]+")
_NON_DIGITS = re.compile(r"[^0-9]+")


class _Undefined:
    """Marker for a value that was never provided (e.g. a missing form key)."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = _Undefined()

FieldValue = str | None | _Undefined


def is_null(value: Any) -> bool:
    """Check if the value is None (not merely falsy)."""
    return value is None


def is_undefined(value: Any) -> bool:
    """Check if the value is the UNDEFINED marker, distinct from None."""
    return value is UNDEFINED


def not_initialized(values: Iterable[Any]) -> bool:
    """Check if any value is an empty string, None or UNDEFINED.

    Stops at the first uninitialized value. An empty iterable returns False.
    """
    return any(value == "" or is_null(value) or is_undefined(value) for value in values)


def is_number(value: Any) -> bool:
    """Check if the string form of value is made only of ASCII digits.

    This is a format check, not a type check: "007" and 7 are both numbers,
    "-1", "1.5" and "" are not.
    """
    return _DIGITS_ONLY.fullmatch(str(value)) is not None


def only_digits(value: str) -> str:
    """Remove every character that is not an ASCII digit."""
    return _NON_DIGITS.sub("", value)


def has_repeated_digits(value: str) -> bool:
    """Check if a string of two or more characters repeats a single character."""
    return len(value) >= 2 and value == value[0] * len(value)


def field_value(form: Mapping[str, Any], name: str) -> Any:
    """Read a field from a submitted form, returning UNDEFINED when it is absent."""
    return form.get(name, UNDEFINED)
