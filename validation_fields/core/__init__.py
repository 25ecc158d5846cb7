"""Core validators -- pure functions over form field values."""

from __future__ import annotations

from validation_fields.core.cpf import cpf_check_digit, format_cpf, is_valid_cpf
from validation_fields.core.dates import (
    DateFormat,
    date,
    format_en_date_to_pt_br,
    format_pt_br_date_to_en,
    is_date,
    parse_date,
)
from validation_fields.core.patterns import (
    email,
    is_cell_phone,
    is_landline,
    text,
    to_number,
)
from validation_fields.core.primitives import (
    UNDEFINED,
    FieldValue,
    field_value,
    has_repeated_digits,
    is_null,
    is_number,
    is_undefined,
    not_initialized,
    only_digits,
)

__all__ = [
    # cpf
    "cpf_check_digit",
    "format_cpf",
    "is_valid_cpf",
    # dates
    "DateFormat",
    "date",
    "format_en_date_to_pt_br",
    "format_pt_br_date_to_en",
    "is_date",
    "parse_date",
    # patterns
    "email",
    "is_cell_phone",
    "is_landline",
    "text",
    "to_number",
    # primitives
    "UNDEFINED",
    "FieldValue",
    "field_value",
    "has_repeated_digits",
    "is_null",
    "is_number",
    "is_undefined",
    "not_initialized",
    "only_digits",
]
