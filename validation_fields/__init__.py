"""Form field validators: absence checks, email, text, phones, dates and CPF."""

from validation_fields.core import (
    UNDEFINED,
    DateFormat,
    FieldValue,
    cpf_check_digit,
    date,
    email,
    field_value,
    format_cpf,
    format_en_date_to_pt_br,
    format_pt_br_date_to_en,
    is_cell_phone,
    is_date,
    is_landline,
    is_null,
    is_number,
    is_undefined,
    is_valid_cpf,
    not_initialized,
    only_digits,
    text,
)
from validation_fields.models import Settings
from validation_fields.services.validator_set import ValidatorSet, valid_form
from validation_fields.utils.logger import configure_logging

__version__ = "1.0.0"

__all__ = [
    "UNDEFINED",
    "DateFormat",
    "FieldValue",
    "Settings",
    "ValidatorSet",
    "configure_logging",
    "cpf_check_digit",
    "date",
    "email",
    "field_value",
    "format_cpf",
    "format_en_date_to_pt_br",
    "format_pt_br_date_to_en",
    "is_cell_phone",
    "is_date",
    "is_landline",
    "is_null",
    "is_number",
    "is_undefined",
    "is_valid_cpf",
    "not_initialized",
    "only_digits",
    "text",
    "valid_form",
]
