"""Bundle of all field validators, built from settings."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Literal

from validation_fields.core import cpf, dates, patterns, primitives
from validation_fields.utils.logger import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from validation_fields.models.config import Settings

logger = get_logger(__name__)


@dataclass(frozen=True)
class ValidatorSet:
    """Every field validator and date transform under one object."""

    is_null: Callable[[Any], bool]
    is_undefined: Callable[[Any], bool]
    not_initialized: Callable[[Iterable[Any]], bool]
    email: Callable[[str], bool]
    is_valid_cpf: Callable[[str], bool]
    text: Callable[[str], bool]
    is_number: Callable[[Any], bool]
    date: Callable[..., bool]
    is_landline: Callable[[str], bool]
    is_cell_phone: Callable[[str], bool]
    is_date: Callable[[str], bool]
    format_pt_br_date_to_en: Callable[[str], str | Literal[False]]
    format_en_date_to_pt_br: Callable[[str], str | Literal[False]]


def valid_form(settings: Settings | None = None) -> ValidatorSet:
    """Build a ValidatorSet.

    Without settings the validators keep their defaults: "db" date format and
    repeated-digit CPFs accepted.
    """
    date_format = dates.DateFormat.DB.value
    reject_repeated_digits = False
    if settings is not None:
        date_format = settings.default_date_format
        reject_repeated_digits = settings.cpf_reject_repeated_digits

    def check_date(value: str, format: str = date_format) -> bool:
        return dates.date(value, format)

    logger.debug(
        "validator_set_created",
        date_format=date_format,
        cpf_reject_repeated_digits=reject_repeated_digits,
    )

    return ValidatorSet(
        is_null=primitives.is_null,
        is_undefined=primitives.is_undefined,
        not_initialized=primitives.not_initialized,
        email=patterns.email,
        is_valid_cpf=functools.partial(
            cpf.is_valid_cpf, reject_repeated_digits=reject_repeated_digits
        ),
        text=patterns.text,
        is_number=primitives.is_number,
        date=check_date,
        is_landline=patterns.is_landline,
        is_cell_phone=patterns.is_cell_phone,
        is_date=dates.is_date,
        format_pt_br_date_to_en=dates.format_pt_br_date_to_en,
        format_en_date_to_pt_br=dates.format_en_date_to_pt_br,
    )
