"""Date validation and pt-BR / ISO date format conversion."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import TYPE_CHECKING, Literal

from validation_fields.utils.logger import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = get_logger(__name__)


class DateFormat(StrEnum):
    DB = "db"  # YYYY-MM-DD
    PT = "pt"  # DD/MM/YYYY


ISO_DATE_FORMAT = "%Y-%m-%d"
PT_BR_DATE_FORMAT = "%d/%m/%Y"

ISO_DATE_TEMPLATE = "{year:04d}-{month:02d}-{day:02d}"
PT_BR_DATE_TEMPLATE = "{day:02d}/{month:02d}/{year:04d}"


def parse_date(value: str, formats: Iterable[str]) -> datetime | None:
    """Parse a date string with the first matching strptime format.

    Returns None if no format matches.
    """
    stripped = value.strip()
    for fmt in formats:
        try:
            return datetime.strptime(stripped, fmt)
        except ValueError:
            continue
    return None


def is_date(value: str) -> bool:
    """Check if the value is a calendar date.

    Accepts ISO-8601 dates and date-times ("2024-12-25", "2024-12-25T10:30:00")
    and pt-BR dates ("25/12/2024"). Ambiguous formats such as "12/25/2024" are
    not guessed.
    """
    try:
        datetime.fromisoformat(value.strip())
        return True
    except ValueError:
        pass
    return parse_date(value, [PT_BR_DATE_FORMAT]) is not None


def _not_after_now(day: str, now: datetime) -> bool:
    parsed = parse_date(day, [ISO_DATE_FORMAT])
    if parsed is None:
        logger.debug("date_unparseable", length=len(day))
        return False

    moment = datetime.combine(parsed.date(), now.time().replace(microsecond=0))
    return moment <= now


def date(value: str, format: str = DateFormat.DB) -> bool:
    """Check that a date is not in the future.

    The date is combined with the current time of day before comparing, so
    today is accepted and tomorrow is not.

    Formats:
    - "pt": DD/MM/YYYY, must split into exactly three parts on "/"
    - "db" (and any other value): YYYY-MM-DD

    Input that cannot be parsed is rejected.
    """
    now = datetime.now()

    if format == DateFormat.PT:
        parts = value.split("/")
        if len(parts) != 3:
            return False
        day, month, year = parts
        return _not_after_now(f"{year}-{month}-{day}", now)

    return _not_after_now(value, now)


def _reformat(value: str, separator: str, source: str, template: str) -> str | Literal[False]:
    if not is_date(value):
        return False

    if len(value.split(separator)) != 3:
        logger.debug("date_wrong_separator_count", separator=separator)
        return False

    parsed = parse_date(value, [source])
    if parsed is None:
        return False
    # strftime("%Y") does not zero-pad years before 1000 on every platform
    return template.format(year=parsed.year, month=parsed.month, day=parsed.day)


def format_pt_br_date_to_en(value: str) -> str | Literal[False]:
    """Convert DD/MM/YYYY to YYYY-MM-DD.

    Returns False if the value is not a date in DD/MM/YYYY form.
    """
    return _reformat(value, "/", PT_BR_DATE_FORMAT, ISO_DATE_TEMPLATE)


def format_en_date_to_pt_br(value: str) -> str | Literal[False]:
    """Convert YYYY-MM-DD to DD/MM/YYYY.

    Returns False if the value is not a date in YYYY-MM-DD form.
    """
    return _reformat(value, "-", ISO_DATE_FORMAT, PT_BR_DATE_TEMPLATE)
