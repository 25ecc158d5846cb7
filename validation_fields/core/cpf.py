"""CPF (Cadastro de Pessoas Físicas) check-digit validation.

A CPF has 11 digits; the last two are check digits computed from the
preceding ones with a weighted sum modulo 11:

- First digit: sum of the first 9 digits weighted 10 down to 2
- Second digit: sum of the first 10 digits weighted 11 down to 2
- The digit is 11 - (sum % 11), with 10 and 11 mapped to 0
"""

from __future__ import annotations

from typing import Literal

from validation_fields.core.primitives import has_repeated_digits, only_digits
from validation_fields.utils.logger import get_logger

logger = get_logger(__name__)

CPF_LENGTH = 11


def cpf_check_digit(digits: str) -> int:
    """Compute the check digit that follows a 9 or 10 digit CPF prefix."""
    weight = len(digits) + 1
    total = sum(int(digit) * (weight - i) for i, digit in enumerate(digits))
    remainder = 11 - (total % 11)
    if remainder >= 10:
        return 0
    return remainder


def is_valid_cpf(value: str, *, reject_repeated_digits: bool = False) -> bool:
    """Validate a CPF, ignoring any formatting characters.

    "111.444.777-35" and "11144477735" are both valid. Inputs that do not
    contain exactly 11 digits are invalid.

    Repeated-digit CPFs such as "000.000.000-00" satisfy the checksum and are
    accepted unless reject_repeated_digits is set.
    """
    cpf = only_digits(value)
    if len(cpf) != CPF_LENGTH:
        logger.debug("cpf_wrong_length", length=len(cpf))
        return False

    if reject_repeated_digits and has_repeated_digits(cpf):
        logger.debug("cpf_repeated_digits")
        return False

    if cpf_check_digit(cpf[:9]) != int(cpf[9]):
        return False

    return cpf_check_digit(cpf[:10]) == int(cpf[10])


def format_cpf(value: str) -> str | Literal[False]:
    """Render a CPF as XXX.XXX.XXX-XX.

    Returns False if the value does not contain exactly 11 digits.
    """
    cpf = only_digits(value)
    if len(cpf) != CPF_LENGTH:
        return False
    return f"{cpf[:3]}.{cpf[3:6]}.{cpf[6:9]}-{cpf[9:]}"
