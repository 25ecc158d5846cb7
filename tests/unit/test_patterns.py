"""Unit tests for email, text and phone pattern validators."""

from __future__ import annotations

import math

from validation_fields.core.patterns import (
    email,
    is_cell_phone,
    is_landline,
    text,
    to_number,
)


class TestEmail:
    """Tests for email."""

    def test_simple(self) -> None:
        assert email("a@b.co") is True

    def test_surrounding_whitespace(self) -> None:
        assert email(" a@b.co ") == email("a@b.co")

    def test_plus_and_dots(self) -> None:
        assert email("user.name+tag@example.com") is True

    def test_uppercase(self) -> None:
        assert email("USER@EXAMPLE.COM") is True

    def test_missing_tld(self) -> None:
        assert email("user@example") is False

    def test_long_tld(self) -> None:
        assert email("user@example.museum") is False

    def test_missing_local_part(self) -> None:
        assert email("@example.com") is False

    def test_inner_space(self) -> None:
        assert email("a b@example.com") is False

    def test_multi_label_domain(self) -> None:
        assert email("user@example.co.uk") is True

    def test_empty(self) -> None:
        assert email("") is False


class TestToNumber:
    """Tests for to_number."""

    def test_empty_is_zero(self) -> None:
        assert to_number("") == 0

    def test_whitespace_is_zero(self) -> None:
        assert to_number("   ") == 0

    def test_integer(self) -> None:
        assert to_number(" 42 ") == 42

    def test_decimal(self) -> None:
        assert to_number("1.5") == 1.5

    def test_trailing_dot(self) -> None:
        assert to_number("1.") == 1

    def test_exponent(self) -> None:
        assert to_number("1e3") == 1000

    def test_hex(self) -> None:
        assert to_number("0x10") == 16

    def test_infinity(self) -> None:
        assert to_number("-Infinity") == -math.inf

    def test_word_is_nan(self) -> None:
        assert math.isnan(to_number("abc"))

    def test_underscores_are_nan(self) -> None:
        assert math.isnan(to_number("1_000"))

    def test_lowercase_inf_is_nan(self) -> None:
        assert math.isnan(to_number("inf"))


class TestText:
    """Tests for text."""

    def test_name(self) -> None:
        assert text("Maria Souza") is True

    def test_accented(self) -> None:
        assert text("João") is True

    def test_uppercase_accented(self) -> None:
        assert text("ÉDSON") is True

    def test_multiplication_sign_is_not_a_letter(self) -> None:
        assert text("×ab") is False

    def test_integer(self) -> None:
        assert text("42") is False

    def test_integer_with_spaces(self) -> None:
        assert text(" 7 ") is False

    def test_exponent_integer(self) -> None:
        assert text("1e3") is False

    def test_empty(self) -> None:
        assert text("") is False

    def test_too_short(self) -> None:
        assert text("Jo") is False

    def test_decimal_number(self) -> None:
        assert text("1.5") is False

    def test_leading_punctuation(self) -> None:
        assert text("-abc") is False

    def test_alphanumeric(self) -> None:
        assert text("ab1") is True


class TestIsLandline:
    """Tests for is_landline."""

    def test_plain(self) -> None:
        assert is_landline("1133334444") is True

    def test_formatted(self) -> None:
        assert is_landline("(11) 3333-4444") is True

    def test_cell_shaped(self) -> None:
        assert is_landline("11999999999") is False

    def test_all_same_digit(self) -> None:
        assert is_landline("1111111111") is False

    def test_mobile_line_type(self) -> None:
        assert is_landline("1163334444") is False

    def test_zero_area_code(self) -> None:
        assert is_landline("0133334444") is False

    def test_no_digits(self) -> None:
        assert is_landline("phone") is False

    def test_empty(self) -> None:
        assert is_landline("") is False


class TestIsCellPhone:
    """Tests for is_cell_phone."""

    def test_plain(self) -> None:
        assert is_cell_phone("11988887777") is True

    def test_formatted(self) -> None:
        assert is_cell_phone("(11) 98888-7777") is True

    def test_prefix_outside_range(self) -> None:
        assert is_cell_phone("11188887777") is False

    def test_all_same_digit(self) -> None:
        assert is_cell_phone("99999999999") is False

    def test_landline_length(self) -> None:
        assert is_cell_phone("1198888777") is False

    def test_too_long(self) -> None:
        assert is_cell_phone("119888877770") is False

    def test_empty(self) -> None:
        assert is_cell_phone("") is False
