"""Tests for the input validator: accepted edits and integer parsing."""
import pytest
from numberline.model.validation import accepts_edit, max_digits, parse_value


# ── accepts_edit ──────────────────────────────────────────────────────────────

class TestAcceptsEdit:
    @pytest.mark.parametrize("text", ["", "-", "0", "42", "-7", "007", "-0", "123456789012345678901234567890"])
    def test_digits_with_optional_leading_minus(self, text):
        assert accepts_edit(text) is True

    @pytest.mark.parametrize("text", ["a", "1a", "--1", "1-", "+3", " 4", "4 ", "1.5", "1,000", "٣"])
    def test_anything_else_is_refused(self, text):
        assert accepts_edit(text) is False


# ── parse_value ───────────────────────────────────────────────────────────────

class TestParseValue:
    def test_positive(self):
        assert parse_value("42") == 42

    def test_negative(self):
        assert parse_value("-7") == -7

    def test_negative_zero_is_zero(self):
        assert parse_value("-0") == 0

    def test_leading_zeros(self):
        assert parse_value("007") == 7
        assert parse_value("-007") == -7

    def test_empty_is_absent(self):
        assert parse_value("") is None

    def test_lone_minus_is_absent(self):
        assert parse_value("-") is None

    def test_malformed_is_absent_not_an_error(self):
        assert parse_value("1a") is None
        assert parse_value("--1") is None

    def test_no_magnitude_bound(self):
        assert parse_value("100000000000000000000") == 10**20

    def test_leading_zeros_do_not_count_towards_the_digit_limit(self):
        text = "0" * 50 + "7" * max_digits()
        assert parse_value(text) == int("7" * max_digits())

    def test_too_many_digits_is_absent_not_an_error(self):
        assert parse_value("1" * 5000) is None
        assert parse_value("-" + "9" * 5000) is None

    def test_digit_limit_leaves_room_for_the_sum(self):
        nines = "9" * max_digits()
        assert parse_value(nines) is not None
        assert parse_value(nines + "9") is None
        assert str(parse_value(nines) + 1) == "1" + "0" * max_digits()
