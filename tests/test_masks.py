"""Tests for the mask function registry and the clamp policy."""

import logging

import pytest

from components.masks import (
    MASK_DIGIT_CAPS,
    MASK_FUNCTIONS,
    MaskType,
    clamp_raw_value,
    get_mask_function,
    mask_card,
    mask_date,
    mask_identity,
    mask_money,
    mask_month_day,
    mask_phone,
    mask_zip,
)
from components.mask_helpers import strip_non_digits

DIGIT_MASKS = [MaskType.PHONE, MaskType.CARD, MaskType.ZIP, MaskType.DATE, MaskType.MONTH_DAY]


class TestMaskType:
    def test_coerce_value_and_name(self):
        assert MaskType.coerce("monthDay") is MaskType.MONTH_DAY
        assert MaskType.coerce("MONTH_DAY") is MaskType.MONTH_DAY
        assert MaskType.coerce(MaskType.ZIP) is MaskType.ZIP
        assert MaskType.coerce(None) is None

    def test_unknown_type_is_pass_through(self, caplog):
        with caplog.at_level(logging.WARNING, logger="components.masks"):
            assert MaskType.coerce("iban") is None
        assert "iban" in caplog.text

    def test_tables_cover_every_type(self):
        assert set(MASK_FUNCTIONS) == set(MaskType)
        assert set(MASK_DIGIT_CAPS) == set(MaskType)


class TestPhone:
    def test_progressive_reveal(self):
        assert mask_phone("") == ""
        assert mask_phone("12") == "(12"
        assert mask_phone("1234") == "(123) 4"
        assert mask_phone("1234567") == "(123) 456-7"
        assert mask_phone("9876543210") == "(987) 654-3210"

    def test_reformats_masked_text(self):
        assert mask_phone("(987) 654-32") == "(987) 654-32"

    def test_too_many_digits_left_bare(self):
        """Only reachable when called directly; the clamp stops it in the engine."""
        assert mask_phone("12345678901") == "12345678901"


class TestMoney:
    def test_thousands_and_two_decimals(self):
        assert mask_money("1234.5") == "1,234.50"
        assert mask_money("1000000") == "1,000,000.00"

    def test_strips_formatting(self):
        assert mask_money("$1,234.567") == "1,234.57"

    def test_unparseable_is_zero(self):
        assert mask_money("") == "0.00"
        assert mask_money("abc") == "0.00"

    def test_second_decimal_point_ends_the_number(self):
        assert mask_money("1.2.3") == "1.20"


class TestCard:
    def test_groups_of_four(self):
        assert mask_card("1234567890123456") == "1234 5678 9012 3456"

    def test_no_trailing_space(self):
        assert mask_card("1234") == "1234"
        assert mask_card("12345") == "1234 5"


class TestZip:
    def test_five_digits(self):
        assert mask_zip("12345") == "12345"
        assert mask_zip("123") == "123"

    def test_zip_plus_four(self):
        assert mask_zip("123456") == "12345-6"
        assert mask_zip("123456789") == "12345-6789"


class TestDates:
    def test_date(self):
        assert mask_date("1") == "1"
        assert mask_date("123") == "12/3"
        assert mask_date("12345678") == "12/34/5678"

    def test_date_caps_at_eight_digits(self):
        assert mask_date("12-34-5678-99") == "12/34/5678"

    def test_month_day(self):
        assert mask_month_day("1") == "1"
        assert mask_month_day("12345") == "12/34"


class TestGetMaskFunction:
    def test_lookup(self):
        assert get_mask_function("phone") is mask_phone
        assert get_mask_function(MaskType.MONTH_DAY) is mask_month_day

    def test_identity_fallbacks(self):
        assert get_mask_function(None) is mask_identity
        assert get_mask_function("custom") is mask_identity
        assert get_mask_function("unknown") is mask_identity

    def test_custom_delegate(self):
        fn = lambda v: v[::-1]
        assert get_mask_function("custom", fn) is fn

    def test_custom_ignored_for_builtin_types(self):
        assert get_mask_function("zip", lambda v: "x") is mask_zip


class TestClampPolicy:
    @pytest.mark.parametrize(
        "mask_type, raw, expected",
        [
            ("phone", "1234567890333", "1234567890"),
            ("date", "12/34/56789", "12345678"),
            ("monthDay", "12345", "1234"),
            ("zip", "12345-67890", "123456789"),
            ("card", "1234 5678 9012 3456 7890", "1234567890123456"),
        ],
    )
    def test_capped_types(self, mask_type, raw, expected):
        assert clamp_raw_value(mask_type, raw) == expected

    @pytest.mark.parametrize("mask_type", ["money", "custom", None])
    def test_uncapped_types_pass_raw(self, mask_type):
        assert clamp_raw_value(mask_type, "a1,2.3b") == "a1,2.3b"

    @pytest.mark.parametrize("length", range(0, 21))
    @pytest.mark.parametrize("mask_type", DIGIT_MASKS)
    def test_masking_is_idempotent(self, mask_type, length):
        """Re-masking the digits of a masked value gives the same text, partial reveals included."""
        fn = get_mask_function(mask_type)
        masked = fn(clamp_raw_value(mask_type, "98765432109876543210"[:length]))
        again = fn(clamp_raw_value(mask_type, strip_non_digits(masked)))
        assert again == masked
