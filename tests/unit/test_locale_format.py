"""Unit tests for pt-BR form formatting"""

import pytest
from decimal import Decimal
from supera_advisor.domain.exceptions import ValidationError
from supera_advisor.utils.locale_format import (
    format_brl,
    mask_currency_input,
    parse_locale_decimal,
    quantize_cents,
)


def test_mask_reads_digits_as_cents():
    assert mask_currency_input("1") == "0,01"
    assert mask_currency_input("12") == "0,12"
    assert mask_currency_input("123") == "1,23"
    assert mask_currency_input("123456") == "1.234,56"


def test_mask_reformats_already_masked_text():
    """Typing one more digit after "1.234,56" shifts everything left"""
    assert mask_currency_input("1.234,567") == "12.345,67"


def test_mask_drops_non_digits():
    assert mask_currency_input("R$ 1a0b0") == "1,00"
    assert mask_currency_input("abc") == ""
    assert mask_currency_input("") == ""


def test_format_brl():
    assert format_brl(Decimal("0")) == "0,00"
    assert format_brl(Decimal("1234.5")) == "1.234,50"
    assert format_brl(Decimal("1234567.891")) == "1.234.567,89"
    assert format_brl(600) == "600,00"
    assert format_brl(0.125) == "0,13"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1.234,56", Decimal("1234.56")),
        ("1.000.000,00", Decimal("1000000.00")),
        ("600,00", Decimal("600.00")),
        ("0,01", Decimal("0.01")),
        ("1500", Decimal("1500")),
        (" 3.000,00 ", Decimal("3000.00")),
    ],
)
def test_parse_locale_decimal(text, expected):
    assert parse_locale_decimal(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "abc", "1,2,3", "12.34", "1.2345,00", ",50"])
def test_parse_locale_decimal_rejects_malformed(text):
    with pytest.raises(ValidationError) as exc_info:
        parse_locale_decimal(text, field="income")
    assert exc_info.value.field == "income"


def test_parse_masked_value_round_trips_through_mask():
    assert parse_locale_decimal(mask_currency_input("350000")) == Decimal("3500.00")


def test_mask_ignores_digits_past_field_length():
    """A pasted run of digits keeps only what fits in the field"""
    assert mask_currency_input("9" * 40) == "999.999.999.999.999,99"
    assert mask_currency_input("1" + "0" * 30) == "100.000.000.000.000,00"


def test_format_brl_beyond_default_precision():
    """More than 28 significant digits still render without error"""
    assert format_brl(Decimal("1" + "0" * 30)) == "1" + ".000" * 10 + ",00"
    assert format_brl(Decimal("12345678901234567890123456789.005")) == (
        "12.345.678.901.234.567.890.123.456.789,01"
    )


def test_quantize_cents_keeps_every_digit():
    amount = Decimal("9" * 40)
    assert quantize_cents(amount) == amount
    assert quantize_cents(Decimal("0.005")) == Decimal("0.01")
