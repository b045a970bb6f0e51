from decimal import Decimal, ROUND_HALF_UP

import pytest

from app.core.exceptions import RateNotFoundError
from app.services.converter import CurrencyConverter, to_decimal
from app.services.rate_table import RateTable


@pytest.fixture
def converter():
	table = RateTable({
		("USD", "TRY"): Decimal("32.500000"),
		("EUR", "USD"): Decimal("1.085000"),
		("TRY", "JPY"): Decimal("0.125000"),
	})
	return CurrencyConverter(table)


def test_usd_to_try_scenario(converter):
	assert converter.convert(Decimal("100.00"), "USD", "TRY") == Decimal("3250.00")


@pytest.mark.parametrize("amount", ["0", "0.01", "100.005", "123456789.99"])
def test_same_currency_is_identity(converter, amount):
	"""Same currency returns the exact input, with no rounding drift"""
	value = Decimal(amount)
	result = converter.convert(value, "TRY", "TRY")
	assert result == value
	assert str(result) == amount


def test_identity_needs_no_rate():
	assert CurrencyConverter(RateTable()).convert(Decimal("5.55"), "GBP", "gbp") == Decimal("5.55")


def test_result_rounded_half_up_to_cents(converter):
	# 1.00 * 0.125 = 0.125 -> 0.13 (half-up, not banker's 0.12)
	assert converter.convert(Decimal("1.00"), "TRY", "JPY") == Decimal("0.13")
	# 10.00 * 1.085 = 10.85 exactly
	assert converter.convert(Decimal("10.00"), "EUR", "USD") == Decimal("10.85")
	assert converter.convert(Decimal("0.10"), "EUR", "USD") == Decimal("0.11")


def test_matches_round_of_product(converter):
	rate = Decimal("32.500000")
	for amount in ("0.01", "7.77", "1999.99"):
		expected = (Decimal(amount) * rate).quantize(Decimal("0.01"), ROUND_HALF_UP)
		assert converter.convert(Decimal(amount), "USD", "TRY") == expected


def test_no_automatic_inversion(converter):
	with pytest.raises(RateNotFoundError) as exc_info:
		converter.convert(Decimal("100.00"), "TRY", "USD")
	assert exc_info.value.from_code == "TRY"
	assert exc_info.value.to_code == "USD"


def test_codes_are_case_insensitive(converter):
	assert converter.convert(Decimal("2.00"), "usd", "try") == Decimal("65.00")


def test_negative_amount_rejected(converter):
	with pytest.raises(ValueError):
		converter.convert(Decimal("-1.00"), "USD", "TRY")


def test_fallback_keeps_native_amount(converter):
	result = converter.convert_or_fallback(Decimal("100.00"), "GBP", "TRY")
	assert result.converted is False
	assert result.amount == Decimal("100.00")
	assert result.currency == "GBP"


def test_fallback_converts_when_rate_exists(converter):
	result = converter.convert_or_fallback("100", "USD", "TRY")
	assert result == (Decimal("3250.00"), "TRY", True)


@pytest.mark.parametrize("raw", [None, "", "abc", "NaN", float("inf")])
def test_malformed_numbers_become_zero(raw):
	assert to_decimal(raw) == Decimal("0")


def test_rate_table_from_json_rows():
	rows = [{"from_currency": "usd", "to_currency": "try", "rate": "32.500000"}]
	table = RateTable.from_rows(rows)
	assert table.rate_for("USD", "TRY") == Decimal("32.500000")
	assert table.has_pair("usd", "TRY")
	assert not table.has_pair("TRY", "USD")
	assert len(table) == 1


def test_rate_table_loads_from_session(session, seeded):
	table = RateTable.load(session)
	assert table.rate_for("USD", "TRY") == Decimal("32.5")
	assert table.rate_for("EUR", "TRY") == Decimal("35")
	assert len(table) == 2


def test_float_amount_uses_its_decimal_text():
	converter = CurrencyConverter(RateTable({("USD", "EUR"): Decimal("1.000000")}))
	# binary 1.005 is 1.00499..., which would round down to 1.00
	assert converter.convert(1.005, "USD", "EUR") == Decimal("1.01")
