from decimal import Decimal

from app.services.aggregation import summarize_amounts, count_by
from app.services.converter import CurrencyConverter
from app.services.formatter import CurrencyFormatter
from app.services.rate_table import RateTable

RECORDS = [
	{"project_id": "P1", "bank_id": "B1", "letter_amount": "100.00", "currency": "USD"},
	{"project_id": "P1", "bank_id": "B2", "letter_amount": "1000.00", "currency": "TRY"},
	{"project_id": "P2", "bank_id": "B1", "letter_amount": "50.00", "currency": "GBP"},
	{"project_id": "P2", "bank_id": "B1", "letter_amount": None, "currency": "GBP"},
]

CONVERTER = CurrencyConverter(RateTable({("USD", "TRY"): Decimal("32.5")}))


def test_total_in_target_currency_with_unconvertible_rows_apart():
	summary = summarize_amounts(RECORDS, "letter_amount", "TRY", CONVERTER,
	                            CurrencyFormatter({"TRY": "₺"}))
	assert summary.converted_total == Decimal("4250.00")
	assert summary.unconverted_totals == {"GBP": Decimal("50.00")}
	assert summary.converted_total_formatted == "₺4.250,00"


def test_without_target_sums_per_native_currency():
	summary = summarize_amounts(RECORDS, "letter_amount", None, CONVERTER)
	assert summary.converted_total == Decimal("0")
	assert summary.unconverted_totals == {
		"USD": Decimal("100.00"), "TRY": Decimal("1000.00"), "GBP": Decimal("50.00"),
	}
	assert summary.converted_total_formatted is None


def test_count_by():
	assert count_by(RECORDS, "project_id") == {"P1": 2, "P2": 2}
	assert count_by(RECORDS, "bank_id")["B1"] == 3
	assert count_by([], "bank_id").get("B1", 0) == 0


def test_negative_row_does_not_break_total():
	records = [
		{"letter_amount": "-5.00", "currency": "USD"},
		{"letter_amount": "100.00", "currency": "USD"},
	]
	summary = summarize_amounts(records, "letter_amount", "TRY", CONVERTER)
	assert summary.converted_total == Decimal("3250.00")
	assert summary.unconverted_totals == {"USD": Decimal("-5.00")}
