from datetime import date
from decimal import Decimal

import pytest

from app.services.converter import CurrencyConverter
from app.services.filters import ViewState
from app.services.formatter import CurrencyFormatter
from app.services.grid import (
	LETTER_COLUMNS, CREDIT_COLUMNS, build_letter_grid, build_credit_grid, join_relations,
)
from app.services.rate_table import RateTable

BANKS = [{"id": "B1", "name": "Ziraat Bankası"}, {"id": "B2", "name": "Garanti BBVA"}]
PROJECTS = [{"id": "P1", "name": "Ankara Metro"}, {"id": "P2", "name": "İzmir Köprü"}]


def letter(letter_id, **overrides):
	values = {
		"id": letter_id,
		"bank_id": "B1",
		"project_id": "P1",
		"letter_type": "kesin-teminat",
		"contract_amount": "1000000.00",
		"letter_percentage": "6.00",
		"letter_amount": "60000.00",
		"commission_rate": "1.50",
		"bsmv_and_other_costs": "0.00",
		"currency": "TRY",
		"purchase_date": "2024-03-01",
		"letter_date": "2024-03-15",
		"expiry_date": None,
		"status": "aktif",
		"notes": None,
	}
	values.update(overrides)
	return values


@pytest.fixture
def converter():
	return CurrencyConverter(RateTable({("USD", "TRY"): Decimal("32.5")}))


@pytest.fixture
def formatter():
	return CurrencyFormatter({"TRY": "₺", "USD": "$"})


def test_columns_follow_the_letter_grid_layout():
	titles = [column.title for column in LETTER_COLUMNS]
	assert titles[:3] == ["Banka", "Proje", "Mektup Türü"]
	assert "Son Tarih" in titles and "Notlar" in titles
	bank_column = LETTER_COLUMNS[0]
	assert bank_column.field == "bank.name"
	assert bank_column.width == 150
	assert bank_column.frozen is True


def test_letter_row_rendering(converter, formatter):
	grid = build_letter_grid([letter("L1")], BANKS, PROJECTS, ViewState(), converter, formatter)
	row = grid["rows"][0]
	assert row["bank.name"] == "Ziraat Bankası"
	assert row["project.name"] == "Ankara Metro"
	assert row["letter_type"] == "Kesin Teminat"
	assert row["contract_amount"] == "₺1.000.000,00"
	assert row["letter_percentage"] == "%6.00"
	assert row["purchase_date"] == "01.03.2024"
	assert row["expiry_date"] == "-"
	assert row["status"] == "Aktif"
	assert row["notes"] == "-"
	assert grid["total_count"] == grid["filtered_count"] == 1


def test_unknown_labels_pass_through(converter, formatter):
	grid = build_letter_grid([letter("L1", letter_type="ozel", status="arsiv")], BANKS, PROJECTS,
	                         ViewState(), converter, formatter)
	assert grid["rows"][0]["letter_type"] == "ozel"
	assert grid["rows"][0]["status"] == "arsiv"


def test_long_notes_are_truncated(converter, formatter):
	notes = "x" * 60
	grid = build_letter_grid([letter("L1", notes=notes)], BANKS, PROJECTS, ViewState(), converter, formatter)
	assert grid["rows"][0]["notes"] == "x" * 50 + "..."


def test_amounts_converted_to_selected_currency(converter, formatter):
	row_data = letter("L1", currency="USD", contract_amount="100.00")
	state = ViewState(currency="TRY")
	grid = build_letter_grid([row_data], BANKS, PROJECTS, state, converter, formatter)
	assert grid["rows"][0]["contract_amount"] == "₺3.250,00"
	# native currency column keeps the stored code
	assert grid["rows"][0]["currency"] == "USD"


def test_missing_rate_shows_native_amount(converter, formatter):
	row_data = letter("L1", currency="EUR", contract_amount="100.00")
	state = ViewState(currency="TRY")
	grid = build_letter_grid([row_data], BANKS, PROJECTS, state, converter, formatter)
	assert grid["rows"][0]["contract_amount"] == "100,00 EUR"


def test_bad_row_does_not_break_the_grid(converter, formatter):
	rows = [
		letter("L1", contract_amount=None, letter_percentage="abc"),
		letter("L2", purchase_date=12345),
		letter("L3"),
	]
	grid = build_letter_grid(rows, BANKS, PROJECTS, ViewState(), converter, formatter)
	assert [row["id"] for row in grid["rows"]] == ["L1", "L2", "L3"]
	assert grid["rows"][0]["contract_amount"] == "₺0,00"
	assert grid["rows"][0]["letter_percentage"] == "%0.00"
	assert grid["rows"][1]["purchase_date"] == "-"
	assert grid["rows"][2]["contract_amount"] == "₺1.000.000,00"


def test_filtering_and_counts(converter, formatter):
	rows = [letter("L1"), letter("L2", bank_id="B2"), letter("L3", project_id="P2")]
	state = ViewState(selected_banks=frozenset({"B1"}))
	grid = build_letter_grid(rows, BANKS, PROJECTS, state, converter, formatter)
	assert [row["id"] for row in grid["rows"]] == ["L1", "L3"]
	assert grid["total_count"] == 3
	assert grid["filtered_count"] == 2


def test_join_with_unknown_bank():
	joined = join_relations([letter("L1", bank_id="B404")], BANKS, PROJECTS)
	assert joined[0].bank is None
	assert joined[0].value("bank.name") is None
	assert joined[0].value("project.name") == "Ankara Metro"


def test_credit_grid_outstanding(converter, formatter):
	credit = {
		"id": "C1", "bank_id": "B2", "project_id": "P2",
		"principal_amount": Decimal("500000.00"), "interest_amount": Decimal("75000.00"),
		"total_repaid_amount": Decimal("100000.00"), "currency": "TRY",
		"credit_date": date(2024, 1, 10), "maturity_date": date(2025, 1, 10),
		"status": "devam-ediyor", "notes": "Hakediş teminatı",
	}
	grid = build_credit_grid([credit], BANKS, PROJECTS, ViewState(), converter, formatter)
	row = grid["rows"][0]
	assert row["outstanding_amount"] == "₺475.000,00"
	assert row["status"] == "Devam Ediyor"
	assert row["maturity_date"] == "10.01.2025"
	assert [c["title"] for c in grid["columns"]] == [c.title for c in CREDIT_COLUMNS]


def test_grid_over_orm_objects(session, seeded, make_letter, converter, formatter):
	obj = make_letter(seeded["b2"], seeded["p1"], letter_type="avans")
	session.add(obj)
	session.commit()
	grid = build_letter_grid([obj], [seeded["b1"], seeded["b2"]], [seeded["p1"]], ViewState(),
	                         converter, formatter)
	row = grid["rows"][0]
	assert row["bank.name"] == "Garanti BBVA"
	assert row["letter_type"] == "Avans Teminat"
	assert row["letter_amount"] == "₺60.000,00"
