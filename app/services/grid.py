# app/services/grid.py
"""
Grid rendering for guarantee letters and credits.

Rows are joined with their bank and project here (explicit lookup by id),
filtered by the sidebar ViewState and rendered column by column. A cell that
fails to render shows "-" and never takes the rest of the grid down.
"""
import logging
from decimal import Decimal
from typing import Callable, Iterable, Mapping, NamedTuple, Optional

from app.services.converter import CurrencyConverter, to_decimal
from app.services.filters import ViewState, filter_records
from app.services.formatter import CurrencyFormatter, format_date, format_percentage

logger = logging.getLogger(__name__)

NOTE_PREVIEW_LENGTH = 50

LETTER_TYPE_LABELS = {
	"teminat": "Teminat",
	"avans": "Avans Teminat",
	"kesin-teminat": "Kesin Teminat",
	"gecici-teminat": "Geçici Teminat",
}

LETTER_STATUS_LABELS = {
	"aktif": "Aktif",
	"beklemede": "Beklemede",
	"kapali": "Kapalı",
	"iptal": "İptal",
}

CREDIT_STATUS_LABELS = {
	"devam-ediyor": "Devam Ediyor",
	"kapali": "Kapalı",
	"iptal": "İptal",
}


def field_value(record, name: str):
	if record is None:
		return None
	if isinstance(record, Mapping):
		return record.get(name)
	return getattr(record, name, None)


class JoinedRow(NamedTuple):
	record: object
	bank: object
	project: object
	
	def value(self, path: str):
		"""Resolves 'field' on the record or 'bank.name' / 'project.name' on the joins."""
		head, _, tail = path.partition(".")
		if tail and head in ("bank", "project"):
			return field_value(getattr(self, head), tail)
		return field_value(self.record, path)


class RenderContext(NamedTuple):
	converter: CurrencyConverter
	formatter: CurrencyFormatter
	target_currency: Optional[str]


Renderer = Callable[[object, JoinedRow, RenderContext], str]


class ColumnDef(NamedTuple):
	title: str
	field: str
	width: int
	render: Optional[Renderer] = None
	frozen: bool = False
	
	def as_dict(self) -> dict:
		return {"title": self.title, "field": self.field, "width": self.width, "frozen": self.frozen}


# --- Renderers ---
def render_text(value, row, ctx) -> str:
	return "-" if value is None or value == "" else str(value)


def render_money(value, row: JoinedRow, ctx: RenderContext) -> str:
	native = (field_value(row.record, "currency") or "").upper()
	if ctx.target_currency and native:
		result = ctx.converter.convert_or_fallback(value, native, ctx.target_currency)
		return ctx.formatter.format(result.amount, result.currency)
	return ctx.formatter.format(to_decimal(value), native)


def render_percentage(value, row, ctx) -> str:
	return format_percentage(value)


def render_date(value, row, ctx) -> str:
	return format_date(value)


def render_notes(value, row, ctx) -> str:
	if not value:
		return "-"
	if len(value) > NOTE_PREVIEW_LENGTH:
		return value[:NOTE_PREVIEW_LENGTH] + "..."
	return value


def label_renderer(labels: Mapping[str, str]) -> Renderer:
	def render(value, row, ctx) -> str:
		return labels.get(value, value if value is not None else "-")
	return render


def render_outstanding(value, row: JoinedRow, ctx: RenderContext) -> str:
	outstanding = (
		to_decimal(field_value(row.record, "principal_amount"))
		+ to_decimal(field_value(row.record, "interest_amount"))
		- to_decimal(field_value(row.record, "total_repaid_amount"))
	)
	return render_money(max(outstanding, Decimal("0")), row, ctx)


LETTER_COLUMNS = [
	ColumnDef("Banka", "bank.name", 150, render_text, frozen=True),
	ColumnDef("Proje", "project.name", 150, render_text),
	ColumnDef("Mektup Türü", "letter_type", 130, label_renderer(LETTER_TYPE_LABELS)),
	ColumnDef("Sözleşme Tutarı", "contract_amount", 130, render_money),
	ColumnDef("Mektup %", "letter_percentage", 80, render_percentage),
	ColumnDef("Mektup Tutarı", "letter_amount", 130, render_money),
	ColumnDef("Komisyon %", "commission_rate", 100, render_percentage),
	ColumnDef("BSMV ve Diğer Masraflar", "bsmv_and_other_costs", 130, render_money),
	ColumnDef("Para Birimi", "currency", 80, render_text),
	ColumnDef("Alım Tarihi", "purchase_date", 110, render_date),
	ColumnDef("Mektup Tarihi", "letter_date", 110, render_date),
	ColumnDef("Son Tarih", "expiry_date", 110, render_date),
	ColumnDef("Durum", "status", 100, label_renderer(LETTER_STATUS_LABELS)),
	ColumnDef("Notlar", "notes", 200, render_notes),
]

CREDIT_COLUMNS = [
	ColumnDef("Banka", "bank.name", 150, render_text, frozen=True),
	ColumnDef("Proje", "project.name", 150, render_text),
	ColumnDef("Anapara", "principal_amount", 130, render_money),
	ColumnDef("Faiz", "interest_amount", 130, render_money),
	ColumnDef("Geri Ödenen", "total_repaid_amount", 130, render_money),
	ColumnDef("Kalan Borç", "outstanding_amount", 130, render_outstanding),
	ColumnDef("Para Birimi", "currency", 80, render_text),
	ColumnDef("Kredi Tarihi", "credit_date", 110, render_date),
	ColumnDef("Vade Tarihi", "maturity_date", 110, render_date),
	ColumnDef("Durum", "status", 100, label_renderer(CREDIT_STATUS_LABELS)),
	ColumnDef("Notlar", "notes", 200, render_notes),
]


def join_relations(records: Iterable, banks: Iterable, projects: Iterable) -> list[JoinedRow]:
	banks_by_id = {field_value(bank, "id"): bank for bank in banks}
	projects_by_id = {field_value(project, "id"): project for project in projects}
	return [
		JoinedRow(
			record,
			banks_by_id.get(field_value(record, "bank_id")),
			projects_by_id.get(field_value(record, "project_id")),
		)
		for record in records
	]


def render_row(row: JoinedRow, columns: list[ColumnDef], ctx: RenderContext) -> dict:
	rendered = {
		"id": field_value(row.record, "id"),
		"bank_id": field_value(row.record, "bank_id"),
		"project_id": field_value(row.record, "project_id"),
	}
	for column in columns:
		renderer = column.render or render_text
		try:
			rendered[column.field] = renderer(row.value(column.field), row, ctx)
		except (ArithmeticError, ValueError, TypeError, AttributeError) as exc:
			logger.warning("Could not render %s for row %s: %s", column.field, rendered["id"], exc)
			rendered[column.field] = "-"
	return rendered


def build_grid(records, banks, projects, state: ViewState, converter: CurrencyConverter,
               formatter: CurrencyFormatter, columns: list[ColumnDef]) -> dict:
	records = list(records)
	visible = filter_records(records, state)
	ctx = RenderContext(converter, formatter, state.currency)
	rows = [render_row(row, columns, ctx) for row in join_relations(visible, banks, projects)]
	return {
		"columns": [column.as_dict() for column in columns],
		"rows": rows,
		"total_count": len(records),
		"filtered_count": len(rows),
	}


def build_letter_grid(letters, banks, projects, state, converter, formatter) -> dict:
	return build_grid(letters, banks, projects, state, converter, formatter, LETTER_COLUMNS)


def build_credit_grid(credits, banks, projects, state, converter, formatter) -> dict:
	return build_grid(credits, banks, projects, state, converter, formatter, CREDIT_COLUMNS)
