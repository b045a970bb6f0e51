# app/api/v1/endpoints/grid.py
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response
from sqlmodel import Session

from app import crud
from app.api.v1.deps import get_converter, get_formatter
from app.core.config import settings
from app.core.database import get_session
from app.schemas.grid import GridResponse, SidebarResponse, SidebarItem, SidebarCurrency
from app.services.aggregation import summarize_amounts, count_by
from app.services.converter import CurrencyConverter
from app.services.export import export_grid_csv
from app.services.filters import ViewState, filter_records
from app.services.formatter import CurrencyFormatter
from app.services.grid import build_letter_grid, build_credit_grid

router = APIRouter()

LETTER_TOTAL_FIELDS = ["contract_amount", "letter_amount"]
CREDIT_TOTAL_FIELDS = ["principal_amount", "interest_amount", "total_repaid_amount"]


def get_view_state(
		projects: List[str] = Query(default=[], description="Seçili proje id'leri"),
		banks: List[str] = Query(default=[], description="Seçili banka id'leri"),
		currency: Optional[str] = Query(default=None, min_length=3, max_length=3,
		                                description="Görüntüleme para birimi"),
		convert: bool = Query(default=True, description="Tutarları seçili para birimine çevir"),
) -> ViewState:
	state = ViewState(selected_projects=frozenset(projects), selected_banks=frozenset(banks))
	if not convert:
		return state
	return state.with_currency(currency or settings.DEFAULT_CURRENCY)


def _summaries(records, fields, state: ViewState, converter, formatter):
	visible = filter_records(records, state)
	return [summarize_amounts(visible, field, state.currency, converter, formatter) for field in fields]


@router.get("/grid/guarantee-letters", response_model=GridResponse)
def letter_grid(
		state: ViewState = Depends(get_view_state),
		db: Session = Depends(get_session),
		converter: CurrencyConverter = Depends(get_converter),
		formatter: CurrencyFormatter = Depends(get_formatter),
):
	"""Teminat mektupları tablosu: filtered by sidebar selection, amounts converted for display."""
	letters = crud.guarantee_letter.get_multi(db)
	grid = build_letter_grid(letters, crud.bank.get_multi(db), crud.project.get_multi(db),
	                         state, converter, formatter)
	return GridResponse(
		**grid,
		view_state=state,
		summaries=_summaries(letters, LETTER_TOTAL_FIELDS, state, converter, formatter),
	)


@router.get("/grid/credits", response_model=GridResponse)
def credit_grid(
		state: ViewState = Depends(get_view_state),
		db: Session = Depends(get_session),
		converter: CurrencyConverter = Depends(get_converter),
		formatter: CurrencyFormatter = Depends(get_formatter),
):
	credits = crud.credit.get_multi(db)
	grid = build_credit_grid(credits, crud.bank.get_multi(db), crud.project.get_multi(db),
	                         state, converter, formatter)
	return GridResponse(
		**grid,
		view_state=state,
		summaries=_summaries(credits, CREDIT_TOTAL_FIELDS, state, converter, formatter),
	)


@router.get("/grid/guarantee-letters/export")
def export_letter_grid(
		state: ViewState = Depends(get_view_state),
		db: Session = Depends(get_session),
		converter: CurrencyConverter = Depends(get_converter),
		formatter: CurrencyFormatter = Depends(get_formatter),
):
	"""All filtered rows as CSV, not just the visible page."""
	grid = build_letter_grid(crud.guarantee_letter.get_multi(db), crud.bank.get_multi(db),
	                         crud.project.get_multi(db), state, converter, formatter)
	return Response(
		content=export_grid_csv(grid),
		media_type="text/csv; charset=utf-8",
		headers={"Content-Disposition": 'attachment; filename="teminat_mektuplari.csv"'},
	)


@router.get("/grid/sidebar", response_model=SidebarResponse)
def sidebar(db: Session = Depends(get_session)):
	"""Projects and banks with their letter counts, plus the currency selector list."""
	letters = crud.guarantee_letter.get_multi(db)
	by_project = count_by(letters, "project_id")
	by_bank = count_by(letters, "bank_id")
	
	return SidebarResponse(
		projects=[SidebarItem(id=p.id, name=p.name, letter_count=by_project.get(p.id, 0))
		          for p in crud.project.get_multi(db)],
		banks=[SidebarItem(id=b.id, name=b.name, letter_count=by_bank.get(b.id, 0))
		       for b in crud.bank.get_multi(db)],
		currencies=[SidebarCurrency(code=c.code, name=c.name, symbol=c.symbol)
		            for c in crud.currency.list_active(db)],
		selected_currency=settings.DEFAULT_CURRENCY,
	)
