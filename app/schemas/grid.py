# app/schemas/grid.py
from typing import Optional, List, Dict, Any
from decimal import Decimal
from pydantic import BaseModel

from app.services.filters import ViewState


class GridColumn(BaseModel):
	title: str
	field: str
	width: int
	frozen: bool = False


class AmountSummary(BaseModel):
	field: str
	target_currency: Optional[str] = None
	converted_total: Decimal = Decimal("0.00")
	converted_total_formatted: Optional[str] = None
	# Rows without a rate stay in their own currency
	unconverted_totals: Dict[str, Decimal] = {}


class GridResponse(BaseModel):
	columns: List[GridColumn]
	rows: List[Dict[str, Any]]
	total_count: int
	filtered_count: int
	view_state: ViewState
	summaries: List[AmountSummary] = []


class SidebarItem(BaseModel):
	id: str
	name: str
	# guarantee letters only; credits are not counted
	letter_count: int = 0


class SidebarCurrency(BaseModel):
	code: str
	name: str
	symbol: Optional[str] = None


class SidebarResponse(BaseModel):
	projects: List[SidebarItem]
	banks: List[SidebarItem]
	currencies: List[SidebarCurrency]
	selected_currency: str
