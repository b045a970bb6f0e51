# app/services/filters.py
from typing import Iterable, Mapping, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class ViewState(BaseModel):
	"""
	Sidebar selection passed explicitly into the grid functions.
	
	An empty selection set means "no filter" (every record), never "nothing".
	"""
	model_config = ConfigDict(frozen=True)
	
	selected_projects: frozenset[str] = frozenset()
	selected_banks: frozenset[str] = frozenset()
	currency: Optional[str] = None
	
	def toggle_project(self, project_id: str, checked: bool) -> "ViewState":
		return self.model_copy(
			update={"selected_projects": _toggle(self.selected_projects, project_id, checked)}
		)
	
	def toggle_bank(self, bank_id: str, checked: bool) -> "ViewState":
		return self.model_copy(
			update={"selected_banks": _toggle(self.selected_banks, bank_id, checked)}
		)
	
	def with_currency(self, currency: Optional[str]) -> "ViewState":
		return self.model_copy(update={"currency": currency.upper() if currency else None})


def _toggle(selection: frozenset[str], item_id: str, checked: bool) -> frozenset[str]:
	if checked:
		return selection | {item_id}
	return selection - {item_id}


def _field(record, name: str):
	if isinstance(record, Mapping):
		return record.get(name)
	return getattr(record, name, None)


def filter_records(records: Iterable[T], state: ViewState) -> list[T]:
	"""Order-preserving AND filter over the bank and project selections."""
	result = []
	for record in records:
		if state.selected_banks and _field(record, "bank_id") not in state.selected_banks:
			continue
		if state.selected_projects and _field(record, "project_id") not in state.selected_projects:
			continue
		result.append(record)
	return result
