# app/services/rate_table.py
import logging
from decimal import Decimal
from typing import Iterable, Mapping

from sqlmodel import Session, select

from app.core.exceptions import RateNotFoundError
from app.models.currency import ExchangeRate

logger = logging.getLogger(__name__)

RatePair = tuple[str, str]


def _get(row, name: str):
	if isinstance(row, Mapping):
		return row[name]
	return getattr(row, name)


class RateTable:
	"""
	Immutable snapshot of exchange rates keyed by the ordered pair (from, to).
	
	Lookup is exact: a USD->TRY row says nothing about TRY->USD.
	"""
	
	def __init__(self, rates: Mapping[RatePair, Decimal] | None = None):
		self._rates: dict[RatePair, Decimal] = {
			(src.upper(), dst.upper()): Decimal(str(rate)) for (src, dst), rate in (rates or {}).items()
		}
	
	@classmethod
	def from_rows(cls, rows: Iterable) -> "RateTable":
		"""Builds the table from ExchangeRate objects or their JSON dicts."""
		rates = {}
		for row in rows:
			pair = (_get(row, "from_currency"), _get(row, "to_currency"))
			rates[pair] = _get(row, "rate")
		return cls(rates)
	
	@classmethod
	def load(cls, session: Session) -> "RateTable":
		rows = session.exec(select(ExchangeRate)).all()
		table = cls.from_rows(rows)
		logger.debug("Loaded %d exchange rate pairs", len(table))
		return table
	
	def rate_for(self, from_code: str, to_code: str) -> Decimal:
		pair = (from_code.upper(), to_code.upper())
		try:
			return self._rates[pair]
		except KeyError:
			raise RateNotFoundError(*pair) from None
	
	def has_pair(self, from_code: str, to_code: str) -> bool:
		return (from_code.upper(), to_code.upper()) in self._rates
	
	def __len__(self) -> int:
		return len(self._rates)
