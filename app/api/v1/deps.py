# app/api/v1/deps.py
from fastapi import Depends
from sqlmodel import Session

from app import crud
from app.core.config import settings
from app.core.database import get_session
from app.services.converter import CurrencyConverter
from app.services.formatter import CurrencyFormatter
from app.services.rate_table import RateTable


def get_converter(db: Session = Depends(get_session)) -> CurrencyConverter:
	"""Rate table loaded once per request."""
	return CurrencyConverter(RateTable.load(db))


def get_formatter(db: Session = Depends(get_session)) -> CurrencyFormatter:
	return CurrencyFormatter.from_currencies(crud.currency.get_multi(db), locale=settings.DISPLAY_LOCALE)
