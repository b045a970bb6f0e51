# app/crud/crud_currency.py
import logging
from typing import Optional
from sqlmodel import Session, select

from app.core.exceptions import DuplicateCurrencyError
from app.crud.base import CRUDBase
from app.models.currency import Currency, ExchangeRate
from app.schemas.currency import CurrencyCreate, ExchangeRateCreate

logger = logging.getLogger(__name__)


class CRUDCurrency(CRUDBase[Currency]):
	def get_by_code(self, db: Session, code: str) -> Optional[Currency]:
		statement = select(Currency).where(Currency.code == code.upper())
		return db.exec(statement).first()
	
	def list_active(self, db: Session) -> list[Currency]:
		statement = select(Currency).where(Currency.is_active == True).order_by(Currency.code)  # noqa: E712
		return list(db.exec(statement).all())
	
	def create(self, db: Session, obj_in: CurrencyCreate) -> Currency:
		if self.get_by_code(db, obj_in.code):
			raise DuplicateCurrencyError(obj_in.code)
		return super().create(db, obj_in)


class CRUDExchangeRate(CRUDBase[ExchangeRate]):
	def get_pair(self, db: Session, from_code: str, to_code: str) -> Optional[ExchangeRate]:
		statement = select(ExchangeRate).where(
			ExchangeRate.from_currency == from_code.upper(),
			ExchangeRate.to_currency == to_code.upper(),
		)
		return db.exec(statement).first()
	
	def upsert(self, db: Session, obj_in: ExchangeRateCreate) -> ExchangeRate:
		"""One row per ordered pair: an existing pair gets the new rate."""
		existing = self.get_pair(db, obj_in.from_currency, obj_in.to_currency)
		if existing is None:
			logger.info("New rate %s -> %s = %s", obj_in.from_currency, obj_in.to_currency, obj_in.rate)
			return self.create(db, obj_in)
		
		existing.rate = obj_in.rate
		logger.info("Rate %s -> %s updated to %s", obj_in.from_currency, obj_in.to_currency, obj_in.rate)
		return self._save(db, existing)


currency = CRUDCurrency(Currency, "Currency")
exchange_rate = CRUDExchangeRate(ExchangeRate, "ExchangeRate")
