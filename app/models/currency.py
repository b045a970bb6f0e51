from typing import Optional
from decimal import Decimal
from datetime import datetime
from sqlmodel import SQLModel, Field
from sqlalchemy import Column, DateTime, UniqueConstraint, CheckConstraint, func

from .common import new_id


# --- Currency reference data ---
class Currency(SQLModel, table=True):
	__tablename__ = "currencies"
	
	id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
	code: str = Field(index=True, unique=True, max_length=3)  # ISO 4217 (TRY, USD)
	name: str = Field(max_length=255)  # Türk Lirası
	symbol: Optional[str] = Field(default=None, max_length=10)  # ₺
	is_active: bool = Field(default=True)


# --- Rate pairs: 1 unit of from_currency = rate units of to_currency ---
class ExchangeRate(SQLModel, table=True):
	__tablename__ = "exchange_rates"
	__table_args__ = (
		UniqueConstraint("from_currency", "to_currency", name="uq_exchange_rates_pair"),
		CheckConstraint("rate > 0", name="ck_exchange_rates_positive"),
	)
	
	id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
	from_currency: str = Field(index=True, max_length=3)
	to_currency: str = Field(index=True, max_length=3)
	rate: Decimal = Field(max_digits=12, decimal_places=6)
	
	updated_at: Optional[datetime] = Field(
		default=None,
		sa_column=Column(
			DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
		)
	)
