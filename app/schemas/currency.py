# app/schemas/currency.py
from typing import Optional
from decimal import Decimal
from datetime import datetime
from pydantic import BaseModel, Field, field_validator


def _normalize_code(value: str) -> str:
	value = value.strip().upper()
	if len(value) != 3 or not value.isalpha():
		raise ValueError("currency code must be 3 letters")
	return value


class CurrencyBase(BaseModel):
	code: str
	name: str = Field(min_length=1, max_length=255)
	symbol: Optional[str] = Field(default=None, max_length=10)
	is_active: bool = True
	
	@field_validator("code")
	@classmethod
	def check_code(cls, value: str) -> str:
		return _normalize_code(value)


class CurrencyCreate(CurrencyBase):
	pass


class CurrencyUpdate(BaseModel):
	name: Optional[str] = Field(default=None, min_length=1, max_length=255)
	symbol: Optional[str] = Field(default=None, max_length=10)
	is_active: Optional[bool] = None


class CurrencyRead(CurrencyBase):
	id: str
	
	class Config:
		from_attributes = True


# --- Exchange rates ---
class ExchangeRateBase(BaseModel):
	from_currency: str
	to_currency: str
	# 1 from_currency = rate to_currency
	rate: Decimal = Field(gt=0, max_digits=12, decimal_places=6)
	
	@field_validator("from_currency", "to_currency")
	@classmethod
	def check_codes(cls, value: str) -> str:
		return _normalize_code(value)


class ExchangeRateCreate(ExchangeRateBase):
	pass


class ExchangeRateRead(ExchangeRateBase):
	id: str
	updated_at: Optional[datetime] = None
	
	class Config:
		from_attributes = True


class ConversionResponse(BaseModel):
	amount: Decimal
	from_currency: str
	to_currency: str
	converted_amount: Decimal
	# Currency the converted_amount is actually expressed in
	currency: str
	converted: bool
	formatted: str
