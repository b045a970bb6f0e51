# app/api/v1/endpoints/currencies.py
from decimal import Decimal
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session

from app import crud
from app.api.v1.deps import get_converter, get_formatter
from app.api.v1.errors import http_error
from app.core.database import get_session
from app.core.exceptions import TeminatError
from app.schemas.currency import (
	CurrencyCreate, CurrencyUpdate, CurrencyRead, ExchangeRateCreate, ExchangeRateRead,
	ConversionResponse,
)
from app.services.converter import CurrencyConverter
from app.services.formatter import CurrencyFormatter

router = APIRouter()


# --- Currencies ---
@router.get("/currencies", response_model=List[CurrencyRead])
def list_currencies(
		active_only: bool = Query(False, description="Sadece aktif para birimleri"),
		db: Session = Depends(get_session)
):
	if active_only:
		return crud.currency.list_active(db)
	return crud.currency.get_multi(db)


@router.post("/currencies", response_model=CurrencyRead, status_code=201)
def create_currency(currency_in: CurrencyCreate, db: Session = Depends(get_session)):
	try:
		return crud.currency.create(db, currency_in)
	except TeminatError as e:
		raise http_error(e)


@router.put("/currencies/{currency_id}", response_model=CurrencyRead)
def update_currency(currency_id: str, currency_in: CurrencyUpdate, db: Session = Depends(get_session)):
	currency = crud.currency.get(db, currency_id)
	if not currency:
		raise HTTPException(status_code=404, detail="Para birimi bulunamadı")
	return crud.currency.update(db, currency, currency_in)


@router.delete("/currencies/{currency_id}", status_code=204)
def delete_currency(currency_id: str, db: Session = Depends(get_session)):
	currency = crud.currency.get(db, currency_id)
	if not currency:
		raise HTTPException(status_code=404, detail="Para birimi bulunamadı")
	crud.currency.delete(db, currency)


# --- Exchange rates ---
@router.get("/exchange-rates", response_model=List[ExchangeRateRead])
def list_exchange_rates(db: Session = Depends(get_session)):
	return crud.exchange_rate.get_multi(db)


@router.post("/exchange-rates", response_model=ExchangeRateRead)
def upsert_exchange_rate(rate_in: ExchangeRateCreate, db: Session = Depends(get_session)):
	"""
	Saves the rate of an ordered pair (1 from_currency = rate to_currency).
	Posting an existing pair replaces its rate; the reverse pair is untouched.
	"""
	return crud.exchange_rate.upsert(db, rate_in)


@router.delete("/exchange-rates/{rate_id}", status_code=204)
def delete_exchange_rate(rate_id: str, db: Session = Depends(get_session)):
	rate = crud.exchange_rate.get(db, rate_id)
	if not rate:
		raise HTTPException(status_code=404, detail="Kur bulunamadı")
	crud.exchange_rate.delete(db, rate)


@router.get("/exchange-rates/convert", response_model=ConversionResponse)
def convert_amount(
		amount: Decimal = Query(..., ge=0, description="Tutar"),
		from_currency: str = Query(..., min_length=3, max_length=3),
		to_currency: str = Query(..., min_length=3, max_length=3),
		strict: bool = Query(False, description="Kur yoksa 404 döndür"),
		converter: CurrencyConverter = Depends(get_converter),
		formatter: CurrencyFormatter = Depends(get_formatter),
):
	"""
	Converts an amount. Without a rate for the pair the native amount comes
	back with converted=false, unless strict is set.
	"""
	if strict:
		try:
			converter.convert(amount, from_currency, to_currency)
		except TeminatError as e:
			raise http_error(e)
	
	result = converter.convert_or_fallback(amount, from_currency, to_currency)
	return ConversionResponse(
		amount=amount,
		from_currency=from_currency.upper(),
		to_currency=to_currency.upper(),
		converted_amount=result.amount,
		currency=result.currency,
		converted=result.converted,
		formatted=formatter.format(result.amount, result.currency),
	)
