# app/api/v1/endpoints/banks.py
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session

from app import crud
from app.api.v1.errors import http_error
from app.core.database import get_session
from app.core.exceptions import TeminatError
from app.schemas.bank import BankCreate, BankUpdate, BankRead

router = APIRouter()


@router.get("/banks", response_model=List[BankRead])
def list_banks(
		skip: int = Query(0, ge=0),
		limit: int | None = Query(None, ge=1),
		db: Session = Depends(get_session)
):
	return crud.bank.get_multi(db, skip=skip, limit=limit)


@router.post("/banks", response_model=BankRead, status_code=201)
def create_bank(bank_in: BankCreate, db: Session = Depends(get_session)):
	return crud.bank.create(db, bank_in)


@router.get("/banks/{bank_id}", response_model=BankRead)
def get_bank(bank_id: str, db: Session = Depends(get_session)):
	bank = crud.bank.get(db, bank_id)
	if not bank:
		raise HTTPException(status_code=404, detail="Banka bulunamadı")
	return bank


@router.put("/banks/{bank_id}", response_model=BankRead)
def update_bank(bank_id: str, bank_in: BankUpdate, db: Session = Depends(get_session)):
	bank = crud.bank.get(db, bank_id)
	if not bank:
		raise HTTPException(status_code=404, detail="Banka bulunamadı")
	return crud.bank.update(db, bank, bank_in)


@router.delete("/banks/{bank_id}", status_code=204)
def delete_bank(bank_id: str, db: Session = Depends(get_session)):
	"""
	Deletes a bank. A bank that still has guarantee letters or credits
	is kept and the call answers 409.
	"""
	try:
		bank = crud.bank.get_or_raise(db, bank_id)
		crud.bank.delete(db, bank)
	except TeminatError as e:
		raise http_error(e)
