# app/api/v1/endpoints/credits.py
from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from app import crud
from app.api.v1.errors import http_error
from app.core.database import get_session
from app.core.exceptions import TeminatError
from app.schemas.credit import CreditCreate, CreditUpdate, CreditRead, CreditWithRelations, RepaymentCreate

router = APIRouter()


@router.get("/credits", response_model=List[CreditRead])
def list_credits(db: Session = Depends(get_session)):
	return crud.credit.get_multi(db)


@router.get("/credits/with-relations", response_model=List[CreditWithRelations])
def list_credits_with_relations(db: Session = Depends(get_session)):
	return crud.credit.list_with_relations(db)


@router.post("/credits", response_model=CreditRead, status_code=201)
def create_credit(credit_in: CreditCreate, db: Session = Depends(get_session)):
	try:
		return crud.credit.create(db, credit_in)
	except TeminatError as e:
		raise http_error(e)


@router.get("/credits/{credit_id}", response_model=CreditWithRelations)
def get_credit(credit_id: str, db: Session = Depends(get_session)):
	credit = crud.credit.get(db, credit_id)
	if not credit:
		raise HTTPException(status_code=404, detail="Kredi bulunamadı")
	return credit


@router.put("/credits/{credit_id}", response_model=CreditRead)
def update_credit(credit_id: str, credit_in: CreditUpdate, db: Session = Depends(get_session)):
	try:
		credit = crud.credit.get_or_raise(db, credit_id)
		return crud.credit.update(db, credit, credit_in)
	except TeminatError as e:
		raise http_error(e)


@router.post("/credits/{credit_id}/repayments", response_model=CreditRead)
def add_repayment(credit_id: str, repayment: RepaymentCreate, db: Session = Depends(get_session)):
	"""Adds a repayment to total_repaid_amount, which never goes down."""
	try:
		credit = crud.credit.get_or_raise(db, credit_id)
		return crud.credit.record_repayment(db, credit, repayment.amount)
	except TeminatError as e:
		raise http_error(e)


@router.delete("/credits/{credit_id}", status_code=204)
def delete_credit(credit_id: str, db: Session = Depends(get_session)):
	credit = crud.credit.get(db, credit_id)
	if not credit:
		raise HTTPException(status_code=404, detail="Kredi bulunamadı")
	crud.credit.delete(db, credit)
