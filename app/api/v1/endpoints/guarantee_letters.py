# app/api/v1/endpoints/guarantee_letters.py
from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from app import crud
from app.api.v1.errors import http_error
from app.core.database import get_session
from app.core.exceptions import TeminatError
from app.schemas.guarantee import (
	GuaranteeLetterCreate, GuaranteeLetterUpdate, GuaranteeLetterRead, GuaranteeLetterWithRelations,
)

router = APIRouter()


@router.get("/guarantee-letters", response_model=List[GuaranteeLetterRead])
def list_letters(db: Session = Depends(get_session)):
	return crud.guarantee_letter.get_multi(db)


@router.get("/guarantee-letters/with-relations", response_model=List[GuaranteeLetterWithRelations])
def list_letters_with_relations(db: Session = Depends(get_session)):
	"""Letters with their bank and project embedded."""
	return crud.guarantee_letter.list_with_relations(db)


@router.post("/guarantee-letters", response_model=GuaranteeLetterRead, status_code=201)
def create_letter(letter_in: GuaranteeLetterCreate, db: Session = Depends(get_session)):
	"""
	Records a guarantee letter. letter_amount is stored as entered; the
	response field letter_amount_matches tells whether it equals
	contract_amount * letter_percentage / 100.
	"""
	try:
		return crud.guarantee_letter.create(db, letter_in)
	except TeminatError as e:
		raise http_error(e)


@router.get("/guarantee-letters/{letter_id}", response_model=GuaranteeLetterWithRelations)
def get_letter(letter_id: str, db: Session = Depends(get_session)):
	letter = crud.guarantee_letter.get(db, letter_id)
	if not letter:
		raise HTTPException(status_code=404, detail="Teminat mektubu bulunamadı")
	return letter


@router.put("/guarantee-letters/{letter_id}", response_model=GuaranteeLetterRead)
def update_letter(letter_id: str, letter_in: GuaranteeLetterUpdate, db: Session = Depends(get_session)):
	# No version check: concurrent edits are last-write-wins
	try:
		letter = crud.guarantee_letter.get_or_raise(db, letter_id)
		return crud.guarantee_letter.update(db, letter, letter_in)
	except TeminatError as e:
		raise http_error(e)


@router.delete("/guarantee-letters/{letter_id}", status_code=204)
def delete_letter(letter_id: str, db: Session = Depends(get_session)):
	letter = crud.guarantee_letter.get(db, letter_id)
	if not letter:
		raise HTTPException(status_code=404, detail="Teminat mektubu bulunamadı")
	crud.guarantee_letter.delete(db, letter)
