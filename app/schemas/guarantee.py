# app/schemas/guarantee.py
from typing import Optional
from decimal import Decimal
from datetime import date, datetime
from pydantic import BaseModel, Field, computed_field, field_validator

from app.models.guarantee import LetterType, LetterStatus
from app.schemas.bank import BankRead
from app.schemas.project import ProjectRead
from app.services.letters import letter_amount_matches


class GuaranteeLetterBase(BaseModel):
	bank_id: str
	project_id: str
	letter_type: LetterType
	
	contract_amount: Decimal = Field(ge=0, max_digits=15, decimal_places=2)
	letter_percentage: Decimal = Field(ge=0, le=100, max_digits=5, decimal_places=2)
	letter_amount: Decimal = Field(ge=0, max_digits=15, decimal_places=2)
	commission_rate: Decimal = Field(ge=0, max_digits=5, decimal_places=2)
	bsmv_and_other_costs: Decimal = Field(default=Decimal("0"), ge=0, max_digits=15, decimal_places=2)
	currency: str = Field(min_length=3, max_length=3)
	
	purchase_date: date
	letter_date: date
	expiry_date: Optional[date] = None
	
	status: LetterStatus = LetterStatus.AKTIF
	notes: Optional[str] = None
	
	@field_validator("currency")
	@classmethod
	def upper_currency(cls, value: str) -> str:
		return value.upper()


class GuaranteeLetterCreate(GuaranteeLetterBase):
	pass


class GuaranteeLetterUpdate(BaseModel):
	bank_id: Optional[str] = None
	project_id: Optional[str] = None
	letter_type: Optional[LetterType] = None
	contract_amount: Optional[Decimal] = Field(default=None, ge=0, max_digits=15, decimal_places=2)
	letter_percentage: Optional[Decimal] = Field(default=None, ge=0, le=100, max_digits=5, decimal_places=2)
	letter_amount: Optional[Decimal] = Field(default=None, ge=0, max_digits=15, decimal_places=2)
	commission_rate: Optional[Decimal] = Field(default=None, ge=0, max_digits=5, decimal_places=2)
	bsmv_and_other_costs: Optional[Decimal] = Field(default=None, ge=0, max_digits=15, decimal_places=2)
	currency: Optional[str] = Field(default=None, min_length=3, max_length=3)
	purchase_date: Optional[date] = None
	letter_date: Optional[date] = None
	expiry_date: Optional[date] = None
	status: Optional[LetterStatus] = None
	notes: Optional[str] = None
	
	@field_validator("currency")
	@classmethod
	def upper_currency(cls, value: Optional[str]) -> Optional[str]:
		return value.upper() if value else value


class GuaranteeLetterRead(GuaranteeLetterBase):
	id: str
	created_at: Optional[datetime] = None
	updated_at: Optional[datetime] = None
	
	@computed_field
	@property
	def letter_amount_matches(self) -> bool:
		return letter_amount_matches(self.contract_amount, self.letter_percentage, self.letter_amount)
	
	class Config:
		from_attributes = True


class GuaranteeLetterWithRelations(GuaranteeLetterRead):
	bank: Optional[BankRead] = None
	project: Optional[ProjectRead] = None
