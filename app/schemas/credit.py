# app/schemas/credit.py
from typing import Optional
from decimal import Decimal
from datetime import date, datetime
from pydantic import BaseModel, Field, computed_field, field_validator

from app.models.credit import CreditStatus
from app.schemas.bank import BankRead
from app.schemas.project import ProjectRead


class CreditBase(BaseModel):
	bank_id: str
	project_id: str
	
	principal_amount: Decimal = Field(ge=0, max_digits=15, decimal_places=2)
	interest_amount: Decimal = Field(ge=0, max_digits=15, decimal_places=2)
	currency: str = Field(min_length=3, max_length=3)
	
	credit_date: date
	maturity_date: date
	
	status: CreditStatus = CreditStatus.DEVAM_EDIYOR
	notes: Optional[str] = None
	
	@field_validator("currency")
	@classmethod
	def upper_currency(cls, value: str) -> str:
		return value.upper()


class CreditCreate(CreditBase):
	pass


class CreditUpdate(BaseModel):
	bank_id: Optional[str] = None
	project_id: Optional[str] = None
	principal_amount: Optional[Decimal] = Field(default=None, ge=0, max_digits=15, decimal_places=2)
	interest_amount: Optional[Decimal] = Field(default=None, ge=0, max_digits=15, decimal_places=2)
	# Accepted only when it does not go below the stored value
	total_repaid_amount: Optional[Decimal] = Field(default=None, ge=0, max_digits=15, decimal_places=2)
	currency: Optional[str] = Field(default=None, min_length=3, max_length=3)
	credit_date: Optional[date] = None
	maturity_date: Optional[date] = None
	status: Optional[CreditStatus] = None
	notes: Optional[str] = None
	
	@field_validator("currency")
	@classmethod
	def upper_currency(cls, value: Optional[str]) -> Optional[str]:
		return value.upper() if value else value


class CreditRead(CreditBase):
	id: str
	total_repaid_amount: Decimal = Decimal("0")
	created_at: Optional[datetime] = None
	updated_at: Optional[datetime] = None
	
	@computed_field
	@property
	def outstanding_amount(self) -> Decimal:
		return self.principal_amount + self.interest_amount - self.total_repaid_amount
	
	class Config:
		from_attributes = True


class CreditWithRelations(CreditRead):
	bank: Optional[BankRead] = None
	project: Optional[ProjectRead] = None


class RepaymentCreate(BaseModel):
	amount: Decimal = Field(gt=0, max_digits=15, decimal_places=2)
