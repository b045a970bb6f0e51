# app/models/credit.py
import enum
from typing import Optional
from decimal import Decimal
from datetime import date, datetime
from sqlmodel import SQLModel, Field, Relationship
from sqlalchemy import Column, DateTime, Text, func

from .common import new_id


class CreditStatus(str, enum.Enum):
	DEVAM_EDIYOR = "devam-ediyor"
	KAPALI = "kapali"
	IPTAL = "iptal"


class Credit(SQLModel, table=True):
	__tablename__ = "credits"
	
	id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
	bank_id: str = Field(foreign_key="banks.id", index=True, max_length=36)
	project_id: str = Field(foreign_key="projects.id", index=True, max_length=36)
	
	principal_amount: Decimal = Field(max_digits=15, decimal_places=2)
	interest_amount: Decimal = Field(max_digits=15, decimal_places=2)
	# Only grows, see crud.credit.record_repayment
	total_repaid_amount: Decimal = Field(default=Decimal("0"), max_digits=15, decimal_places=2)
	currency: str = Field(max_length=3)
	
	credit_date: date
	maturity_date: date
	
	status: str = Field(default=CreditStatus.DEVAM_EDIYOR.value, max_length=50)
	notes: Optional[str] = Field(default=None, sa_column=Column(Text))
	
	created_at: Optional[datetime] = Field(
		default=None,
		sa_column=Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
	)
	updated_at: Optional[datetime] = Field(
		default=None,
		sa_column=Column(
			DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
		)
	)
	
	bank: "Bank" = Relationship(back_populates="credits")
	project: "Project" = Relationship(back_populates="credits")
