# app/models/guarantee.py
import enum
from typing import Optional
from decimal import Decimal
from datetime import date, datetime
from sqlmodel import SQLModel, Field, Relationship
from sqlalchemy import Column, DateTime, Text, func

from .common import new_id


class LetterType(str, enum.Enum):
	TEMINAT = "teminat"
	AVANS = "avans"
	KESIN_TEMINAT = "kesin-teminat"
	GECICI_TEMINAT = "gecici-teminat"


class LetterStatus(str, enum.Enum):
	AKTIF = "aktif"
	BEKLEMEDE = "beklemede"
	KAPALI = "kapali"
	IPTAL = "iptal"


class GuaranteeLetter(SQLModel, table=True):
	__tablename__ = "guarantee_letters"
	
	id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
	bank_id: str = Field(foreign_key="banks.id", index=True, max_length=36)
	project_id: str = Field(foreign_key="projects.id", index=True, max_length=36)
	
	letter_type: str = Field(max_length=50)
	
	# --- Amounts ---
	contract_amount: Decimal = Field(max_digits=15, decimal_places=2)
	letter_percentage: Decimal = Field(max_digits=5, decimal_places=2)
	# Stored as entered, not recomputed from contract_amount * letter_percentage
	letter_amount: Decimal = Field(max_digits=15, decimal_places=2)
	commission_rate: Decimal = Field(max_digits=5, decimal_places=2)
	bsmv_and_other_costs: Decimal = Field(default=Decimal("0"), max_digits=15, decimal_places=2)
	currency: str = Field(max_length=3)
	
	# --- Dates ---
	purchase_date: date
	letter_date: date
	expiry_date: Optional[date] = None
	
	status: str = Field(default=LetterStatus.AKTIF.value, max_length=50)
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
	
	bank: "Bank" = Relationship(back_populates="guarantee_letters")
	project: "Project" = Relationship(back_populates="guarantee_letters")
