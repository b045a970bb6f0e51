# app/models/bank.py
from typing import Optional, List
from datetime import datetime
from sqlmodel import SQLModel, Field, Relationship
from sqlalchemy import Column, DateTime, Text, func

from .common import new_id
from .project import RecordStatus


class Bank(SQLModel, table=True):
	__tablename__ = "banks"
	
	id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
	name: str = Field(max_length=255, index=True)
	code: Optional[str] = Field(default=None, max_length=50)  # EFT / şube kodu
	contact_info: Optional[str] = Field(default=None, sa_column=Column(Text))
	status: str = Field(default=RecordStatus.ACTIVE.value, max_length=50)
	
	created_at: Optional[datetime] = Field(
		default=None,
		sa_column=Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
	)
	
	guarantee_letters: List["GuaranteeLetter"] = Relationship(back_populates="bank")
	credits: List["Credit"] = Relationship(back_populates="bank")
