# app/schemas/bank.py
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field

from app.models.project import RecordStatus


class BankBase(BaseModel):
	name: str = Field(min_length=1, max_length=255)
	code: Optional[str] = Field(default=None, max_length=50)
	contact_info: Optional[str] = None
	status: RecordStatus = RecordStatus.ACTIVE


class BankCreate(BankBase):
	pass


class BankUpdate(BaseModel):
	name: Optional[str] = Field(default=None, min_length=1, max_length=255)
	code: Optional[str] = Field(default=None, max_length=50)
	contact_info: Optional[str] = None
	status: Optional[RecordStatus] = None


class BankRead(BankBase):
	id: str
	created_at: Optional[datetime] = None
	
	class Config:
		from_attributes = True
