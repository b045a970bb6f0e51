# app/schemas/project.py
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field

from app.models.project import RecordStatus


class ProjectBase(BaseModel):
	name: str = Field(min_length=1, max_length=255)
	description: Optional[str] = None
	status: RecordStatus = RecordStatus.ACTIVE


class ProjectCreate(ProjectBase):
	pass


class ProjectUpdate(BaseModel):
	name: Optional[str] = Field(default=None, min_length=1, max_length=255)
	description: Optional[str] = None
	status: Optional[RecordStatus] = None


class ProjectRead(ProjectBase):
	id: str
	created_at: Optional[datetime] = None
	
	class Config:
		from_attributes = True
