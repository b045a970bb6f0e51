# app/models/project.py
import enum
from typing import Optional, List
from datetime import datetime
from sqlmodel import SQLModel, Field, Relationship
from sqlalchemy import Column, DateTime, Text, func

from .common import new_id


class RecordStatus(str, enum.Enum):
	ACTIVE = "active"
	INACTIVE = "inactive"


class Project(SQLModel, table=True):
	__tablename__ = "projects"
	
	id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
	name: str = Field(max_length=255, index=True)
	description: Optional[str] = Field(default=None, sa_column=Column(Text))
	status: str = Field(default=RecordStatus.ACTIVE.value, max_length=50)
	
	created_at: Optional[datetime] = Field(
		default=None,
		sa_column=Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
	)
	
	# No cascade: a referenced project cannot be deleted
	guarantee_letters: List["GuaranteeLetter"] = Relationship(back_populates="project")
	credits: List["Credit"] = Relationship(back_populates="project")
