# app/crud/base.py
import enum
import logging
from typing import Generic, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlmodel import Session, SQLModel, select

from app.core.exceptions import NotFoundError

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=SQLModel)

# Columns that may be cleared with an explicit null on update
NULLABLE_FIELDS = {"description", "code", "contact_info", "symbol", "expiry_date", "notes"}


def _plain(data: dict) -> dict:
	return {key: value.value if isinstance(value, enum.Enum) else value for key, value in data.items()}


class CRUDBase(Generic[ModelType]):
	"""Plain create/read/update/delete over one table. Commits are last-write-wins."""
	
	def __init__(self, model: Type[ModelType], entity_name: str):
		self.model = model
		self.entity_name = entity_name
	
	def get(self, db: Session, obj_id: str) -> Optional[ModelType]:
		return db.get(self.model, obj_id)
	
	def get_or_raise(self, db: Session, obj_id: str) -> ModelType:
		obj = self.get(db, obj_id)
		if obj is None:
			raise NotFoundError(self.entity_name, obj_id)
		return obj
	
	def get_multi(self, db: Session, skip: int = 0, limit: int | None = None) -> list[ModelType]:
		statement = select(self.model).offset(skip)
		if limit is not None:
			statement = statement.limit(limit)
		return list(db.exec(statement).all())
	
	def create(self, db: Session, obj_in: BaseModel) -> ModelType:
		obj = self.model(**_plain(obj_in.model_dump()))
		saved = self._save(db, obj)
		logger.info("Created %s %s", self.entity_name, saved.id)
		return saved
	
	def update(self, db: Session, obj: ModelType, obj_in: BaseModel) -> ModelType:
		for key, value in _plain(obj_in.model_dump(exclude_unset=True)).items():
			if value is None and key not in NULLABLE_FIELDS:
				continue
			setattr(obj, key, value)
		return self._save(db, obj)
	
	def delete(self, db: Session, obj: ModelType) -> None:
		obj_id = obj.id
		db.delete(obj)
		try:
			db.commit()
		except Exception:
			db.rollback()
			raise
		logger.info("Deleted %s %s", self.entity_name, obj_id)
	
	def _save(self, db: Session, obj: ModelType) -> ModelType:
		db.add(obj)
		try:
			db.commit()
		except Exception:
			db.rollback()
			raise
		db.refresh(obj)
		return obj
