# app/crud/crud_reference.py
from sqlmodel import Session, select, func

from app.core.exceptions import ReferenceInUseError
from app.crud.base import CRUDBase
from app.models import Project, Bank, GuaranteeLetter, Credit


class CRUDReferenced(CRUDBase):
	"""Projects and banks: deleting one that letters or credits still point at is rejected."""
	
	def __init__(self, model, entity_name: str, fk_name: str):
		super().__init__(model, entity_name)
		self.fk_name = fk_name
	
	def count_references(self, db: Session, obj_id: str) -> tuple[int, int]:
		letters = db.exec(
			select(func.count(GuaranteeLetter.id)).where(getattr(GuaranteeLetter, self.fk_name) == obj_id)
		).one()
		credits = db.exec(
			select(func.count(Credit.id)).where(getattr(Credit, self.fk_name) == obj_id)
		).one()
		return letters, credits
	
	def delete(self, db: Session, obj) -> None:
		letters, credits = self.count_references(db, obj.id)
		if letters or credits:
			raise ReferenceInUseError(self.entity_name, obj.id, letters, credits)
		super().delete(db, obj)


project = CRUDReferenced(Project, "Project", "project_id")
bank = CRUDReferenced(Bank, "Bank", "bank_id")
