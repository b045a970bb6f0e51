# app/crud/crud_records.py
import logging
from decimal import Decimal
from sqlalchemy.orm import selectinload
from sqlmodel import Session, select

from app.core.exceptions import InvalidRepaymentError, NotFoundError
from app.crud.base import CRUDBase
from app.models import Bank, Project, GuaranteeLetter, Credit

logger = logging.getLogger(__name__)


class CRUDRecord(CRUDBase):
	"""Guarantee letters and credits: both point at exactly one bank and one project."""
	
	def check_references(self, db: Session, bank_id: str | None, project_id: str | None) -> None:
		if bank_id is not None and db.get(Bank, bank_id) is None:
			raise NotFoundError("Bank", bank_id)
		if project_id is not None and db.get(Project, project_id) is None:
			raise NotFoundError("Project", project_id)
	
	def create(self, db: Session, obj_in):
		self.check_references(db, obj_in.bank_id, obj_in.project_id)
		return super().create(db, obj_in)
	
	def update(self, db: Session, obj, obj_in):
		changes = obj_in.model_dump(exclude_unset=True)
		self.check_references(db, changes.get("bank_id"), changes.get("project_id"))
		return super().update(db, obj, obj_in)
	
	def list_with_relations(self, db: Session) -> list:
		# Eager loading avoids N+1 queries for bank and project
		statement = select(self.model).options(
			selectinload(self.model.bank), selectinload(self.model.project)
		)
		return list(db.exec(statement).all())


class CRUDCredit(CRUDRecord):
	def update(self, db: Session, obj: Credit, obj_in):
		changes = obj_in.model_dump(exclude_unset=True)
		new_total = changes.get("total_repaid_amount")
		if new_total is not None and Decimal(new_total) < Decimal(obj.total_repaid_amount or 0):
			raise InvalidRepaymentError(
				f"total_repaid_amount cannot decrease ({obj.total_repaid_amount} -> {new_total})"
			)
		return super().update(db, obj, obj_in)
	
	def record_repayment(self, db: Session, obj: Credit, amount: Decimal) -> Credit:
		if amount <= 0:
			raise InvalidRepaymentError(f"repayment must be positive: {amount}")
		obj.total_repaid_amount = Decimal(obj.total_repaid_amount or 0) + amount
		logger.info("Credit %s repaid %s %s (total %s)", obj.id, amount, obj.currency, obj.total_repaid_amount)
		return self._save(db, obj)


guarantee_letter = CRUDRecord(GuaranteeLetter, "GuaranteeLetter")
credit = CRUDCredit(Credit, "Credit")
