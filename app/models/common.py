# app/models/common.py
import uuid


def new_id() -> str:
	"""UUID primary key generated at insert time (36 chars)."""
	return str(uuid.uuid4())
