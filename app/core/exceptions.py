# app/core/exceptions.py


class TeminatError(Exception):
	"""Base class for domain errors raised by services and crud."""


class NotFoundError(TeminatError):
	def __init__(self, entity: str, entity_id: str):
		self.entity = entity
		self.entity_id = entity_id
		super().__init__(f"{entity} not found: {entity_id}")


class ReferenceInUseError(TeminatError):
	"""A project or bank still referenced by letters or credits."""

	def __init__(self, entity: str, entity_id: str, letters: int, credits: int):
		self.entity = entity
		self.entity_id = entity_id
		self.letters = letters
		self.credits = credits
		super().__init__(
			f"{entity} {entity_id} is referenced by {letters} guarantee letter(s) "
			f"and {credits} credit(s)"
		)


class DuplicateCurrencyError(TeminatError):
	def __init__(self, code: str):
		self.code = code
		super().__init__(f"Currency code already exists: {code}")


class InvalidRepaymentError(TeminatError):
	pass


class RateNotFoundError(TeminatError):
	"""No exchange rate row for the ordered (source, target) pair."""

	def __init__(self, from_code: str, to_code: str):
		self.from_code = from_code
		self.to_code = to_code
		super().__init__(f"Exchange rate not found: {from_code} -> {to_code}")
