# app/services/converter.py
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import NamedTuple

from app.core.exceptions import RateNotFoundError
from app.services.rate_table import RateTable

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")


class ConvertedAmount(NamedTuple):
	amount: Decimal
	currency: str
	converted: bool


def to_decimal(value) -> Decimal:
	"""Absent or malformed numbers count as zero for display."""
	if value is None or value == "":
		return Decimal("0")
	if isinstance(value, Decimal):
		return value if value.is_finite() else Decimal("0")
	try:
		result = Decimal(str(value).strip())
	except ArithmeticError:
		logger.warning("Malformed amount %r treated as zero", value)
		return Decimal("0")
	return result if result.is_finite() else Decimal("0")


class CurrencyConverter:
	def __init__(self, rate_table: RateTable):
		self.rate_table = rate_table
	
	def convert(self, amount: Decimal, from_code: str, to_code: str) -> Decimal:
		"""
		Converts an amount with the rate of the (from_code, to_code) pair.
		
		Same currency returns the amount untouched. Otherwise the product is
		rounded half-up to 2 places. Raises RateNotFoundError for a missing pair.
		"""
		if from_code.upper() == to_code.upper():
			return amount
		
		amount = to_decimal(amount)
		if amount < 0:
			raise ValueError(f"amount must be non-negative: {amount}")
		
		rate = self.rate_table.rate_for(from_code, to_code)
		return (amount * rate).quantize(CENT, ROUND_HALF_UP)
	
	def convert_or_fallback(self, amount, from_code: str, to_code: str) -> ConvertedAmount:
		"""Never raises for a missing pair: keeps the native amount and currency."""
		value = to_decimal(amount)
		try:
			return ConvertedAmount(self.convert(value, from_code, to_code), to_code.upper(), True)
		except RateNotFoundError:
			logger.info("No rate for %s -> %s, showing native amount", from_code, to_code)
			return ConvertedAmount(value, from_code.upper(), False)
