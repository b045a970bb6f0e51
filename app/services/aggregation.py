# app/services/aggregation.py
import logging
from collections import Counter
from decimal import Decimal
from typing import Iterable, Optional

from app.schemas.grid import AmountSummary
from app.services.converter import CurrencyConverter, to_decimal
from app.services.formatter import CurrencyFormatter
from app.services.grid import field_value

logger = logging.getLogger(__name__)


def summarize_amounts(records: Iterable, field: str, target_currency: Optional[str],
                      converter: CurrencyConverter,
                      formatter: CurrencyFormatter | None = None) -> AmountSummary:
	"""
	Totals one amount column in the target currency.
	
	Rows whose pair has no rate, or whose amount cannot be converted, are kept
	apart and summed in their own currency.
	Without a target currency every row is summed per native currency.
	"""
	converted_total = Decimal("0.00")
	unconverted: dict[str, Decimal] = {}
	
	for record in records:
		amount = to_decimal(field_value(record, field))
		native = (field_value(record, "currency") or "").upper()
		if target_currency:
			try:
				result = converter.convert_or_fallback(amount, native, target_currency)
			except (ArithmeticError, ValueError) as exc:
				logger.warning("Could not convert %s %s for the %s total: %s", amount, native, field, exc)
			else:
				if result.converted:
					converted_total += result.amount
					continue
		unconverted[native] = unconverted.get(native, Decimal("0.00")) + amount
	
	summary = AmountSummary(
		field=field,
		target_currency=target_currency,
		converted_total=converted_total,
		unconverted_totals=unconverted,
	)
	if formatter and target_currency:
		summary.converted_total_formatted = formatter.format(converted_total, target_currency)
	return summary


def count_by(records: Iterable, key: str) -> Counter:
	"""Record counts per bank_id / project_id for the sidebar badges."""
	return Counter(field_value(record, key) for record in records)
