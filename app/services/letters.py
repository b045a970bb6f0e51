# app/services/letters.py
from decimal import Decimal, ROUND_HALF_UP

CENT = Decimal("0.01")


def expected_letter_amount(contract_amount: Decimal, letter_percentage: Decimal) -> Decimal:
	"""contract_amount * letter_percentage / 100, rounded half-up to cents."""
	return (Decimal(contract_amount) * Decimal(letter_percentage) / Decimal("100")).quantize(
		CENT, ROUND_HALF_UP
	)


def letter_amount_matches(contract_amount, letter_percentage, letter_amount) -> bool:
	"""
	Checks the nominal relation between the three stored amounts.
	Letters are stored as entered, so a mismatch is reported and never corrected.
	"""
	if contract_amount is None or letter_percentage is None or letter_amount is None:
		return False
	expected = expected_letter_amount(contract_amount, letter_percentage)
	return expected == Decimal(letter_amount).quantize(CENT, ROUND_HALF_UP)
