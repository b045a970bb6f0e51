# app/services/formatter.py
from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Mapping, NamedTuple

from app.services.converter import to_decimal

CENT = Decimal("0.01")


class LocaleConventions(NamedTuple):
	group: str
	decimal: str
	symbol_first: bool


# Separators per display locale
LOCALES = {
	"tr_TR": LocaleConventions(group=".", decimal=",", symbol_first=True),
	"en_US": LocaleConventions(group=",", decimal=".", symbol_first=True),
	"en_GB": LocaleConventions(group=",", decimal=".", symbol_first=True),
	"de_DE": LocaleConventions(group=".", decimal=",", symbol_first=False),
}


def format_number(amount, locale: str = "tr_TR") -> str:
	conv = LOCALES.get(locale, LOCALES["tr_TR"])
	value = to_decimal(amount).quantize(CENT, ROUND_HALF_UP)
	# Python always groups with "," and separates with "."
	text = "{:,.2f}".format(abs(value))
	text = text.replace(",", "\0").replace(".", conv.decimal).replace("\0", conv.group)
	return f"-{text}" if value < 0 else text


def format_percentage(value) -> str:
	return "%{:.2f}".format(to_decimal(value).quantize(CENT, ROUND_HALF_UP))


def format_date(value) -> str:
	"""dd.mm.yyyy as the Turkish locale prints dates; empty dates become '-'."""
	if value is None or value == "":
		return "-"
	if isinstance(value, str):
		try:
			value = date.fromisoformat(value[:10])
		except ValueError:
			return "-"
	if isinstance(value, datetime):
		value = value.date()
	return value.strftime("%d.%m.%Y")


class CurrencyFormatter:
	"""Renders amounts with locale separators and the configured currency symbol."""
	
	def __init__(self, symbols: Mapping[str, str | None] | None = None, locale: str = "tr_TR"):
		self.symbols = {code.upper(): symbol for code, symbol in (symbols or {}).items()}
		self.locale = locale
	
	@classmethod
	def from_currencies(cls, currencies: Iterable, locale: str = "tr_TR") -> "CurrencyFormatter":
		symbols = {}
		for currency in currencies:
			if isinstance(currency, Mapping):
				symbols[currency["code"]] = currency.get("symbol")
			else:
				symbols[currency.code] = currency.symbol
		return cls(symbols, locale)
	
	def symbol_for(self, currency_code: str) -> str | None:
		return self.symbols.get((currency_code or "").upper())
	
	def format(self, amount, currency_code: str) -> str:
		number = format_number(amount, self.locale)
		symbol = self.symbol_for(currency_code)
		if not symbol:
			return f"{number} {(currency_code or '').upper()}".rstrip()
		
		conv = LOCALES.get(self.locale, LOCALES["tr_TR"])
		if not conv.symbol_first:
			return f"{number} {symbol}"
		if number.startswith("-"):
			return f"-{symbol}{number[1:]}"
		return f"{symbol}{number}"
