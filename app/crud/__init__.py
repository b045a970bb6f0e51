from .crud_reference import project, bank
from .crud_currency import currency, exchange_rate
from .crud_records import guarantee_letter, credit

__all__ = ["project", "bank", "currency", "exchange_rate", "guarantee_letter", "credit"]
