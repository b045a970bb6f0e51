# app/models/__init__.py
# Model imports register every table in the ORM metadata
from .project import Project, RecordStatus
from .bank import Bank
from .currency import Currency, ExchangeRate
from .guarantee import GuaranteeLetter, LetterType, LetterStatus
from .credit import Credit, CreditStatus

__all__ = ["Project", "RecordStatus", "Bank", "Currency", "ExchangeRate",
           "GuaranteeLetter", "LetterType", "LetterStatus", "Credit", "CreditStatus"]
