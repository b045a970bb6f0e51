from .project import ProjectCreate, ProjectUpdate, ProjectRead
from .bank import BankCreate, BankUpdate, BankRead
from .currency import (CurrencyCreate, CurrencyUpdate, CurrencyRead, ExchangeRateCreate,
                       ExchangeRateRead, ConversionResponse)
from .guarantee import (GuaranteeLetterCreate, GuaranteeLetterUpdate, GuaranteeLetterRead,
                        GuaranteeLetterWithRelations)
from .credit import CreditCreate, CreditUpdate, CreditRead, CreditWithRelations, RepaymentCreate
from .grid import GridColumn, GridResponse, AmountSummary, SidebarResponse, SidebarItem

__all__ = ["ProjectCreate", "ProjectUpdate", "ProjectRead", "BankCreate", "BankUpdate", "BankRead",
           "CurrencyCreate", "CurrencyUpdate", "CurrencyRead", "ExchangeRateCreate", "ExchangeRateRead",
           "ConversionResponse", "GuaranteeLetterCreate", "GuaranteeLetterUpdate", "GuaranteeLetterRead",
           "GuaranteeLetterWithRelations", "CreditCreate", "CreditUpdate", "CreditRead",
           "CreditWithRelations", "RepaymentCreate", "GridColumn", "GridResponse", "AmountSummary",
           "SidebarResponse", "SidebarItem"]
