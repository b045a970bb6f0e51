import logging
from sqlmodel import Session, select, func

from app.core.config import settings
from app.core.database import engine, create_db_and_tables
from app.models.currency import Currency

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

DEFAULT_CURRENCIES = [
	{"code": "TRY", "name": "Türk Lirası", "symbol": "₺"},
	{"code": "USD", "name": "Amerikan Doları", "symbol": "$"},
	{"code": "EUR", "name": "Euro", "symbol": "€"},
	{"code": "GBP", "name": "İngiliz Sterlini", "symbol": "£"},
]


def seed_currencies(session: Session) -> int:
	"""Adds the default currencies when the table is empty. Returns how many were added."""
	count = session.exec(select(func.count(Currency.id))).one()
	if count > 0:
		logger.info("%d currencies already present, skipping seed", count)
		return 0
	
	for item in DEFAULT_CURRENCIES:
		session.add(Currency(**item))
	session.commit()
	logger.info("Seeded %d currencies", len(DEFAULT_CURRENCIES))
	return len(DEFAULT_CURRENCIES)


def main():
	logger.info("Checking database state...")
	create_db_and_tables()
	
	with Session(engine) as session:
		seed_currencies(session)
	
	logger.info("Database initialization finished")


if __name__ == "__main__":
	main()
