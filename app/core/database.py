import logging

from sqlalchemy import create_engine, event
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session

from app.core.config import settings

logger = logging.getLogger(__name__)


def build_engine(url: str, echo: bool = False):
	"""Creates the engine; SQLite connections get foreign key enforcement."""
	if url.startswith("sqlite"):
		in_memory = url in ("sqlite://", "sqlite:///:memory:")
		engine = create_engine(
			url,
			echo=echo,
			connect_args={"check_same_thread": False},
			poolclass=StaticPool if in_memory else None,
		)

		@event.listens_for(engine, "connect")
		def _enable_foreign_keys(dbapi_connection, connection_record):
			cursor = dbapi_connection.cursor()
			cursor.execute("PRAGMA foreign_keys=ON")
			cursor.close()

		return engine
	return create_engine(url, echo=echo, pool_pre_ping=True)


engine = build_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)


def create_db_and_tables():
	"""Creates the tables if they do not exist."""
	# models must be registered in metadata before create_all
	import app.models  # noqa: F401

	SQLModel.metadata.create_all(engine)
	logger.info("Database tables are ready")


def get_session():
	"""Session generator for FastAPI dependencies."""
	with Session(engine) as session:
		yield session
