import os

# In-memory database for the whole test session; must be set before app.core.config loads
os.environ["DATABASE_URL"] = "sqlite://"

from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlmodel import SQLModel, Session

import app.models  # noqa: F401
from app.core.database import build_engine, get_session
from app.models import Bank, Project, Currency, ExchangeRate, GuaranteeLetter, Credit
from main import app as fastapi_app


@pytest.fixture
def engine():
	engine = build_engine("sqlite://")
	SQLModel.metadata.create_all(engine)
	yield engine
	engine.dispose()


@pytest.fixture
def session(engine):
	with Session(engine) as session:
		yield session


@pytest.fixture
def client(session):
	def override_session():
		yield session
	
	fastapi_app.dependency_overrides[get_session] = override_session
	yield TestClient(fastapi_app)
	fastapi_app.dependency_overrides.clear()


@pytest.fixture
def seeded(session):
	"""Two projects, two banks, TRY/USD/EUR, USD->TRY and EUR->TRY rates."""
	p1 = Project(name="Ankara Metro")
	p2 = Project(name="İzmir Köprü")
	b1 = Bank(name="Ziraat Bankası", code="0010")
	b2 = Bank(name="Garanti BBVA", code="0062")
	session.add_all([p1, p2, b1, b2])
	session.add_all([
		Currency(code="TRY", name="Türk Lirası", symbol="₺"),
		Currency(code="USD", name="Amerikan Doları", symbol="$"),
		Currency(code="EUR", name="Euro", symbol="€"),
		ExchangeRate(from_currency="USD", to_currency="TRY", rate=Decimal("32.500000")),
		ExchangeRate(from_currency="EUR", to_currency="TRY", rate=Decimal("35.000000")),
	])
	session.commit()
	for obj in (p1, p2, b1, b2):
		session.refresh(obj)
	return {"p1": p1, "p2": p2, "b1": b1, "b2": b2}


def _letter(bank, project, **overrides) -> GuaranteeLetter:
	values = dict(
		bank_id=bank.id,
		project_id=project.id,
		letter_type="kesin-teminat",
		contract_amount=Decimal("1000000.00"),
		letter_percentage=Decimal("6.00"),
		letter_amount=Decimal("60000.00"),
		commission_rate=Decimal("1.50"),
		currency="TRY",
		purchase_date=date(2024, 3, 1),
		letter_date=date(2024, 3, 15),
	)
	values.update(overrides)
	return GuaranteeLetter(**values)


def _credit(bank, project, **overrides) -> Credit:
	values = dict(
		bank_id=bank.id,
		project_id=project.id,
		principal_amount=Decimal("500000.00"),
		interest_amount=Decimal("75000.00"),
		currency="TRY",
		credit_date=date(2024, 1, 10),
		maturity_date=date(2025, 1, 10),
	)
	values.update(overrides)
	return Credit(**values)


@pytest.fixture
def make_letter():
	return _letter


@pytest.fixture
def make_credit():
	return _credit
