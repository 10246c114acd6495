import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import datetime as dt

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from db import get_session
from main import app
from models import Customer, Invoice, Revenue


@pytest.fixture
def engine():
  engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
  )
  SQLModel.metadata.create_all(engine)
  yield engine
  engine.dispose()


@pytest.fixture
def session(engine):
  with Session(engine) as session:
    yield session


@pytest.fixture
def dashboard_rows(session):
  """Three customers (Zoe has no invoices) and eight invoices, one per month of 2023."""
  session.add_all([
    Customer(id="c-amy", name="Amy Burns", email="amy@burns.com", image_url="/customers/amy-burns.png"),
    Customer(id="c-lee", name="Lee Robinson", email="lee@robinson.com", image_url="/customers/lee-robinson.png"),
    Customer(id="c-zoe", name="Zoe Quinn", email="zoe@example.com", image_url="/customers/zoe-quinn.png"),
  ])
  rows = [
    ("inv-01", "c-amy", 1000, "paid"),
    ("inv-02", "c-lee", 2500, "pending"),
    ("inv-03", "c-amy", 3000, "pending"),
    ("inv-04", "c-lee", 4000, "paid"),
    ("inv-05", "c-amy", 5000, "paid"),
    ("inv-06", "c-lee", 6000, "pending"),
    ("inv-07", "c-amy", 7000, "paid"),
    ("inv-08", "c-lee", 8000, "pending"),
  ]
  session.add_all([
    Invoice(id=inv_id, customer_id=customer_id, amount=amount, status=status, date=dt.date(2023, month, 10))
    for month, (inv_id, customer_id, amount, status) in enumerate(rows, start=1)
  ])
  session.add_all([
    Revenue(month="Jan", revenue=2000),
    Revenue(month="Feb", revenue=1800),
    Revenue(month="Mar", revenue=2200),
  ])
  session.commit()
  return session


@pytest.fixture
def client(engine):
  def _session_override():
    with Session(engine) as session:
      yield session

  app.dependency_overrides[get_session] = _session_override
  yield TestClient(app)
  app.dependency_overrides.clear()
