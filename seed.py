# seed.py
import logging
from datetime import date

from sqlmodel import Session, select

from models import Customer, Invoice, Revenue

logger = logging.getLogger(__name__)

REVENUE_BY_MONTH = [
  ("Jan", 2000), ("Feb", 1800), ("Mar", 2200), ("Apr", 2500),
  ("May", 2300), ("Jun", 3200), ("Jul", 3500), ("Aug", 3700),
  ("Sep", 2500), ("Oct", 2800), ("Nov", 3000), ("Dec", 4800),
]

def seed_if_empty(session: Session) -> bool:
  """Insert placeholder dashboard rows unless invoices already exist."""
  any_invoice = session.exec(select(Invoice)).first()
  if any_invoice:
    return False

  session.add_all([
    Customer(id="CUST-001", name="Delba de Oliveira", email="delba@oliveira.com", image_url="/customers/delba-de-oliveira.png"),
    Customer(id="CUST-002", name="Lee Robinson", email="lee@robinson.com", image_url="/customers/lee-robinson.png"),
    Customer(id="CUST-003", name="Michael Novotny", email="michael@novotny.com", image_url="/customers/michael-novotny.png"),
    Customer(id="CUST-004", name="Amy Burns", email="amy@burns.com", image_url="/customers/amy-burns.png"),
  ])
  # customers must exist before their invoices
  session.flush()

  session.add_all([
    Invoice(id="INV-1001", customer_id="CUST-001", amount=15795, status="pending", date=date(2022, 12, 6)),
    Invoice(id="INV-1002", customer_id="CUST-002", amount=20348, status="pending", date=date(2022, 11, 14)),
    Invoice(id="INV-1003", customer_id="CUST-003", amount=3040, status="paid", date=date(2022, 10, 29)),
    Invoice(id="INV-1004", customer_id="CUST-004", amount=44800, status="paid", date=date(2023, 9, 10)),
    Invoice(id="INV-1005", customer_id="CUST-001", amount=34577, status="pending", date=date(2023, 8, 5)),
    Invoice(id="INV-1006", customer_id="CUST-002", amount=54246, status="pending", date=date(2023, 7, 16)),
    Invoice(id="INV-1007", customer_id="CUST-003", amount=666, status="pending", date=date(2023, 6, 27)),
    Invoice(id="INV-1008", customer_id="CUST-004", amount=32545, status="paid", date=date(2023, 6, 9)),
  ])

  session.add_all([Revenue(month=month, revenue=amount) for month, amount in REVENUE_BY_MONTH])

  session.commit()
  logger.info("Seeded placeholder customers, invoices and revenue")
  return True
