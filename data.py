# data.py
"""
Query functions behind the dashboard pages.

Each function runs against the caller's session, reshapes the rows and formats
money for display. Any failure is logged with its cause and re-raised as a
FetchError carrying a fixed, caller-safe message.
"""
import logging
import math
from contextlib import contextmanager
from typing import Iterator, List, Optional

from sqlalchemy import String, case, cast, func, or_
from sqlmodel import Session, col, select

from models import (
  CardData,
  Customer,
  CustomerField,
  CustomersTableRow,
  Invoice,
  InvoiceCustomer,
  InvoiceForm,
  InvoicesTableRow,
  LatestInvoice,
  Revenue,
  RevenuePoint,
)
from utils import format_currency

logger = logging.getLogger(__name__)

ITEMS_PER_PAGE = 6
LATEST_INVOICES_LIMIT = 5


class FetchError(Exception):
  """Raised by every query function; the original error is kept as __cause__."""


@contextmanager
def _fetching(message: str) -> Iterator[None]:
  try:
    yield
  except Exception as exc:
    logger.exception("Database error (%s)", message)
    raise FetchError(message) from exc


def _sum_where_status(status: str):
  return func.sum(case((col(Invoice.status) == status, col(Invoice.amount)), else_=0))


def _invoice_filter(query: str):
  pattern = f"%{query}%"
  return or_(
    col(Customer.name).ilike(pattern),
    col(Customer.email).ilike(pattern),
    cast(Invoice.amount, String).ilike(pattern),
    cast(Invoice.date, String).ilike(pattern),
    col(Invoice.status).ilike(pattern),
  )


def fetch_revenue(session: Session) -> List[RevenuePoint]:
  with _fetching("Failed to fetch revenue data."):
    rows = session.exec(select(Revenue).order_by(col(Revenue.id))).all()
    if not rows:
      raise LookupError("no rows found in the revenue table")
    return [RevenuePoint(month=r.month, revenue=r.revenue) for r in rows]


def fetch_latest_invoices(session: Session) -> List[LatestInvoice]:
  with _fetching("Failed to fetch the latest invoices."):
    stmt = (
      select(Invoice, Customer)
      .outerjoin(Customer, col(Invoice.customer_id) == col(Customer.id))
      .order_by(col(Invoice.date).desc())
      .limit(LATEST_INVOICES_LIMIT)
    )
    latest = []
    for invoice, customer in session.exec(stmt).all():
      latest.append(LatestInvoice(
        id=invoice.id,
        name=customer.name if customer else None,
        email=customer.email if customer else None,
        image_url=customer.image_url if customer else None,
        amount=format_currency(invoice.amount),
      ))
    return latest


def fetch_card_data(session: Session) -> CardData:
  with _fetching("Failed to fetch card data."):
    # three separate queries, run one after another on the same session
    invoice_count = session.exec(select(func.count()).select_from(Invoice)).one()
    customer_count = session.exec(select(func.count()).select_from(Customer)).one()
    totals = session.exec(select(
      _sum_where_status("paid").label("paid"),
      _sum_where_status("pending").label("pending"),
    )).one()

    return CardData(
      number_of_customers=customer_count or 0,
      number_of_invoices=invoice_count or 0,
      total_paid_invoices=format_currency(totals.paid or 0),
      total_pending_invoices=format_currency(totals.pending or 0),
    )


def fetch_filtered_invoices(session: Session, query: str, current_page: int) -> List[InvoicesTableRow]:
  with _fetching("Failed to fetch invoices."):
    if current_page < 1:
      raise ValueError(f"current_page must be >= 1, got {current_page}")
    offset = (current_page - 1) * ITEMS_PER_PAGE

    stmt = (
      select(Invoice, Customer)
      .outerjoin(Customer, col(Invoice.customer_id) == col(Customer.id))
      .order_by(col(Invoice.date).desc())
      .offset(offset)
      .limit(ITEMS_PER_PAGE)
    )
    if query:
      stmt = stmt.where(_invoice_filter(query))

    rows = session.exec(stmt).all()
    logger.debug("Fetched %d invoices for query=%r page=%d", len(rows), query, current_page)
    return [
      InvoicesTableRow(
        id=invoice.id,
        customer_id=invoice.customer_id,
        amount=invoice.amount,
        date=invoice.date,
        status=invoice.status,
        customer=(
          InvoiceCustomer(name=customer.name, email=customer.email, image_url=customer.image_url)
          if customer else None
        ),
      )
      for invoice, customer in rows
    ]


def fetch_invoices_pages(session: Session, query: str) -> int:
  with _fetching("Failed to fetch total number of invoices."):
    stmt = (
      select(func.count(col(Invoice.id)))
      .select_from(Invoice)
      .outerjoin(Customer, col(Invoice.customer_id) == col(Customer.id))
    )
    if query:
      stmt = stmt.where(_invoice_filter(query))
    count = session.exec(stmt).one()
    return math.ceil(int(count) / ITEMS_PER_PAGE)


def fetch_invoice_by_id(session: Session, invoice_id: str) -> Optional[InvoiceForm]:
  with _fetching("Failed to fetch invoice."):
    invoice = session.get(Invoice, invoice_id)
    if invoice is None:
      return None
    return InvoiceForm(
      id=invoice.id,
      customer_id=invoice.customer_id,
      amount=invoice.amount / 100,
      status=invoice.status,
    )


def fetch_customers(session: Session) -> List[CustomerField]:
  with _fetching("Failed to fetch all customers."):
    rows = session.exec(select(Customer.id, Customer.name).order_by(col(Customer.name))).all()
    return [CustomerField(id=r.id, name=r.name) for r in rows]


def fetch_filtered_customers(session: Session, query: str) -> List[CustomersTableRow]:
  pattern = f"%{query}%"

  with _fetching("Failed to fetch customer table."):
    stmt = (
      select(
        Customer.id,
        Customer.name,
        Customer.email,
        Customer.image_url,
        func.count(col(Invoice.id)).label("total_invoices"),
        _sum_where_status("pending").label("total_pending"),
        _sum_where_status("paid").label("total_paid"),
      )
      .outerjoin(Invoice, col(Customer.id) == col(Invoice.customer_id))
      .where(or_(col(Customer.name).ilike(pattern), col(Customer.email).ilike(pattern)))
      .group_by(Customer.id, Customer.name, Customer.email, Customer.image_url)
      .order_by(col(Customer.name))
    )
    return [
      CustomersTableRow(
        id=r.id,
        name=r.name,
        email=r.email,
        image_url=r.image_url,
        total_invoices=r.total_invoices,
        total_pending=format_currency(r.total_pending),
        total_paid=format_currency(r.total_paid),
      )
      for r in session.exec(stmt).all()
    ]
