# dashboard_route.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session

import data
from db import get_session
from models import (
  CardData,
  CustomerField,
  CustomersTableRow,
  InvoiceForm,
  InvoicePages,
  InvoicesTableRow,
  LatestInvoice,
  RevenuePoint,
  SeedResult,
)
from seed import seed_if_empty

router = APIRouter(prefix="/api", tags=["dashboard"])

def _fetch(fn, *args):
  try:
    return fn(*args)
  except data.FetchError as e:
    raise HTTPException(status_code=500, detail=str(e))

@router.get("/revenue", response_model=List[RevenuePoint])
def revenue(session: Session = Depends(get_session)):
  return _fetch(data.fetch_revenue, session)

@router.get("/invoices/latest", response_model=List[LatestInvoice])
def latest_invoices(session: Session = Depends(get_session)):
  return _fetch(data.fetch_latest_invoices, session)

@router.get("/cards", response_model=CardData)
def card_data(session: Session = Depends(get_session)):
  return _fetch(data.fetch_card_data, session)

@router.get("/invoices/pages", response_model=InvoicePages)
def invoices_pages(query: str = "", session: Session = Depends(get_session)):
  return InvoicePages(total_pages=_fetch(data.fetch_invoices_pages, session, query))

@router.get("/invoices", response_model=List[InvoicesTableRow])
def list_invoices(query: str = "", page: int = Query(1, ge=1), session: Session = Depends(get_session)):
  return _fetch(data.fetch_filtered_invoices, session, query, page)

@router.get("/invoices/{invoice_id}", response_model=InvoiceForm)
def get_invoice(invoice_id: str, session: Session = Depends(get_session)):
  invoice = _fetch(data.fetch_invoice_by_id, session, invoice_id)
  if not invoice:
    raise HTTPException(status_code=404, detail="Invoice not found")
  return invoice

@router.get("/customers", response_model=List[CustomerField])
def list_customers(session: Session = Depends(get_session)):
  return _fetch(data.fetch_customers, session)

@router.get("/customers/table", response_model=List[CustomersTableRow])
def customers_table(query: str = "", session: Session = Depends(get_session)):
  return _fetch(data.fetch_filtered_customers, session, query)

@router.post("/seed", response_model=SeedResult)
def seed(session: Session = Depends(get_session)):
  return SeedResult(seeded=seed_if_empty(session))
