# models.py
import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel, Field

class Customer(SQLModel, table=True):
  __tablename__ = "customers"

  id: str = Field(primary_key=True, index=True)
  name: str
  email: str
  image_url: str = ""

class Invoice(SQLModel, table=True):
  __tablename__ = "invoices"

  id: str = Field(primary_key=True, index=True)
  customer_id: str = Field(foreign_key="customers.id", index=True)
  amount: int  # cents
  status: str = "pending"  # pending|paid
  date: dt.date

class Revenue(SQLModel, table=True):
  __tablename__ = "revenue"

  id: Optional[int] = Field(default=None, primary_key=True)
  month: str = Field(unique=True)
  revenue: int


# Shapes handed to the dashboard pages

class RevenuePoint(BaseModel):
  month: str
  revenue: int

class LatestInvoice(BaseModel):
  id: str
  name: Optional[str] = None
  email: Optional[str] = None
  image_url: Optional[str] = None
  amount: str

class CardData(BaseModel):
  model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

  number_of_customers: int
  number_of_invoices: int
  total_paid_invoices: str
  total_pending_invoices: str

class InvoiceCustomer(BaseModel):
  name: str
  email: str
  image_url: str

class InvoicesTableRow(BaseModel):
  id: str
  customer_id: str
  amount: int
  date: dt.date
  status: str  # pending|paid
  customer: Optional[InvoiceCustomer] = None

class InvoiceForm(BaseModel):
  id: str
  customer_id: str
  amount: float  # dollars
  status: str

class CustomerField(BaseModel):
  id: str
  name: str

class CustomersTableRow(BaseModel):
  id: str
  name: str
  email: str
  image_url: str
  total_invoices: int
  total_pending: str
  total_paid: str

class InvoicePages(BaseModel):
  total_pages: int

class SeedResult(BaseModel):
  ok: bool = True
  seeded: bool
