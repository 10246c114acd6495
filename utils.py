# utils.py
from decimal import Decimal
from typing import Union

def format_currency(amount: Union[int, Decimal, None]) -> str:
  """Render an amount in cents as en-US dollars, e.g. 123456 -> "$1,234.56"."""
  cents = Decimal(amount or 0)
  dollars = (abs(cents) / 100).quantize(Decimal("0.01"))
  sign = "-" if cents < 0 else ""
  return f"{sign}${dollars:,.2f}"
