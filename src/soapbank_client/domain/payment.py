"""Payment domain object."""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import Field

from .base import DomainModel


class PaymentMethod(str, Enum):
    ACH = "ACH"
    CREDIT = "CREDIT"
    DEBIT = "DEBIT"
    WIRE = "WIRE"
    OTHER = "OTHER"


class Payment(DomainModel):
    id: str
    amount_paid: int
    payment_date: date = Field(alias="date")
    payment_method: PaymentMethod
    invoice_code: Optional[str] = None
    invoice: Optional[str] = None
    amount_due: Optional[int] = None
    invoice_period_start_date: Optional[date] = None
    invoice_period_end_date: Optional[date] = None
    due_date: Optional[date] = None
