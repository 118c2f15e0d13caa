from typing import Literal
from uuid import uuid4

from pydantic import BaseModel, Field

# --- Enums / Literals ---
InvoiceStatus = Literal["paid", "pending"]
INVOICE_STATUSES: tuple[InvoiceStatus, ...] = ("paid", "pending")

# --- Users ---

class User(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid4()))
    name: str
    email: str
    password: str  # argon2 hash, never the plain value

# --- Customers ---

class Customer(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid4()))
    name: str
    email: str
    image_url: str = ""

# --- Invoices ---

class Invoice(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid4()))
    customer_id: str
    amount: int = Field(gt=0)  # subunits (cents)
    status: InvoiceStatus
    date: str  # YYYY-MM-DD

class InvoiceRow(BaseModel):
    """Invoice joined with the owning customer, as shown on the listing page."""

    id: str
    customer_id: str
    name: str
    email: str
    image_url: str
    amount: int
    status: InvoiceStatus
    date: str
