from pydantic import BaseModel, Field

from acme_dashboard.domain.entities import InvoiceStatus


# --- Forms ---
class FormStateResponse(BaseModel):
    errors: dict[str, list[str]] = Field(default_factory=dict)
    message: str | None = None


class LoginErrorResponse(BaseModel):
    message: str | None


# --- Invoices ---
class InvoiceResponse(BaseModel):
    id: str
    customer_id: str
    amount: int
    status: InvoiceStatus
    date: str

    class Config:
        from_attributes = True


class InvoiceRowResponse(InvoiceResponse):
    name: str
    email: str
    image_url: str


class DeleteInvoiceResponse(BaseModel):
    id: str
    status: str = "deleted"


# --- Users ---
class UserResponse(BaseModel):
    id: str
    name: str
    email: str
