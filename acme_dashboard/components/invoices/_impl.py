"""
Invoice field rules and coercion.

Functional Core - pure business logic, no I/O. Validation never raises:
every failure is reported through the returned ValidationResult.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, DecimalException, InvalidOperation
from typing import Any

from acme_dashboard.domain.entities import INVOICE_STATUSES

from .models import FormData, InvoiceValidationError, ValidationResult

CUSTOMER_REQUIRED_MESSAGE = "Please select a customer"
AMOUNT_INVALID_MESSAGE = "Amount must be greater than $0"
STATUS_INVALID_MESSAGE = "Please select an invoice status"
VALIDATION_SUMMARY_MESSAGE = "Missing or invalid invoice fields."

FieldCheck = Callable[[Any], tuple[Any, list[InvoiceValidationError]]]

# Largest value a SQLite INTEGER column holds
MAX_SUBUNITS = 2**63 - 1


# --- Coercion ---


def to_subunits(amount: Decimal) -> int:
    """Convert a currency amount to integer cents, rounding half up."""
    return int((amount * 100).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def format_invoice_date(now: datetime) -> str:
    """Calendar date of ``now`` as YYYY-MM-DD."""
    return now.date().isoformat()


def _parse_amount(value: Any) -> Decimal | None:
    text = "" if value is None else str(value).strip()
    # Missing and blank values count as zero
    if not text:
        return Decimal(0)
    try:
        amount = Decimal(text)
    except InvalidOperation:
        return None
    return amount if amount.is_finite() else None


def _checked_subunits(amount: Decimal) -> int | None:
    try:
        subunits = to_subunits(amount)
    except DecimalException:
        # Overflows the decimal context or needs more digits than it can quantize
        return None
    return subunits if 0 < subunits <= MAX_SUBUNITS else None


# --- Field Rules ---


def check_id(value: Any) -> tuple[Any, list[InvoiceValidationError]]:
    if not isinstance(value, str) or not value.strip():
        return None, [
            InvoiceValidationError(
                code="id_required", message="Invoice ID is required", field="id"
            )
        ]
    return value, []


def check_customer_id(value: Any) -> tuple[Any, list[InvoiceValidationError]]:
    # Whether the customer exists is left to the store's foreign key
    if not isinstance(value, str):
        return None, [
            InvoiceValidationError(
                code="customer_required",
                message=CUSTOMER_REQUIRED_MESSAGE,
                field="customerId",
            )
        ]
    return value, []


def check_amount(value: Any) -> tuple[Any, list[InvoiceValidationError]]:
    amount = _parse_amount(value)
    # Sub-cent amounts would be stored as zero, huge ones overflow the column
    if amount is None or amount <= 0 or _checked_subunits(amount) is None:
        return None, [
            InvoiceValidationError(
                code="amount_not_positive",
                message=AMOUNT_INVALID_MESSAGE,
                field="amount",
            )
        ]
    return amount, []


def check_status(value: Any) -> tuple[Any, list[InvoiceValidationError]]:
    if value not in INVOICE_STATUSES:
        return None, [
            InvoiceValidationError(
                code="status_invalid",
                message=STATUS_INVALID_MESSAGE,
                field="status",
            )
        ]
    return value, []


def check_date(value: Any) -> tuple[Any, list[InvoiceValidationError]]:
    if not isinstance(value, str):
        return None, [
            InvoiceValidationError(
                code="date_required", message="Invoice date is required", field="date"
            )
        ]
    return value, []


# Shared rule table. Schemas select the subset of fields they need.
FIELD_RULES: dict[str, FieldCheck] = {
    "id": check_id,
    "customerId": check_customer_id,
    "amount": check_amount,
    "status": check_status,
    "date": check_date,
}

CREATE_INVOICE_FIELDS: tuple[str, ...] = ("customerId", "amount", "status")
UPDATE_INVOICE_FIELDS: tuple[str, ...] = ("customerId", "amount", "status")


def validate_invoice_form(form: FormData, fields: tuple[str, ...]) -> ValidationResult:
    """
    Check ``form`` against the rules for ``fields``.

    Returns:
        ValidationResult with coerced data keyed by field name, or the
        messages for every failing field, in the order of ``fields``.
    """
    data: dict[str, Any] = {}
    field_errors: dict[str, list[str]] = {}

    for name in fields:
        value, errors = FIELD_RULES[name](form.get(name))
        if errors:
            field_errors.setdefault(name, []).extend(err.message for err in errors)
        else:
            data[name] = value

    if field_errors:
        return ValidationResult(field_errors=field_errors, message=VALIDATION_SUMMARY_MESSAGE)
    return ValidationResult(data=data)
