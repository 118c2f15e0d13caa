"""
Invoices component - Invoice mutation handlers.

Each handler runs validate -> coerce -> persist -> revalidate and returns
either a Redirect for the caller to follow or the form state to re-render.

Shell Layer - handles I/O and error conversion.
"""

from __future__ import annotations

import logging

from acme_dashboard.domain.entities import Invoice

from ._impl import (
    CREATE_INVOICE_FIELDS,
    UPDATE_INVOICE_FIELDS,
    format_invoice_date,
    to_subunits,
    validate_invoice_form,
)
from .models import (
    CreateInvoiceInput,
    DeleteInvoiceInput,
    DeleteInvoiceOutput,
    InvoiceFormState,
    InvoiceMutationOutput,
    Redirect,
    UpdateInvoiceInput,
)
from .ports import InvoiceRepoPort, RevalidationPort, TimePort

logger = logging.getLogger(__name__)

INVOICES_PATH = "/dashboard/invoices"

CREATE_INVALID_MESSAGE = "Please fix the errors in the form. Failed to create invoice."
CREATE_DATABASE_MESSAGE = "Database error: Failed to create invoice."
UPDATE_INVALID_MESSAGE = "Please fix the errors in the form. Failed to update invoice."


def run_create(
    inp: CreateInvoiceInput,
    repo: InvoiceRepoPort,
    revalidation: RevalidationPort,
    time: TimePort,
    listing_path: str = INVOICES_PATH,
) -> InvoiceMutationOutput:
    """Create an invoice dated today."""
    validated = validate_invoice_form(inp.form, CREATE_INVOICE_FIELDS)
    if not validated.success:
        return InvoiceFormState(errors=validated.field_errors, message=CREATE_INVALID_MESSAGE)

    data = validated.data or {}
    invoice = Invoice(
        customer_id=data["customerId"],
        amount=to_subunits(data["amount"]),
        status=data["status"],
        date=format_invoice_date(time.now_utc()),
    )

    try:
        repo.insert(invoice)
    except Exception:
        logger.exception(
            "Database error while creating invoice for customer %s", invoice.customer_id
        )
        return InvoiceFormState(message=CREATE_DATABASE_MESSAGE)

    revalidation.revalidate_path(listing_path)
    return Redirect(listing_path)


def run_update(
    inp: UpdateInvoiceInput,
    repo: InvoiceRepoPort,
    revalidation: RevalidationPort,
    listing_path: str = INVOICES_PATH,
) -> InvoiceMutationOutput:
    """
    Update customer, amount and status of an existing invoice.

    A failed UPDATE statement is logged and the caller is still redirected,
    unlike create which reports the failure.
    """
    validated = validate_invoice_form(inp.form, UPDATE_INVOICE_FIELDS)
    if not validated.success:
        return InvoiceFormState(errors=validated.field_errors, message=UPDATE_INVALID_MESSAGE)

    data = validated.data or {}
    try:
        repo.update(
            inp.invoice_id,
            customer_id=data["customerId"],
            amount=to_subunits(data["amount"]),
            status=data["status"],
        )
    except Exception:
        logger.exception("Database error while updating invoice %s", inp.invoice_id)

    revalidation.revalidate_path(listing_path)
    return Redirect(listing_path)


def run_delete(
    inp: DeleteInvoiceInput,
    repo: InvoiceRepoPort,
    revalidation: RevalidationPort,
    listing_path: str = INVOICES_PATH,
) -> DeleteInvoiceOutput:
    """Delete an invoice in place. Store errors propagate to the caller."""
    repo.delete(inp.invoice_id)
    revalidation.revalidate_path(listing_path)
    return DeleteInvoiceOutput(invoice_id=inp.invoice_id, revalidated_path=listing_path)


def run(
    inp: CreateInvoiceInput | UpdateInvoiceInput | DeleteInvoiceInput,
    *,
    repo: InvoiceRepoPort,
    revalidation: RevalidationPort,
    time: TimePort | None = None,
    listing_path: str = INVOICES_PATH,
) -> InvoiceMutationOutput | DeleteInvoiceOutput:
    if isinstance(inp, CreateInvoiceInput):
        assert time
        return run_create(inp, repo, revalidation, time, listing_path)

    elif isinstance(inp, UpdateInvoiceInput):
        return run_update(inp, repo, revalidation, listing_path)

    elif isinstance(inp, DeleteInvoiceInput):
        return run_delete(inp, repo, revalidation, listing_path)

    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
