"""
Invoices component - Invoice create/update/delete.

Validates the submitted form, stores amounts in cents, and invalidates the
cached invoice listing after every mutation.
"""

from ._impl import (
    AMOUNT_INVALID_MESSAGE,
    CREATE_INVOICE_FIELDS,
    CUSTOMER_REQUIRED_MESSAGE,
    FIELD_RULES,
    MAX_SUBUNITS,
    STATUS_INVALID_MESSAGE,
    UPDATE_INVOICE_FIELDS,
    format_invoice_date,
    to_subunits,
    validate_invoice_form,
)
from .component import (
    CREATE_DATABASE_MESSAGE,
    CREATE_INVALID_MESSAGE,
    INVOICES_PATH,
    UPDATE_INVALID_MESSAGE,
    run,
    run_create,
    run_delete,
    run_update,
)
from .models import (
    CreateInvoiceInput,
    DeleteInvoiceInput,
    DeleteInvoiceOutput,
    FormData,
    InvoiceFormState,
    InvoiceMutationOutput,
    InvoiceValidationError,
    Redirect,
    UpdateInvoiceInput,
    ValidationResult,
)
from .ports import InvoiceRepoPort, RevalidationPort, TimePort

__all__ = [
    # Entry points
    "run",
    "run_create",
    "run_update",
    "run_delete",
    # Field rules
    "FIELD_RULES",
    "MAX_SUBUNITS",
    "CREATE_INVOICE_FIELDS",
    "UPDATE_INVOICE_FIELDS",
    "validate_invoice_form",
    "to_subunits",
    "format_invoice_date",
    # Messages
    "AMOUNT_INVALID_MESSAGE",
    "CUSTOMER_REQUIRED_MESSAGE",
    "STATUS_INVALID_MESSAGE",
    "CREATE_INVALID_MESSAGE",
    "CREATE_DATABASE_MESSAGE",
    "UPDATE_INVALID_MESSAGE",
    "INVOICES_PATH",
    # Models
    "CreateInvoiceInput",
    "UpdateInvoiceInput",
    "DeleteInvoiceInput",
    "DeleteInvoiceOutput",
    "FormData",
    "InvoiceFormState",
    "InvoiceMutationOutput",
    "InvoiceValidationError",
    "Redirect",
    "ValidationResult",
    # Ports
    "InvoiceRepoPort",
    "RevalidationPort",
    "TimePort",
]
