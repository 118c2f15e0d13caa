"""
Invoices component - Data models.

Inputs carry the raw form submission; outputs are either a navigation
instruction (``Redirect``) or the form state to re-render.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

# Raw key/value submission as posted by the UI layer.
FormData = Mapping[str, Any]


# --- Validation ---


@dataclass(frozen=True)
class InvoiceValidationError:
    """Invoice field validation error."""

    code: str
    message: str
    field: str


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of checking a form submission against the field rules.

    Holds either ``data`` (coerced values keyed by form field name) or
    ``field_errors`` plus a summary ``message``, never both.
    """

    data: dict[str, Any] | None = None
    field_errors: dict[str, list[str]] = field(default_factory=dict)
    message: str | None = None

    @property
    def success(self) -> bool:
        return self.data is not None


# --- Form State ---


@dataclass(frozen=True)
class InvoiceFormState:
    """State handed back to the invoice form after a failed submission."""

    errors: dict[str, list[str]] = field(default_factory=dict)
    message: str | None = None


@dataclass(frozen=True)
class Redirect:
    """Instruction for the caller to navigate to ``path``."""

    path: str


# --- Input Models ---


@dataclass(frozen=True)
class CreateInvoiceInput:
    """Input for creating an invoice."""

    form: FormData
    prev_state: InvoiceFormState | None = None


@dataclass(frozen=True)
class UpdateInvoiceInput:
    """Input for updating an invoice. The id comes from the route, not the form."""

    invoice_id: str
    form: FormData
    prev_state: InvoiceFormState | None = None


@dataclass(frozen=True)
class DeleteInvoiceInput:
    """Input for deleting an invoice."""

    invoice_id: str


# --- Output Models ---


InvoiceMutationOutput = Redirect | InvoiceFormState


@dataclass(frozen=True)
class DeleteInvoiceOutput:
    """Output from delete. Deletion has no failure state for the caller."""

    invoice_id: str
    revalidated_path: str
