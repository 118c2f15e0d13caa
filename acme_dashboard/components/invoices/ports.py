"""
Invoices component - Port interfaces.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from acme_dashboard.domain.entities import Invoice, InvoiceStatus


class InvoiceRepoPort(Protocol):
    """Repository interface for invoice rows."""

    def insert(self, invoice: Invoice) -> Invoice:
        """Insert a new invoice row."""
        ...

    def update(
        self, invoice_id: str, customer_id: str, amount: int, status: InvoiceStatus
    ) -> None:
        """Set customer, amount and status on the row matching ``invoice_id``."""
        ...

    def delete(self, invoice_id: str) -> None:
        """Delete the row matching ``invoice_id``. Missing rows are not an error."""
        ...


class RevalidationPort(Protocol):
    """Port for invalidating cached renderings of a route."""

    def revalidate_path(self, path: str) -> bool:
        """
        Revalidate cache entries for the given path.

        Returns:
            True if revalidation was triggered
        """
        ...


class TimePort(Protocol):
    """Port for time operations - enables deterministic testing."""

    def now_utc(self) -> datetime:
        """Get current UTC time."""
        ...
