"""
Invoices component unit tests.

Tests for create/update/delete handlers: validation short-circuits,
amount coercion, post-mutation revalidation and redirects.
"""

from __future__ import annotations

import logging
import sqlite3
from datetime import UTC, datetime
from unittest.mock import Mock

import pytest

from acme_dashboard.adapters.page_cache import StubRevalidationAdapter
from acme_dashboard.components.invoices import (
    AMOUNT_INVALID_MESSAGE,
    CREATE_DATABASE_MESSAGE,
    CREATE_INVALID_MESSAGE,
    CUSTOMER_REQUIRED_MESSAGE,
    INVOICES_PATH,
    STATUS_INVALID_MESSAGE,
    UPDATE_INVALID_MESSAGE,
    CreateInvoiceInput,
    DeleteInvoiceInput,
    DeleteInvoiceOutput,
    InvoiceFormState,
    Redirect,
    UpdateInvoiceInput,
    run,
    run_create,
    run_delete,
    run_update,
)
from acme_dashboard.domain.entities import Invoice, InvoiceStatus

# --- Mock Repository ---


class MockInvoiceRepo:
    """In-memory invoice repository for testing."""

    def __init__(self) -> None:
        self._invoices: dict[str, Invoice] = {}
        self.fail_with: Exception | None = None

    def insert(self, invoice: Invoice) -> Invoice:
        if self.fail_with:
            raise self.fail_with
        self._invoices[invoice.id] = invoice
        return invoice

    def update(
        self, invoice_id: str, customer_id: str, amount: int, status: InvoiceStatus
    ) -> None:
        if self.fail_with:
            raise self.fail_with
        existing = self._invoices.get(invoice_id)
        if existing:
            self._invoices[invoice_id] = existing.model_copy(
                update={"customer_id": customer_id, "amount": amount, "status": status}
            )

    def delete(self, invoice_id: str) -> None:
        if self.fail_with:
            raise self.fail_with
        self._invoices.pop(invoice_id, None)

    def all(self) -> list[Invoice]:
        return list(self._invoices.values())


class FixedClock:
    def __init__(self, now: datetime) -> None:
        self._now = now

    def now_utc(self) -> datetime:
        return self._now


@pytest.fixture
def repo() -> MockInvoiceRepo:
    return MockInvoiceRepo()


@pytest.fixture
def revalidation() -> StubRevalidationAdapter:
    return StubRevalidationAdapter()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(datetime(2024, 3, 9, 23, 30, 0, tzinfo=UTC))


@pytest.fixture
def stored(repo: MockInvoiceRepo) -> Invoice:
    return repo.insert(
        Invoice(id="i1", customer_id="c1", amount=1000, status="pending", date="2024-01-02")
    )


# --- Creation Tests ---


class TestCreateInvoice:
    """Test invoice creation."""

    def test_create_invoice_success(self, repo, revalidation, clock) -> None:
        """Creates one row in cents, dated today, then redirects to the listing."""
        inp = CreateInvoiceInput(form={"customerId": "c1", "amount": "50", "status": "pending"})
        result = run_create(inp, repo, revalidation, clock)

        assert result == Redirect(INVOICES_PATH)
        rows = repo.all()
        assert len(rows) == 1
        assert rows[0].customer_id == "c1"
        assert rows[0].amount == 5000
        assert rows[0].status == "pending"
        assert rows[0].date == "2024-03-09"
        assert rows[0].id
        assert revalidation.revalidated_paths == [INVOICES_PATH]

    def test_create_invoice_converts_decimal_amount(self, repo, revalidation, clock) -> None:
        inp = CreateInvoiceInput(form={"customerId": "c1", "amount": "12.34", "status": "paid"})
        run_create(inp, repo, revalidation, clock)

        assert repo.all()[0].amount == 1234

    def test_create_invoice_generates_distinct_ids(self, repo, revalidation, clock) -> None:
        form = {"customerId": "c1", "amount": "1", "status": "paid"}
        run_create(CreateInvoiceInput(form=form), repo, revalidation, clock)
        run_create(CreateInvoiceInput(form=form), repo, revalidation, clock)

        assert len({invoice.id for invoice in repo.all()}) == 2

    @pytest.mark.parametrize("amount", ["0", "-5", "abc", "", None, "1e30"])
    def test_create_invoice_rejects_amount(self, repo, revalidation, clock, amount) -> None:
        """Non-positive or non-numeric amounts never reach the store."""
        inp = CreateInvoiceInput(form={"customerId": "c1", "amount": amount, "status": "paid"})
        result = run_create(inp, repo, revalidation, clock)

        assert isinstance(result, InvoiceFormState)
        assert result.errors == {"amount": [AMOUNT_INVALID_MESSAGE]}
        assert result.message == CREATE_INVALID_MESSAGE
        assert repo.all() == []
        assert revalidation.revalidated_paths == []

    def test_create_invoice_rejects_status(self, repo, revalidation, clock) -> None:
        inp = CreateInvoiceInput(form={"customerId": "c1", "amount": "10", "status": "draft"})
        result = run_create(inp, repo, revalidation, clock)

        assert isinstance(result, InvoiceFormState)
        assert result.errors == {"status": [STATUS_INVALID_MESSAGE]}

    def test_create_invoice_reports_every_missing_field(self, repo, revalidation, clock) -> None:
        result = run_create(CreateInvoiceInput(form={}), repo, revalidation, clock)

        assert isinstance(result, InvoiceFormState)
        assert result.errors == {
            "customerId": [CUSTOMER_REQUIRED_MESSAGE],
            "amount": [AMOUNT_INVALID_MESSAGE],
            "status": [STATUS_INVALID_MESSAGE],
        }

    def test_create_invoice_database_error(self, repo, revalidation, clock) -> None:
        """Store failure returns a message and skips revalidation and redirect."""
        repo.fail_with = sqlite3.IntegrityError("FOREIGN KEY constraint failed")
        inp = CreateInvoiceInput(form={"customerId": "c9", "amount": "10", "status": "paid"})
        result = run_create(inp, repo, revalidation, clock)

        assert result == InvoiceFormState(message=CREATE_DATABASE_MESSAGE)
        assert revalidation.revalidated_paths == []

    def test_create_invoice_custom_listing_path(self, repo, revalidation, clock) -> None:
        inp = CreateInvoiceInput(form={"customerId": "c1", "amount": "10", "status": "paid"})
        result = run_create(inp, repo, revalidation, clock, listing_path="/invoices")

        assert result == Redirect("/invoices")
        assert revalidation.revalidated_paths == ["/invoices"]


# --- Update Tests ---


class TestUpdateInvoice:
    """Test invoice updates."""

    def test_update_invoice_success(self, repo, revalidation, stored) -> None:
        inp = UpdateInvoiceInput(
            invoice_id="i1", form={"customerId": "c2", "amount": "99.99", "status": "paid"}
        )
        result = run_update(inp, repo, revalidation)

        assert result == Redirect(INVOICES_PATH)
        updated = repo.all()[0]
        assert updated.customer_id == "c2"
        assert updated.amount == 9999
        assert updated.status == "paid"
        assert updated.date == "2024-01-02"
        assert revalidation.revalidated_paths == [INVOICES_PATH]

    def test_update_invoice_uses_route_id_not_form_id(self, revalidation) -> None:
        mock_repo = Mock()
        inp = UpdateInvoiceInput(
            invoice_id="i1",
            form={"id": "other", "customerId": "c1", "amount": "1", "status": "paid"},
        )
        run_update(inp, mock_repo, revalidation)

        mock_repo.update.assert_called_once_with("i1", customer_id="c1", amount=100, status="paid")

    def test_update_invoice_validation_error(self, revalidation) -> None:
        """Invalid form: no store call, no redirect."""
        mock_repo = Mock()
        inp = UpdateInvoiceInput(
            invoice_id="i1", form={"customerId": "c1", "amount": "-1", "status": "paid"}
        )
        result = run_update(inp, mock_repo, revalidation)

        assert isinstance(result, InvoiceFormState)
        assert result.errors == {"amount": [AMOUNT_INVALID_MESSAGE]}
        assert result.message == UPDATE_INVALID_MESSAGE
        mock_repo.update.assert_not_called()
        assert revalidation.revalidated_paths == []

    def test_update_invoice_database_error_still_redirects(
        self, repo, revalidation, stored, caplog
    ) -> None:
        """A failed UPDATE is logged and the caller is redirected anyway."""
        repo.fail_with = sqlite3.OperationalError("database is locked")
        inp = UpdateInvoiceInput(
            invoice_id="i1", form={"customerId": "c1", "amount": "10", "status": "paid"}
        )

        with caplog.at_level(logging.ERROR):
            result = run_update(inp, repo, revalidation)

        assert result == Redirect(INVOICES_PATH)
        assert revalidation.revalidated_paths == [INVOICES_PATH]
        assert repo.all()[0].amount == 1000
        assert "updating invoice i1" in caplog.text


# --- Delete Tests ---


class TestDeleteInvoice:
    """Test invoice deletion."""

    def test_delete_invoice_success(self, repo, revalidation, stored) -> None:
        other = repo.insert(
            Invoice(id="i2", customer_id="c1", amount=500, status="paid", date="2024-01-03")
        )
        result = run_delete(DeleteInvoiceInput(invoice_id="i1"), repo, revalidation)

        assert isinstance(result, DeleteInvoiceOutput)
        assert result.revalidated_path == INVOICES_PATH
        assert repo.all() == [other]
        assert revalidation.revalidated_paths == [INVOICES_PATH]

    def test_delete_invoice_missing_row(self, repo, revalidation) -> None:
        result = run_delete(DeleteInvoiceInput(invoice_id="nope"), repo, revalidation)

        assert result.invoice_id == "nope"
        assert revalidation.revalidated_paths == [INVOICES_PATH]

    def test_delete_invoice_database_error_propagates(self, revalidation) -> None:
        mock_repo = Mock()
        mock_repo.delete.side_effect = sqlite3.OperationalError("disk I/O error")

        with pytest.raises(sqlite3.OperationalError):
            run_delete(DeleteInvoiceInput(invoice_id="i1"), mock_repo, revalidation)

        assert revalidation.revalidated_paths == []


# --- Dispatch Tests ---


class TestRunDispatch:
    def test_run_routes_by_input_type(self, repo, revalidation, clock, stored) -> None:
        result = run(DeleteInvoiceInput(invoice_id="i1"), repo=repo, revalidation=revalidation)
        assert isinstance(result, DeleteInvoiceOutput)

        result = run(
            CreateInvoiceInput(form={"customerId": "c1", "amount": "3", "status": "paid"}),
            repo=repo,
            revalidation=revalidation,
            time=clock,
        )
        assert result == Redirect(INVOICES_PATH)

    def test_run_rejects_unknown_input(self, repo, revalidation) -> None:
        with pytest.raises(ValueError):
            run(object(), repo=repo, revalidation=revalidation)  # type: ignore[arg-type]
