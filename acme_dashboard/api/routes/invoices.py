"""Dashboard routes for invoices.

Form posts run the invoice mutation handlers; a Redirect result becomes a
303 so the browser re-fetches the listing.
"""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse, RedirectResponse, Response

from acme_dashboard.adapters.clock import SystemClock
from acme_dashboard.adapters.page_cache import InMemoryPageCache
from acme_dashboard.adapters.sqlite.repos import SQLiteInvoiceRepo
from acme_dashboard.api.deps import (
    get_clock,
    get_current_user,
    get_form_data,
    get_invoice_repo,
    get_page_cache,
)
from acme_dashboard.api.schemas import (
    DeleteInvoiceResponse,
    FormStateResponse,
    InvoiceResponse,
    InvoiceRowResponse,
)
from acme_dashboard.components.invoices import (
    INVOICES_PATH,
    CreateInvoiceInput,
    DeleteInvoiceInput,
    InvoiceMutationOutput,
    Redirect,
    UpdateInvoiceInput,
    run_create,
    run_delete,
    run_update,
)
from acme_dashboard.domain.entities import User

router = APIRouter()


def _mutation_response(result: InvoiceMutationOutput) -> Response:
    if isinstance(result, Redirect):
        return RedirectResponse(url=result.path, status_code=status.HTTP_303_SEE_OTHER)

    # Field errors are the caller's to fix; a bare message is a store failure
    status_code = (
        status.HTTP_400_BAD_REQUEST if result.errors else status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    body = FormStateResponse(errors=result.errors, message=result.message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


@router.get("", response_model=list[InvoiceRowResponse])
def list_invoices(
    current_user: User = Depends(get_current_user),
    repo: SQLiteInvoiceRepo = Depends(get_invoice_repo),
    cache: InMemoryPageCache = Depends(get_page_cache),
) -> Any:
    """List invoices with their customers, served from the page cache."""
    cached = cache.get(INVOICES_PATH)
    if cached is not None:
        return cached

    rows = [row.model_dump() for row in repo.list_with_customers()]
    cache.put(INVOICES_PATH, rows)
    return rows


@router.post("/create")
def create_invoice(
    form: dict[str, str] = Depends(get_form_data),
    current_user: User = Depends(get_current_user),
    repo: SQLiteInvoiceRepo = Depends(get_invoice_repo),
    cache: InMemoryPageCache = Depends(get_page_cache),
    clock: SystemClock = Depends(get_clock),
) -> Response:
    """Create an invoice from the posted form."""
    result = run_create(CreateInvoiceInput(form=form), repo, cache, clock)
    return _mutation_response(result)


@router.get("/{invoice_id}", response_model=InvoiceResponse)
def get_invoice(
    invoice_id: str,
    current_user: User = Depends(get_current_user),
    repo: SQLiteInvoiceRepo = Depends(get_invoice_repo),
) -> Any:
    """Get a single invoice, e.g. to prefill the edit form."""
    invoice = repo.get_by_id(invoice_id)
    if invoice is None:
        raise HTTPException(status_code=404, detail="Invoice not found")
    return invoice


@router.post("/{invoice_id}/edit")
def update_invoice(
    invoice_id: str,
    form: dict[str, str] = Depends(get_form_data),
    current_user: User = Depends(get_current_user),
    repo: SQLiteInvoiceRepo = Depends(get_invoice_repo),
    cache: InMemoryPageCache = Depends(get_page_cache),
) -> Response:
    """Update an invoice from the posted form."""
    result = run_update(UpdateInvoiceInput(invoice_id=invoice_id, form=form), repo, cache)
    return _mutation_response(result)


@router.post("/{invoice_id}/delete", response_model=DeleteInvoiceResponse)
def delete_invoice(
    invoice_id: str,
    current_user: User = Depends(get_current_user),
    repo: SQLiteInvoiceRepo = Depends(get_invoice_repo),
    cache: InMemoryPageCache = Depends(get_page_cache),
) -> DeleteInvoiceResponse:
    """Delete an invoice in place; the listing is revalidated, not redirected to."""
    result = run_delete(DeleteInvoiceInput(invoice_id=invoice_id), repo, cache)
    return DeleteInvoiceResponse(id=result.invoice_id)
