from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional
from datetime import date
import logging

from app.config import settings
from app.database import get_db
from app.dependencies import CurrentUser, get_current_user
from app.errors import CompanyNotFound, InvoiceNotFound
from app.models.company import Company
from app.models.invoice import Invoice, InvoiceType
from app.schemas.invoice import (
    InvoiceDetail,
    InvoiceDocument,
    InvoicePage,
    InvoiceSummary,
    NextNumberResponse,
    SaveInvoiceRequest,
    SaveInvoiceResponse,
)
from app.services.document_service import build_document
from app.services.field_mapper import field_mapper
from app.services.invoice_service import invoice_service
from app.services.numbering import adapt

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/invoices", tags=["invoices"])

ITEM_COLUMNS = ("designation", "quantity", "unit", "price", "total_price")
HEADER_COLUMNS = (
    "id", "number", "company_id", "type", "date", "client_name", "client_address",
    "amount_paid", "total_amount", "created_at", "updated_at",
)


def _to_detail(invoice: Invoice) -> InvoiceDetail:
    header = field_mapper.invoice_to_display(field_mapper.row_to_dict(invoice, HEADER_COLUMNS))
    items = field_mapper.items_to_display(
        field_mapper.row_to_dict(item, ITEM_COLUMNS) for item in invoice.items
    )
    return InvoiceDetail(
        **header,
        displayNumber=adapt(invoice.number, invoice.company, invoice.type),
        items=items,
    )


def _to_summary(invoice: Invoice) -> InvoiceSummary:
    return InvoiceSummary(
        id=invoice.id,
        number=invoice.number,
        display_number=adapt(invoice.number, invoice.company, invoice.type),
        company_id=invoice.company_id,
        company_name=invoice.company.display_name if invoice.company else None,
        type=invoice.type,
        invoice_date=invoice.date,
        client_name=invoice.client_name,
        amount_paid=invoice.amount_paid,
        total_amount=invoice.total_amount,
        item_count=len(invoice.items),
        created_at=invoice.created_at,
    )


@router.get("/next-number", response_model=NextNumberResponse)
def peek_next_invoice_number(
    on_date: Optional[date] = Query(None, alias="date", description="Invoice date, defaults to today"),
    company_id: Optional[str] = Query(None, description="Brand the preview for this company"),
    invoice_type: Optional[InvoiceType] = Query(None, alias="type"),
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """
    Suggest the next invoice number without reserving it.

    The result is provisional: another save may consume it first, in which case
    the save response carries the number actually assigned.
    """
    company = None
    if company_id:
        company = db.get(Company, company_id)
        if company is None:
            raise CompanyNotFound(company_id)

    preview = invoice_service.preview_number(db, on_date, company, invoice_type)
    return NextNumberResponse(
        scope=preview.scope,
        sequence=preview.sequence,
        number=preview.number,
        display_number=preview.display_number,
    )


@router.post("", response_model=SaveInvoiceResponse)
def save_invoice(
    request: SaveInvoiceRequest,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Create an invoice, or overwrite the caller's invoice carrying the same number"""
    result = invoice_service.save_invoice(
        db,
        owner_id=user.id,
        draft=request.draft,
        company_id=request.company_id,
        total_amount=request.total_amount,
    )

    response = SaveInvoiceResponse(
        id=result.invoice_id,
        number=result.number,
        created=result.created,
        submitted_number=request.draft.number,
    )
    if result.renumbered is not None:
        response.renumbered = True
        response.message = result.renumbered.message
    return response


@router.get("", response_model=InvoicePage)
def list_invoices(
    page: int = Query(0, ge=0),
    page_size: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """List invoices, newest first"""
    invoices, total = invoice_service.list_invoices(db, user.id, page, page_size, user.is_admin)
    return InvoicePage(
        items=[_to_summary(invoice) for invoice in invoices],
        total=total,
        page=page,
        page_size=page_size,
    )


@router.get("/{invoice_id}", response_model=InvoiceDetail)
def get_invoice(
    invoice_id: int,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    invoice = invoice_service.get_invoice(db, invoice_id, user.id, user.is_admin)
    if invoice is None:
        raise InvoiceNotFound(invoice_id)
    return _to_detail(invoice)


@router.get("/{invoice_id}/document", response_model=InvoiceDocument)
def get_invoice_document(
    invoice_id: int,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Template data: company block, marked-up lines, totals and amount in words"""
    invoice = invoice_service.get_invoice(db, invoice_id, user.id, user.is_admin)
    if invoice is None:
        raise InvoiceNotFound(invoice_id)
    return InvoiceDocument(**build_document(invoice))


@router.delete("/{invoice_id}")
def delete_invoice(
    invoice_id: int,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    if not invoice_service.delete_invoice(db, invoice_id, user.id, user.is_admin):
        raise InvoiceNotFound(invoice_id)
    return {"success": True, "invoice_id": invoice_id}
