"""
Invoice Service - Create-or-update-by-number workflow.

A save looks the submitted number up for the caller. A hit rewrites that
invoice in place (header overwritten, items replaced wholesale); a miss mints a
fresh number from the sequence counter and inserts a new invoice under it.
Copying an invoice and changing only its number is therefore how invoices are
cloned.
"""
import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload, selectinload

from app.errors import (
    CompanyNotFound,
    ConcurrencyRenumbered,
    PersistenceError,
    ValidationError,
)
from app.models.company import Company
from app.models.invoice import Invoice
from app.models.invoice_item import InvoiceItem
from app.schemas.invoice import InvoiceDraft
from app.services.counter_service import SequenceCounter, scope_key, sequence_counter
from app.services.field_mapper import field_mapper
from app.services.numbering import adapt, format_base
from app.utils.text import normalize_text

logger = logging.getLogger(__name__)


@dataclass
class SaveResult:
    invoice_id: int
    number: str
    created: bool
    renumbered: Optional[ConcurrencyRenumbered] = None


@dataclass
class NumberPreview:
    scope: str
    sequence: int
    number: str
    display_number: Optional[str] = None


def normalize_draft(draft: InvoiceDraft) -> Tuple[Dict[str, Any], List[Dict[str, Any]]]:
    """
    Normalize and validate a draft.

    Returns the persisted-shape header and item rows. Raises ValidationError
    listing every offending field; nothing has been written at that point.
    """
    errors = []

    client_name = normalize_text(draft.client.name)
    if len(client_name) < 2:
        errors.append({"field": "client.name", "message": "Client name must have at least 2 characters"})

    amount_paid = draft.amount_paid or Decimal("0")
    if amount_paid < 0:
        errors.append({"field": "amountPaid", "message": "Amount paid cannot be negative"})

    items = []
    for index, item in enumerate(draft.items):
        designation = normalize_text(item.designation)
        if not designation:
            errors.append({"field": f"items[{index}].designation", "message": "Designation is required"})
        if item.quantity < 0:
            errors.append({"field": f"items[{index}].quantity", "message": "Quantity cannot be negative"})
        if item.unit_price < 0:
            errors.append({"field": f"items[{index}].unitPrice", "message": "Unit price cannot be negative"})

        row = field_mapper.item_to_persisted({
            "designation": designation,
            "quantity": item.quantity,
            "unit": item.unit or None,
            "unitPrice": item.unit_price,
            "totalPrice": item.quantity * item.unit_price,
        })
        items.append(row)

    if errors:
        raise ValidationError("Invoice draft is invalid", errors=errors)

    header = field_mapper.invoice_to_persisted({
        "type": draft.type.value,
        "clientName": client_name,
        "clientAddress": normalize_text(draft.client.address or "") or None,
        "amountPaid": amount_paid,
    })
    return header, items


class InvoiceService:
    """Numbering and persistence of invoices"""

    def __init__(self, counter: SequenceCounter = sequence_counter):
        self.counter = counter

    def preview_number(
        self,
        db: Session,
        on_date: Optional[date] = None,
        company: Optional[Company] = None,
        invoice_type: Optional[str] = None,
    ) -> NumberPreview:
        """Suggest the next number without reserving it"""
        key = scope_key(on_date)
        sequence = self.counter.peek_next(db, key)
        number = format_base(sequence, on_date)
        display_number = adapt(number, company, invoice_type) if company is not None else None
        return NumberPreview(scope=key, sequence=sequence, number=number, display_number=display_number)

    def save_invoice(
        self,
        db: Session,
        owner_id: str,
        draft: InvoiceDraft,
        company_id: str,
        total_amount: Decimal,
        today: Optional[date] = None,
    ) -> SaveResult:
        """
        Create or update an invoice identified by ``(owner_id, draft.number)``.

        Args:
            db: Database session
            owner_id: Caller identity; numbers are unique per owner
            draft: Invoice header and items as entered
            company_id: Issuing company
            total_amount: Document total as computed by the caller
            today: Save date, also selects the counter scope for new invoices

        Returns:
            SaveResult with the number of record. ``renumbered`` is set when a new
            invoice was stored under a different number than the one submitted.
        """
        if not owner_id:
            raise ValidationError("Owner is required")
        header, items = normalize_draft(draft)
        today = today or date.today()

        try:
            company = db.get(Company, company_id)
            existing = None
            if draft.number:
                existing = (
                    db.query(Invoice)
                    .filter(Invoice.owner_id == owner_id, Invoice.number == draft.number)
                    .first()
                )
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Invoice lookup failed for {draft.number}: {str(e)}")
            raise PersistenceError("Invoice lookup failed", submitted_number=draft.number) from e

        if company is None:
            raise CompanyNotFound(company_id)

        header.update(company_id=company.id, date=today, total_amount=total_amount)

        if existing is not None:
            return self._update(db, existing, header, items)
        return self._create(db, owner_id, draft.number, header, items, today)

    def _update(self, db: Session, invoice: Invoice, header: Dict[str, Any], items: List[Dict[str, Any]]) -> SaveResult:
        number = invoice.number
        invoice_id = invoice.id
        try:
            for column, value in header.items():
                setattr(invoice, column, value)
            # Items are replaced wholesale: delete every row, then insert the new list
            invoice.items.clear()
            db.flush()
            self._insert_items(db, invoice_id, items)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to update invoice {number}: {str(e)}", exc_info=True)
            raise PersistenceError(
                "Failed to update invoice",
                submitted_number=number,
                final_number=number,
            ) from e

        logger.info(f"Updated invoice {number} (ID: {invoice_id}) with {len(items)} items")
        return SaveResult(invoice_id=invoice_id, number=number, created=False)

    def _create(
        self,
        db: Session,
        owner_id: str,
        submitted_number: Optional[str],
        header: Dict[str, Any],
        items: List[Dict[str, Any]],
        today: date,
    ) -> SaveResult:
        key = scope_key(today)
        # The counter is the source of truth; a submitted number is only a preview
        sequence = self.counter.increment_and_get(db, key)
        number = format_base(sequence, today)

        try:
            invoice = Invoice(owner_id=owner_id, number=number, **header)
            db.add(invoice)
            db.flush()
            invoice_id = invoice.id
            self._insert_items(db, invoice_id, items)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(
                f"Failed to store invoice {number} (scope {key}); sequence {sequence} is not reused: {str(e)}",
                exc_info=True,
            )
            raise PersistenceError(
                "Failed to store invoice",
                scope_key=key,
                submitted_number=submitted_number,
                final_number=number,
            ) from e

        renumbered = None
        if submitted_number and submitted_number != number:
            renumbered = ConcurrencyRenumbered(key, submitted_number, number)
            logger.warning(f"Invoice saved as {number} instead of submitted {submitted_number}")

        logger.info(f"Created invoice {number} (ID: {invoice_id}) with {len(items)} items")
        return SaveResult(invoice_id=invoice_id, number=number, created=True, renumbered=renumbered)

    def _insert_items(self, db: Session, invoice_id: int, items: List[Dict[str, Any]]) -> None:
        db.add_all([
            InvoiceItem(invoice_id=invoice_id, position=position, **item)
            for position, item in enumerate(items, start=1)
        ])
        db.flush()

    def get_invoice(self, db: Session, invoice_id: int, owner_id: str, is_admin: bool = False) -> Optional[Invoice]:
        query = (
            db.query(Invoice)
            .options(joinedload(Invoice.company), selectinload(Invoice.items))
            .filter(Invoice.id == invoice_id)
        )
        if not is_admin:
            query = query.filter(Invoice.owner_id == owner_id)
        return query.first()

    def list_invoices(
        self,
        db: Session,
        owner_id: str,
        page: int = 0,
        page_size: int = 20,
        is_admin: bool = False,
    ) -> Tuple[List[Invoice], int]:
        """Newest first; admins see every owner's invoices"""
        query = db.query(Invoice)
        if not is_admin:
            query = query.filter(Invoice.owner_id == owner_id)

        total = query.count()
        invoices = (
            query.options(joinedload(Invoice.company), selectinload(Invoice.items))
            .order_by(Invoice.created_at.desc(), Invoice.id.desc())
            .offset(page * page_size)
            .limit(page_size)
            .all()
        )
        return invoices, total

    def delete_invoice(self, db: Session, invoice_id: int, owner_id: str, is_admin: bool = False) -> bool:
        invoice = self.get_invoice(db, invoice_id, owner_id, is_admin)
        if invoice is None:
            return False

        number = invoice.number
        try:
            db.delete(invoice)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Failed to delete invoice {invoice_id}: {str(e)}")
            raise PersistenceError("Failed to delete invoice", final_number=number) from e

        logger.info(f"Deleted invoice {number} (ID: {invoice_id})")
        return True


invoice_service = InvoiceService()
