from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from typing import Optional, List
from datetime import date, datetime
from decimal import Decimal
from app.models.invoice import InvoiceType


class DisplayModel(BaseModel):
    """Display-side shape: camelCase on the wire, snake_case in Python"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


# Draft (request) schemas
class InvoiceItemDraft(DisplayModel):
    designation: str
    quantity: Decimal = Field(..., ge=0)
    unit: Optional[str] = None
    unit_price: Decimal = Field(..., ge=0)
    total_price: Optional[Decimal] = None  # Recomputed as quantity * unit_price on save


class ClientDraft(DisplayModel):
    name: str
    address: Optional[str] = None


class InvoiceDraft(DisplayModel):
    number: Optional[str] = None  # Number shown to the user; None for a draft never previewed
    type: InvoiceType = InvoiceType.SIMPLE
    client: ClientDraft
    items: List[InvoiceItemDraft] = []
    amount_paid: Optional[Decimal] = None


class SaveInvoiceRequest(DisplayModel):
    draft: InvoiceDraft
    company_id: str
    total_amount: Decimal = Field(..., ge=0)


# Response schemas
class SaveInvoiceResponse(DisplayModel):
    id: int
    number: str
    created: bool
    renumbered: bool = False
    submitted_number: Optional[str] = None
    message: Optional[str] = None


class NextNumberResponse(DisplayModel):
    scope: str
    sequence: int
    number: str
    display_number: Optional[str] = None
    provisional: bool = True  # Not reserved; the number of record is assigned on save


class InvoiceItemResponse(DisplayModel):
    designation: str
    quantity: Decimal
    unit: Optional[str] = None
    unit_price: Decimal
    total_price: Decimal


class InvoiceSummary(DisplayModel):
    id: int
    number: str
    display_number: str
    company_id: str
    company_name: Optional[str] = None
    type: InvoiceType
    invoice_date: date = Field(..., alias="date")
    client_name: str
    amount_paid: Decimal
    total_amount: Decimal
    item_count: int
    created_at: Optional[datetime] = None


class InvoiceDetail(DisplayModel):
    id: int
    number: str
    display_number: str
    company_id: str
    type: InvoiceType
    invoice_date: date = Field(..., alias="date")
    client_name: str
    client_address: Optional[str] = None
    amount_paid: Decimal
    total_amount: Decimal
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    items: List[InvoiceItemResponse] = []


class InvoicePage(DisplayModel):
    items: List[InvoiceSummary]
    total: int
    page: int
    page_size: int


# Printable document
class DocumentLine(DisplayModel):
    designation: str
    quantity: Decimal
    unit: Optional[str] = None
    unit_price: Decimal  # After markup and rounding
    total_price: Decimal


class DocumentCompany(DisplayModel):
    id: str
    display_name: str
    business_type: Optional[str] = None
    address: Optional[str] = None
    nif: Optional[str] = None
    registration_numbers: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None


class InvoiceDocument(DisplayModel):
    template_id: str
    title: str
    number: str
    display_number: str
    invoice_date: date = Field(..., alias="date")
    company: DocumentCompany
    client_name: str
    client_address: Optional[str] = None
    lines: List[DocumentLine]
    markup_percentage: Decimal
    total: Decimal
    amount_paid: Decimal
    balance_due: Decimal
    amount_in_words: str
    currency: str
