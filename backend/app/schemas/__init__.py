from app.schemas.invoice import (
    InvoiceDraft,
    InvoiceItemDraft,
    ClientDraft,
    SaveInvoiceRequest,
    SaveInvoiceResponse,
    NextNumberResponse,
    InvoiceSummary,
    InvoiceDetail,
    InvoicePage,
    InvoiceDocument,
)
from app.schemas.company import CompanyResponse
from app.schemas.dashboard import DashboardSummary, WeeklyRevenue

__all__ = [
    "InvoiceDraft",
    "InvoiceItemDraft",
    "ClientDraft",
    "SaveInvoiceRequest",
    "SaveInvoiceResponse",
    "NextNumberResponse",
    "InvoiceSummary",
    "InvoiceDetail",
    "InvoicePage",
    "InvoiceDocument",
    "CompanyResponse",
    "DashboardSummary",
    "WeeklyRevenue",
]
