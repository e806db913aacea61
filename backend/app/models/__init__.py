from app.models.company import Company
from app.models.counter import CounterScope
from app.models.invoice import Invoice, InvoiceType
from app.models.invoice_item import InvoiceItem

__all__ = ["Company", "CounterScope", "Invoice", "InvoiceType", "InvoiceItem"]
