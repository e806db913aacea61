"""
Document Service - Data behind the printable invoice templates.

Every template shows the same marked-up prices: unit prices go through the
price adjuster with the issuing company's markup, totals are sums of adjusted
line totals.
"""
import logging
from decimal import Decimal
from typing import Dict, Any

from app.config import settings
from app.models.invoice import Invoice, InvoiceType
from app.services import pricing
from app.services.numbering import adapt
from app.utils.number_words import amount_in_words

logger = logging.getLogger(__name__)

DOCUMENT_TITLES = {
    InvoiceType.PROFORMA: "FACTURE PROFORMA",
    InvoiceType.DEFINITIVE: "FACTURE DEFINITIVE",
    InvoiceType.BON_LIVRAISON: "BON DE LIVRAISON",
    InvoiceType.SIMPLE: "FACTURE",
}


def document_title(invoice_type: str) -> str:
    try:
        return DOCUMENT_TITLES[InvoiceType(invoice_type)]
    except ValueError:
        return DOCUMENT_TITLES[InvoiceType.SIMPLE]


def build_document(invoice: Invoice) -> Dict[str, Any]:
    """Assemble everything a template renders for *invoice*"""
    company = invoice.company
    markup = company.markup_percentage or Decimal("0")

    lines = []
    for item in invoice.items:
        lines.append({
            "designation": item.designation,
            "quantity": item.quantity,
            "unit": item.unit,
            "unit_price": pricing.to_decimal(pricing.adjust(item.price, markup)),
            "total_price": pricing.line_total(item.price, item.quantity, markup),
        })

    total = pricing.document_total(invoice.items, markup)
    amount_paid = invoice.amount_paid or Decimal("0")

    logger.debug(f"Built document for invoice {invoice.number} with markup {markup}%")

    return {
        "template_id": company.template_id,
        "title": document_title(invoice.type),
        "number": invoice.number,
        "display_number": adapt(invoice.number, company, invoice.type),
        "invoice_date": invoice.date,
        "company": {
            "id": company.id,
            "display_name": company.display_name,
            "business_type": company.business_type,
            "address": company.address,
            "nif": company.nif,
            "registration_numbers": company.registration_numbers,
            "phone": company.phone,
            "email": company.email,
        },
        "client_name": invoice.client_name,
        "client_address": invoice.client_address,
        "lines": lines,
        "markup_percentage": markup,
        "total": total,
        "amount_paid": amount_paid,
        "balance_due": total - amount_paid,
        "amount_in_words": amount_in_words(total, settings.currency),
        "currency": settings.currency,
    }
