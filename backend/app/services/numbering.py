"""
Invoice number formatting.

Stored numbers are always in the generic base form ``FAC-YYMM-NNNN``. The
company/type re-branded form (``MLFDEF-YYMM-NNNN``) is for display only.
"""
import re
from datetime import date
from typing import Any, Optional

from app.config import settings
from app.models.invoice import InvoiceType
from app.services.counter_service import scope_key

BASE_PREFIX = f"{settings.invoice_base_prefix}-"

# Determiners, conjunctions and legal-form words that never contribute an initial
IGNORED_WORDS = frozenset({
    "LES", "LE", "LA", "ET", "&", "DE", "DES", "DU",
    "FRERE", "FRERES", "FRÈRE", "FRÈRES",
    "ETS", "SARL", "SA", "SAS",
})

TYPE_PREFIXES = {
    InvoiceType.PROFORMA: "PRO",
    InvoiceType.DEFINITIVE: "DEF",
    InvoiceType.BON_LIVRAISON: "BL",
    InvoiceType.SIMPLE: "FAC",
}

_WORD_SEPARATORS = re.compile(r"[\s\-]+")


def format_base(sequence: int, on_date: Optional[date] = None) -> str:
    """
    Return the generic number for *sequence*, e.g. ``FAC-2501-0001``.

    Sequences are zero-padded to four digits; longer sequences keep every digit.
    """
    return f"{BASE_PREFIX}{scope_key(on_date)}-{sequence:04d}"


def company_prefix(company: Any) -> str:
    """
    Derive the initials used to brand a company's invoice numbers.

    "LES BOUTIQUES THIERNODJO & FRERE" -> "BT". Initials alone would reduce a
    one-word name to a single letter, so a single significant word keeps its first
    three letters instead: "ETS MLF" -> "MLF", "MOUCTAR & FRÈRES" -> "MOU". With no
    significant word at all the first three letters of the name are used.
    """
    name = getattr(company, "display_name", None) or company.name
    words = [
        word for word in _WORD_SEPARATORS.split(name.upper())
        if word and word not in IGNORED_WORDS
    ]

    if len(words) == 1:
        return words[0][:3]
    initials = "".join(word[0] for word in words)
    return initials if initials else name[:3].upper()


def type_prefix(invoice_type: Any) -> str:
    try:
        return TYPE_PREFIXES.get(InvoiceType(invoice_type), "FAC")
    except ValueError:
        return "FAC"


def adapt(base_number: str, company: Any, invoice_type: Any) -> str:
    """
    Re-brand a base number for display: ``FAC-2501-0001`` -> ``MLFDEF-2501-0001``.

    Numbers not in base form (already adapted, or foreign) pass through unchanged.
    """
    if not base_number.startswith(BASE_PREFIX):
        return base_number
    return f"{company_prefix(company)}{type_prefix(invoice_type)}-{base_number[len(BASE_PREFIX):]}"
