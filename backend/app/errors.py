"""
Error taxonomy for the invoicing core.

Every error carries enough context (scope key, submitted vs. final number)
for the API layer to render a message. See ``app.main`` for the HTTP mapping.
"""
from typing import Any, Dict, List, Optional


class InvoicingError(Exception):
    """Base class for invoicing failures"""

    status_code = 500

    def __init__(self, message: str, **context: Any):
        super().__init__(message)
        self.message = message
        self.context = {key: value for key, value in context.items() if value is not None}

    def to_dict(self) -> Dict[str, Any]:
        return {"detail": self.message, "context": self.context}


class ValidationError(InvoicingError):
    """Malformed draft, rejected before the counter or the store is touched"""

    status_code = 422

    def __init__(self, message: str, errors: Optional[List[Dict[str, str]]] = None):
        super().__init__(message)
        self.errors = errors or []
        if self.errors:
            self.context["errors"] = self.errors


class CounterUnavailable(InvoicingError):
    """The sequence counter could not be read or incremented"""

    status_code = 503

    def __init__(self, scope_key: str, reason: Optional[str] = None):
        super().__init__(
            f"Invoice counter unavailable for scope {scope_key}",
            scope_key=scope_key,
            reason=reason,
        )
        self.scope_key = scope_key


class ConcurrencyRenumbered(InvoicingError):
    """
    Informational notice: a new invoice was stored under a freshly minted
    number that differs from the one the caller submitted.

    Never raised; it travels on ``SaveResult.renumbered``.
    """

    status_code = 200

    def __init__(self, scope_key: str, submitted_number: str, final_number: str):
        super().__init__(
            f"Invoice number changed from {submitted_number} to {final_number}",
            scope_key=scope_key,
            submitted_number=submitted_number,
            final_number=final_number,
        )
        self.scope_key = scope_key
        self.submitted_number = submitted_number
        self.final_number = final_number


class PersistenceError(InvoicingError):
    """Header or item write failed; a reserved sequence number is not reclaimed"""

    status_code = 500

    def __init__(
        self,
        message: str,
        scope_key: Optional[str] = None,
        submitted_number: Optional[str] = None,
        final_number: Optional[str] = None,
    ):
        super().__init__(
            message,
            scope_key=scope_key,
            submitted_number=submitted_number,
            final_number=final_number,
        )


class InvoiceNotFound(InvoicingError):
    status_code = 404

    def __init__(self, invoice_id: int):
        super().__init__(f"Invoice {invoice_id} not found", invoice_id=invoice_id)


class CompanyNotFound(InvoicingError):
    status_code = 404

    def __init__(self, company_id: str):
        super().__init__(f"Company {company_id} not found", company_id=company_id)
