"""
Field Mapper Service - Maps between the display model and the persisted model

The UI speaks in display names (``unitPrice``, ``clientName``...), the database
in column names (``price``, ``client_name``...). Every conversion in either
direction goes through the tables below.
"""
import logging
from typing import Dict, Any, Iterable, List

logger = logging.getLogger(__name__)


class FieldMapper:
    """Bidirectional display <-> persisted field mapping"""

    # Display name -> persisted column
    ITEM_FIELD_MAP = {
        "designation": "designation",
        "quantity": "quantity",
        "unit": "unit",
        "unitPrice": "price",
        "totalPrice": "total_price",
    }

    INVOICE_FIELD_MAP = {
        "id": "id",
        "number": "number",
        "companyId": "company_id",
        "type": "type",
        "date": "date",
        "clientName": "client_name",
        "clientAddress": "client_address",
        "amountPaid": "amount_paid",
        "totalAmount": "total_amount",
        "createdAt": "created_at",
        "updatedAt": "updated_at",
    }

    ITEM_DISPLAY_MAP = {column: name for name, column in ITEM_FIELD_MAP.items()}
    INVOICE_DISPLAY_MAP = {column: name for name, column in INVOICE_FIELD_MAP.items()}

    @staticmethod
    def _map(data: Dict[str, Any], mapping: Dict[str, str]) -> Dict[str, Any]:
        mapped = {}
        for key, value in data.items():
            if key in mapping:
                mapped[mapping[key]] = value
            else:
                logger.debug(f"Dropping unmapped field '{key}'")
        return mapped

    @classmethod
    def item_to_persisted(cls, item: Dict[str, Any]) -> Dict[str, Any]:
        """``{"unitPrice": 1000, ...}`` -> ``{"price": 1000, ...}``"""
        return cls._map(item, cls.ITEM_FIELD_MAP)

    @classmethod
    def item_to_display(cls, row: Dict[str, Any]) -> Dict[str, Any]:
        return cls._map(row, cls.ITEM_DISPLAY_MAP)

    @classmethod
    def items_to_display(cls, rows: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
        return [cls.item_to_display(row) for row in rows]

    @classmethod
    def invoice_to_persisted(cls, header: Dict[str, Any]) -> Dict[str, Any]:
        return cls._map(header, cls.INVOICE_FIELD_MAP)

    @classmethod
    def invoice_to_display(cls, row: Dict[str, Any]) -> Dict[str, Any]:
        return cls._map(row, cls.INVOICE_DISPLAY_MAP)

    @staticmethod
    def row_to_dict(row: Any, columns: Iterable[str]) -> Dict[str, Any]:
        """Read the given column attributes off an ORM row"""
        return {column: getattr(row, column) for column in columns}


field_mapper = FieldMapper()
