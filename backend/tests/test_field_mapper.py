"""Tests for app.services.field_mapper: display <-> persisted field names."""
from decimal import Decimal

from app.services.field_mapper import FieldMapper


class TestItemMapping:
    def test_display_to_persisted(self):
        row = FieldMapper.item_to_persisted({
            "designation": "Riz",
            "quantity": Decimal("2"),
            "unit": "sac",
            "unitPrice": Decimal("1200"),
            "totalPrice": Decimal("2400"),
        })
        assert row == {
            "designation": "Riz",
            "quantity": Decimal("2"),
            "unit": "sac",
            "price": Decimal("1200"),
            "total_price": Decimal("2400"),
        }

    def test_persisted_to_display(self):
        item = FieldMapper.item_to_display({"designation": "Riz", "price": 1200, "total_price": 2400})
        assert item == {"designation": "Riz", "unitPrice": 1200, "totalPrice": 2400}

    def test_unknown_fields_are_dropped(self):
        assert FieldMapper.item_to_persisted({"designation": "Riz", "delivered": True}) == {"designation": "Riz"}

    def test_mapping_tables_are_inverse(self):
        for display, column in FieldMapper.ITEM_FIELD_MAP.items():
            assert FieldMapper.ITEM_DISPLAY_MAP[column] == display
        for display, column in FieldMapper.INVOICE_FIELD_MAP.items():
            assert FieldMapper.INVOICE_DISPLAY_MAP[column] == display

    def test_items_to_display(self):
        rows = [{"price": 1}, {"price": 2}]
        assert FieldMapper.items_to_display(rows) == [{"unitPrice": 1}, {"unitPrice": 2}]


class TestInvoiceMapping:
    def test_header_to_persisted(self):
        header = FieldMapper.invoice_to_persisted({
            "number": "FAC-2501-0001",
            "companyId": "ets-mlf",
            "clientName": "Abdoul Hamid",
            "amountPaid": 500,
        })
        assert header == {
            "number": "FAC-2501-0001",
            "company_id": "ets-mlf",
            "client_name": "Abdoul Hamid",
            "amount_paid": 500,
        }

    def test_header_to_display(self):
        header = FieldMapper.invoice_to_display({"client_address": "Labé", "total_amount": 3400})
        assert header == {"clientAddress": "Labé", "totalAmount": 3400}
