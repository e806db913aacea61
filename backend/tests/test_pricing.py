"""Tests for app.services.pricing: markup and rounding to the nearest 500."""
from decimal import Decimal
from types import SimpleNamespace

from app.services.pricing import adjust, document_total, line_total


class TestAdjust:
    def test_zero_markup_returns_price_untouched(self):
        assert adjust(1000, 0) == 1000

    def test_zero_markup_does_not_round(self):
        assert adjust(1250, 0) == 1250
        price = 1234.5
        assert adjust(price, 0) is price

    def test_rounds_up_to_nearest_500(self):
        # 1200 * 1.10 = 1320 -> 2.64 * 500 -> 3 * 500
        assert adjust(1200, 10) == 1500

    def test_rounds_down_to_nearest_500(self):
        # 1000 * 1.15 = 1150 -> 2.3 * 500 -> 2 * 500
        assert adjust(1000, 15) == 1000

    def test_exact_half_rounds_up(self):
        # 1000 * 1.25 = 1250, exactly 250 above 1000
        assert adjust(1000, 25) == 1500
        # 600 * 1.25 = 750, exactly 250 above 500
        assert adjust(600, 25) == 1000

    def test_just_below_half_rounds_down(self):
        # 1000 * 1.249 = 1249
        assert adjust(1000, Decimal("24.9")) == 1000

    def test_float_inputs_are_exact(self):
        assert adjust(1200.0, 10.0) == Decimal("1500")

    def test_decimal_inputs(self):
        assert adjust(Decimal("1200.00"), Decimal("10.00")) == Decimal("1500")

    def test_full_markup(self):
        assert adjust(2000, 100) == 4000


class TestLineTotal:
    def test_adjusted_price_times_quantity(self):
        assert line_total(1200, 3, 10) == Decimal("4500")

    def test_quantity_is_not_rounded(self):
        assert line_total(1200, Decimal("1.5"), 10) == Decimal("2250")
        assert line_total(1000, Decimal("2.5"), 0) == Decimal("2500")

    def test_zero_quantity(self):
        assert line_total(1200, 0, 10) == 0


class TestDocumentTotal:
    def test_sums_adjusted_lines(self):
        items = [
            SimpleNamespace(price=Decimal("1200"), quantity=Decimal("2")),
            SimpleNamespace(price=Decimal("1000"), quantity=Decimal("1")),
        ]
        # 1500 * 2 + 1000 * 1
        assert document_total(items, 10) == Decimal("4000")

    def test_empty_document(self):
        assert document_total([], 15) == Decimal("0")
