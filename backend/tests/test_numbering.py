"""Tests for app.services.numbering: base numbers, company/type prefixes, adaptation."""
from datetime import date

import pytest

from app.models.company import Company
from app.models.invoice import InvoiceType
from app.services.counter_service import scope_key
from app.services.numbering import adapt, company_prefix, format_base, type_prefix

JAN_15 = date(2025, 1, 15)


def company(display_name):
    return Company(id="c", name=display_name, display_name=display_name)


class TestScopeKey:
    def test_year_and_month(self):
        assert scope_key(JAN_15) == "2501"

    def test_same_month_shares_scope(self):
        assert scope_key(date(2025, 1, 1)) == scope_key(date(2025, 1, 31))

    def test_month_boundary_changes_scope(self):
        assert scope_key(date(2025, 2, 1)) == "2502"
        assert scope_key(date(2024, 12, 31)) == "2412"


class TestFormatBase:
    def test_pads_to_four_digits(self):
        assert format_base(1, JAN_15) == "FAC-2501-0001"

    def test_four_digit_sequence(self):
        assert format_base(9999, JAN_15) == "FAC-2501-9999"

    def test_long_sequence_is_not_truncated(self):
        assert format_base(12345, JAN_15) == "FAC-2501-12345"


class TestCompanyPrefix:
    def test_single_significant_word_keeps_three_letters(self):
        assert company_prefix(company("ETS MLF")) == "MLF"

    def test_initials_skip_stop_words(self):
        assert company_prefix(company("LES BOUTIQUES THIERNODJO & FRERE")) == "BT"

    def test_hyphen_splits_words(self):
        assert company_prefix(company("Jean-Pierre Diallo Transport")) == "JPDT"

    def test_case_insensitive(self):
        assert company_prefix(company("kankan distribution sarl")) == "KD"

    def test_accented_stop_word(self):
        assert company_prefix(company("MOUCTAR & FRÈRES")) == "MOU"

    def test_all_words_filtered_falls_back_to_name(self):
        assert company_prefix(company("les et")) == "LES"

    def test_falls_back_to_name_when_display_name_missing(self):
        assert company_prefix(Company(id="c", name="Barry Import Export", display_name=None)) == "BIE"


class TestTypePrefix:
    @pytest.mark.parametrize(
        "invoice_type, expected",
        [
            (InvoiceType.PROFORMA, "PRO"),
            (InvoiceType.DEFINITIVE, "DEF"),
            (InvoiceType.BON_LIVRAISON, "BL"),
            (InvoiceType.SIMPLE, "FAC"),
            ("definitive", "DEF"),
        ],
    )
    def test_known_types(self, invoice_type, expected):
        assert type_prefix(invoice_type) == expected

    def test_unknown_type_defaults_to_fac(self):
        assert type_prefix("avoir") == "FAC"
        assert type_prefix(None) == "FAC"


class TestAdapt:
    def test_rebrands_base_number(self):
        assert adapt("FAC-2501-0001", company("ETS MLF"), InvoiceType.DEFINITIVE) == "MLFDEF-2501-0001"

    def test_delivery_note(self):
        result = adapt("FAC-2501-0042", company("LES BOUTIQUES THIERNODJO & FRERE"), InvoiceType.BON_LIVRAISON)
        assert result == "BTBL-2501-0042"

    def test_already_adapted_is_unchanged(self):
        assert adapt("MLFDEF-2501-0001", company("ETS MLF"), InvoiceType.DEFINITIVE) == "MLFDEF-2501-0001"

    def test_adapting_twice_is_a_no_op(self):
        once = adapt("FAC-2501-0001", company("ETS MLF"), InvoiceType.PROFORMA)
        assert adapt(once, company("ETS MLF"), InvoiceType.PROFORMA) == once

    def test_foreign_format_passes_through(self):
        assert adapt("INV-2024-0007", company("ETS MLF"), InvoiceType.SIMPLE) == "INV-2024-0007"

    def test_only_leading_prefix_is_replaced(self):
        assert adapt("FAC-2501-0001", company("ETS MLF"), InvoiceType.SIMPLE) == "MLFFAC-2501-0001"
