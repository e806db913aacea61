"""Tests for app.utils.text and app.utils.number_words."""
from decimal import Decimal

import pytest

from app.utils.number_words import amount_in_words, number_to_words
from app.utils.text import normalize_text


class TestNormalizeText:
    def test_proper_case_and_whitespace(self):
        assert normalize_text("  aBdouL   HamId  ") == "Abdoul Hamid"

    def test_tabs_and_newlines_collapse(self):
        assert normalize_text("riz\t\nparfumé") == "Riz Parfumé"

    def test_empty(self):
        assert normalize_text("") == ""
        assert normalize_text("   ") == ""


class TestNumberToWords:
    @pytest.mark.parametrize(
        "number, expected",
        [
            (0, "zéro"),
            (1, "un"),
            (16, "seize"),
            (17, "dix-sept"),
            (21, "vingt et un"),
            (45, "quarante-cinq"),
            (70, "soixante-dix"),
            (71, "soixante et onze"),
            (72, "soixante-douze"),
            (80, "quatre-vingts"),
            (81, "quatre-vingt-un"),
            (91, "quatre-vingt-onze"),
            (99, "quatre-vingt-dix-neuf"),
            (100, "cent"),
            (200, "deux cents"),
            (201, "deux cent un"),
            (1000, "mille"),
            (1500, "mille cinq cents"),
            (2000, "deux mille"),
            (80000, "quatre-vingt mille"),
            (200000, "deux cent mille"),
            (1000000, "un million"),
            (2500000, "deux millions cinq cent mille"),
            (3000000000, "trois milliards"),
        ],
    )
    def test_spelling(self, number, expected):
        assert number_to_words(number) == expected

    def test_decimal_uses_integer_part(self):
        assert number_to_words(Decimal("1500.75")) == "mille cinq cents"


class TestAmountInWords:
    def test_capitalized_with_currency(self):
        assert amount_in_words(1500) == "Mille cinq cents GNF"

    def test_custom_currency(self):
        assert amount_in_words(Decimal("3000"), "francs guinéens") == "Trois mille francs guinéens"
