"""
Price adjustment shared by every document template.

A company's markup is applied to unit prices and the result rounded to the
nearest multiple of the rounding step (500), half-up, in exact decimal
arithmetic so that every template agrees on totals.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Union

from app.config import settings

Number = Union[int, float, Decimal]


def to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def adjust(price: Number, markup_percentage: Number) -> Number:
    """
    Apply *markup_percentage* to *price* and round to the nearest 500.

    A zero markup returns *price* untouched. The markup range is not re-validated.
    """
    if markup_percentage == 0:
        return price

    step = Decimal(settings.price_rounding_step)
    marked_up = to_decimal(price) * (1 + to_decimal(markup_percentage) / 100)
    return (marked_up / step).quantize(Decimal("1"), rounding=ROUND_HALF_UP) * step


def line_total(price: Number, quantity: Number, markup_percentage: Number) -> Decimal:
    """Adjusted unit price times quantity; the quantity is not rounded"""
    return to_decimal(adjust(price, markup_percentage)) * to_decimal(quantity)


def document_total(items: Iterable, markup_percentage: Number) -> Decimal:
    """Sum of adjusted line totals for items exposing ``price`` and ``quantity``"""
    return sum(
        (line_total(item.price, item.quantity, markup_percentage) for item in items),
        Decimal("0"),
    )
