"""
Dashboard Service - Revenue figures for the home screen.

Weeks run Sunday to Saturday and are numbered from the week containing
January 1st.
"""
import logging
from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List, Optional, Tuple
from sqlalchemy.orm import Session

from app.config import settings
from app.models.invoice import Invoice

logger = logging.getLogger(__name__)


def week_of(day: date) -> Tuple[int, int]:
    """Return ``(year, week)`` for *day*, weeks starting on Sunday"""
    jan1 = date(day.year, 1, 1)
    jan1_weekday = (jan1.weekday() + 1) % 7  # Sunday = 0
    day_of_year = (day - jan1).days
    week = (day_of_year + jan1_weekday) // 7 + 1
    return day.year, week


def empty_weeks(today: date, weeks: int) -> Dict[Tuple[int, int], Dict]:
    """Ordered buckets for the last *weeks* weeks, oldest first"""
    buckets = {}
    for offset in range(weeks - 1, -1, -1):
        year, week = week_of(today - timedelta(weeks=offset))
        buckets[(year, week)] = {
            "label": f"Sem {week:02d}",
            "year": year,
            "week": week,
            "revenue": Decimal("0"),
        }
    return buckets


def aggregate_by_week(invoices: Iterable[Invoice], buckets: Dict[Tuple[int, int], Dict]) -> List[Dict]:
    for invoice in invoices:
        day = invoice.date or (invoice.created_at.date() if invoice.created_at else None)
        if day is None:
            continue
        bucket = buckets.get(week_of(day))
        if bucket is not None:
            bucket["revenue"] += invoice.total_amount or Decimal("0")
    return list(buckets.values())


def financial_metrics(revenue: Decimal, invoice_count: int, amount_paid: Decimal) -> Dict[str, Decimal]:
    cents = Decimal("0.01")
    average_basket = revenue / invoice_count if invoice_count > 0 else Decimal("0")
    recovery_rate = amount_paid / revenue * 100 if revenue > 0 else Decimal("0")
    return {
        "average_basket": average_basket.quantize(cents, rounding=ROUND_HALF_UP),
        "recovery_rate": recovery_rate.quantize(cents, rounding=ROUND_HALF_UP),
        "outstanding": revenue - amount_paid,
    }


def build_summary(
    db: Session,
    owner_id: str,
    is_admin: bool = False,
    today: Optional[date] = None,
) -> Dict:
    today = today or date.today()
    query = db.query(Invoice)
    if not is_admin:
        query = query.filter(Invoice.owner_id == owner_id)
    invoices = query.all()

    revenue = sum((invoice.total_amount or Decimal("0") for invoice in invoices), Decimal("0"))
    amount_paid = sum((invoice.amount_paid or Decimal("0") for invoice in invoices), Decimal("0"))

    summary = {
        "invoice_count": len(invoices),
        "revenue": revenue,
        "amount_paid": amount_paid,
        "weekly_revenue": aggregate_by_week(invoices, empty_weeks(today, settings.dashboard_weeks)),
    }
    summary.update(financial_metrics(revenue, len(invoices), amount_paid))
    logger.info(f"Dashboard summary for {'all owners' if is_admin else owner_id}: {len(invoices)} invoices")
    return summary
