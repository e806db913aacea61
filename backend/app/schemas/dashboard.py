from pydantic import BaseModel
from typing import List
from decimal import Decimal


class WeeklyRevenue(BaseModel):
    label: str  # e.g. "Sem 07"
    year: int
    week: int
    revenue: Decimal


class DashboardSummary(BaseModel):
    invoice_count: int
    revenue: Decimal
    amount_paid: Decimal
    outstanding: Decimal
    average_basket: Decimal
    recovery_rate: Decimal  # Percentage of revenue already paid
    weekly_revenue: List[WeeklyRevenue] = []
