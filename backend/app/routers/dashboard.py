from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.dependencies import CurrentUser, get_current_user
from app.schemas.dashboard import DashboardSummary
from app.services.dashboard_service import build_summary

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("/summary", response_model=DashboardSummary)
def dashboard_summary(
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Revenue, collections and weekly revenue for the caller's invoices"""
    return build_summary(db, user.id, user.is_admin)
