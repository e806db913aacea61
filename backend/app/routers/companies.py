from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from app.database import get_db
from app.errors import CompanyNotFound
from app.models.company import Company
from app.schemas.company import CompanyResponse
from app.services.numbering import company_prefix

router = APIRouter(prefix="/api/companies", tags=["companies"])


def _to_response(company: Company) -> CompanyResponse:
    response = CompanyResponse.model_validate(company)
    response.invoice_prefix = company_prefix(company)
    return response


@router.get("", response_model=List[CompanyResponse])
def list_companies(db: Session = Depends(get_db)):
    """List all companies, default first"""
    companies = db.query(Company).order_by(Company.is_default.desc(), Company.display_name).all()
    return [_to_response(company) for company in companies]


@router.get("/{company_id}", response_model=CompanyResponse)
def get_company(company_id: str, db: Session = Depends(get_db)):
    company = db.get(Company, company_id)
    if company is None:
        raise CompanyNotFound(company_id)
    return _to_response(company)
