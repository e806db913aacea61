from pydantic import BaseModel
from typing import Optional
from decimal import Decimal


class CompanyResponse(BaseModel):
    id: str
    name: str
    display_name: str
    business_type: Optional[str]
    address: Optional[str]
    phone: Optional[str]
    email: Optional[str]
    markup_percentage: Decimal
    template_id: str
    is_default: bool
    invoice_prefix: Optional[str] = None

    class Config:
        from_attributes = True
