from sqlalchemy import Column, String, Numeric, Boolean, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base


class Company(Base):
    """Issuing company; read-only for the invoicing core"""
    __tablename__ = "companies"

    id = Column(String(64), primary_key=True, index=True)  # Slug, e.g. "ets-mlf"
    name = Column(String, nullable=False)
    display_name = Column(String, nullable=False)
    business_type = Column(String, nullable=True)
    address = Column(String, nullable=True)
    nif = Column(String, nullable=True)  # Tax identification number
    registration_numbers = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    email = Column(String, nullable=True)
    markup_percentage = Column(Numeric(5, 2), nullable=False, default=0)  # 0-100, applied to unit prices
    template_id = Column(String, nullable=False, default="template_standard")
    is_default = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    invoices = relationship("Invoice", back_populates="company")
