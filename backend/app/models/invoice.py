from sqlalchemy import Column, Integer, String, Numeric, ForeignKey, DateTime, Date, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from enum import Enum
from app.database import Base


class InvoiceType(str, Enum):
    """Kinds of documents an invoice can be printed as"""
    PROFORMA = "proforma"
    DEFINITIVE = "definitive"
    BON_LIVRAISON = "bon_livraison"
    SIMPLE = "simple"


class Invoice(Base):
    __tablename__ = "invoices"
    __table_args__ = (
        # Business key: re-saving under the same number updates the row in place
        UniqueConstraint("owner_id", "number", name="uq_invoices_owner_number"),
    )

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(String, nullable=False, index=True)
    number = Column(String, nullable=False, index=True)
    company_id = Column(String(64), ForeignKey("companies.id"), nullable=False, index=True)
    type = Column(String(20), nullable=False, default=InvoiceType.SIMPLE.value)
    date = Column(Date, nullable=False)  # Date of the last save
    client_name = Column(String, nullable=False)
    client_address = Column(String, nullable=True)
    amount_paid = Column(Numeric(14, 2), nullable=False, default=0)
    total_amount = Column(Numeric(14, 2), nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    company = relationship("Company", back_populates="invoices")
    items = relationship(
        "InvoiceItem",
        back_populates="invoice",
        cascade="all, delete-orphan",
        order_by="InvoiceItem.position",
    )
