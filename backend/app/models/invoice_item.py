from sqlalchemy import Column, Integer, String, Numeric, ForeignKey
from sqlalchemy.orm import relationship
from app.database import Base


class InvoiceItem(Base):
    __tablename__ = "invoice_items"

    id = Column(Integer, primary_key=True, index=True)
    invoice_id = Column(Integer, ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False)
    designation = Column(String, nullable=False)
    quantity = Column(Numeric(12, 3), nullable=False)
    unit = Column(String, nullable=True)
    price = Column(Numeric(14, 2), nullable=False)  # Unit price before markup
    total_price = Column(Numeric(14, 2), nullable=False)  # quantity * price, before markup

    # Relationships
    invoice = relationship("Invoice", back_populates="items")
