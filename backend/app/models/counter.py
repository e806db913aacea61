from sqlalchemy import Column, Integer, String, DateTime, CheckConstraint
from sqlalchemy.sql import func
from app.database import Base


class CounterScope(Base):
    """One sequence counter per period scope (YYMM); rows are never deleted"""
    __tablename__ = "counters"
    __table_args__ = (
        CheckConstraint("last_sequence >= 0", name="ck_counters_last_sequence_non_negative"),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(32), nullable=False, unique=True, index=True)  # Scope key, e.g. "2501"
    last_sequence = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
