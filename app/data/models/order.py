from sqlalchemy import Column, Integer, ForeignKey, String, DateTime, Numeric, JSON
from datetime import datetime, timezone

from app.data.database import Base


def _now():
    return datetime.now(timezone.utc)


class OrderModel(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # snapshot linii [{"productId": ..., "quantity": ...}], bez powiazania z koszykiem
    products = Column(JSON, nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    address = Column(JSON, nullable=False)

    status = Column(String, nullable=False, default="pending")  # pending, shipped, delivered
    created_at = Column(DateTime(timezone=True), nullable=False, default=_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_now, onupdate=_now)
