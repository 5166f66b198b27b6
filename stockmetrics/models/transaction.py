from sqlalchemy import Column, DateTime, Float, Index, Integer, String

from stockmetrics.database.base import Base


class Transaction(Base):
    """Append-only stock movement. Rows are never updated once written."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    item_id = Column(Integer)

    type = Column(String, nullable=False)
    quantity = Column(Float, nullable=False)
    unit_price = Column(Float)
    total_value = Column(Float, nullable=False, default=0)

    # stored as UTC
    created_at = Column(DateTime(timezone=True), nullable=False)

    supplier_customer = Column(String)
    reference_number = Column(String)
    notes = Column(String)

    __table_args__ = (
        Index("idx_transactions_item_date", "item_id", "created_at"),
        Index("idx_transactions_date", "created_at"),
    )


__all__ = ["Transaction"]
