from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Float, ForeignKey, Index, Integer, String

from stockmetrics.database.base import Base


class Item(Base):
    __tablename__ = "items"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)

    # no FK: categories live in a separate CRUD area and may be deleted under us
    category_id = Column(Integer)

    reorder_point = Column(Integer)
    unit_price = Column(Float, nullable=False, default=0)
    is_archived = Column(Boolean, nullable=False, default=False)

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    __table_args__ = (
        Index("idx_items_name", "name"),
    )


__all__ = ["Item"]
