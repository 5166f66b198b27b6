from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class MetricsSnapshot(BaseModel):
    total_stock_in: float = Field(0.0, alias="totalStockIn")
    total_stock_out: float = Field(0.0, alias="totalStockOut")
    revenue_spent_on_stock_in: float = Field(0.0, alias="revenueSpentOnStockIn")
    revenue_earned_from_stock_out: float = Field(
        0.0, alias="revenueEarnedFromStockOut"
    )

    model_config = ConfigDict(populate_by_name=True)


class TrendBucket(BaseModel):
    period: str
    stock_in: float = Field(0.0, alias="stockIn")
    stock_out: float = Field(0.0, alias="stockOut")
    revenue_in: float = Field(0.0, alias="revenueIn")
    revenue_out: float = Field(0.0, alias="revenueOut")
    # earliest transaction in the bucket; labels alone do not sort chronologically
    starts_at: Optional[datetime] = Field(None, alias="startsAt")

    model_config = ConfigDict(populate_by_name=True)


class DashboardOverview(BaseModel):
    period: str
    label: str
    start: datetime
    end: datetime
    metrics: MetricsSnapshot
    trends: List[TrendBucket] = Field(default_factory=list)


__all__ = ["DashboardOverview", "MetricsSnapshot", "TrendBucket"]
