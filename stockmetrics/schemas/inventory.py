from datetime import datetime
from enum import Enum
from typing import List, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from stockmetrics.core.dates import normalize_datetime

EntityId = Union[int, str]


class TransactionType(str, Enum):
    STOCK_IN = "stock_in"
    STOCK_OUT = "stock_out"


class CategoryRead(BaseModel):
    id: EntityId
    name: str

    model_config = ConfigDict(from_attributes=True)


class ItemRead(BaseModel):
    id: EntityId
    name: str
    category_id: Optional[EntityId] = None
    reorder_point: Optional[int] = Field(
        default=None,
        ge=0,
        validation_alias=AliasChoices("reorder_point", "low_stock_threshold"),
    )
    unit_price: float = 0.0
    is_archived: bool = False
    category: Optional[CategoryRead] = None

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class TransactionRecord(BaseModel):
    """One immutable entry of the stock-in / stock-out log."""

    id: EntityId
    item_id: Optional[EntityId] = None
    type: TransactionType
    quantity: float
    total_value: float = 0.0
    created_at: datetime = Field(
        validation_alias=AliasChoices("created_at", "transaction_date"),
    )
    unit_price: Optional[float] = None
    supplier_customer: Optional[str] = None
    reference_number: Optional[str] = None
    notes: Optional[str] = None

    model_config = ConfigDict(from_attributes=True, populate_by_name=True, frozen=True)

    @field_validator("created_at", mode="before")
    @classmethod
    def _aware_created_at(cls, value):
        normalized = normalize_datetime(value)
        if normalized is None:
            raise ValueError("created_at must be a datetime or ISO timestamp")
        return normalized


class StockLevel(BaseModel):
    item_id: EntityId
    current_quantity: float = 0.0
    average_unit_cost: float = 0.0
    total_value: float = 0.0
    last_transaction_date: Optional[datetime] = None
    item: Optional[ItemRead] = None


class LowStockItem(ItemRead):
    current_quantity: float
    effective_reorder_point: int
    out_of_stock: bool = False
    oversold: bool = False


class ValuationBatch(BaseModel):
    quantity: float
    unit_price: float
    date: datetime


class ItemValuation(BaseModel):
    item_id: EntityId
    item_name: str
    current_stock: float
    total_value: float
    method: str
    batches: List[ValuationBatch] = Field(default_factory=list)


class InventoryValuation(BaseModel):
    items: List[ItemValuation] = Field(default_factory=list)
    total_value: float = 0.0
    method: str


__all__ = [
    "CategoryRead",
    "EntityId",
    "InventoryValuation",
    "ItemRead",
    "ItemValuation",
    "LowStockItem",
    "StockLevel",
    "TransactionRecord",
    "TransactionType",
    "ValuationBatch",
]
