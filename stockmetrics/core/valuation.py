"""
Lot-based inventory valuation.

Every stock-in opens a lot at its own unit price. Stock-outs consume lots
from the oldest end (FIFO) or the newest end (LIFO). What is left over is
the valued stock.
"""

from typing import Iterable, Mapping

from stockmetrics.core.constants import VALUATION_METHODS
from stockmetrics.core.stock_levels import replay_order
from stockmetrics.schemas.inventory import (
    InventoryValuation,
    ItemValuation,
    TransactionRecord,
    TransactionType,
    ValuationBatch,
)


def _normalize_method(method) -> str:
    value = str(method or "").strip().upper()
    if value not in VALUATION_METHODS:
        raise ValueError("Unsupported valuation method: {}".format(method))
    return value


def _lot_unit_price(tx: TransactionRecord) -> float:
    if tx.unit_price is not None:
        return tx.unit_price
    return tx.total_value / tx.quantity


def _consume(lots: list[ValuationBatch], quantity: float, method: str) -> None:
    remaining = quantity
    while remaining > 0 and lots:
        index = 0 if method == "FIFO" else len(lots) - 1
        lot = lots[index]
        if lot.quantity <= remaining:
            remaining -= lot.quantity
            lots.pop(index)
        else:
            lot.quantity -= remaining
            remaining = 0


def value_inventory(
    transactions: Iterable[TransactionRecord],
    item_names: Mapping,
    method="FIFO",
) -> InventoryValuation:
    method = _normalize_method(method)
    lots_by_item: dict = {}

    for tx in replay_order(tx for tx in transactions if tx.item_id is not None):
        lots = lots_by_item.setdefault(tx.item_id, [])
        if tx.type is TransactionType.STOCK_IN:
            if tx.quantity <= 0:
                continue
            lots.append(
                ValuationBatch(
                    quantity=tx.quantity,
                    unit_price=_lot_unit_price(tx),
                    date=tx.created_at,
                )
            )
        else:
            _consume(lots, tx.quantity, method)

    results = []
    total_value = 0.0
    for item_id, lots in lots_by_item.items():
        stock = sum(lot.quantity for lot in lots)
        if stock <= 0:
            continue
        value = sum(lot.quantity * lot.unit_price for lot in lots)
        results.append(
            ItemValuation(
                item_id=item_id,
                item_name=item_names.get(item_id) or "Unknown Item",
                current_stock=stock,
                total_value=value,
                method=method,
                batches=lots,
            )
        )
        total_value += value

    return InventoryValuation(items=results, total_value=total_value, method=method)


__all__ = ["value_inventory"]
