"""
Stock level reconstruction.

Current stock is never stored. It is rebuilt from the item's whole
transaction log every time it is read, so it cannot drift from the history.
"""

from typing import Iterable

from stockmetrics.schemas.inventory import StockLevel, TransactionRecord, TransactionType


def _id_sort_key(value):
    # ids are opaque; keep ints and strings comparable for tie-breaking
    if isinstance(value, int):
        return (0, value, "")
    return (1, 0, str(value))


def replay_order(transactions: Iterable[TransactionRecord]) -> list[TransactionRecord]:
    """Ascending by created_at, ties broken by id."""
    return sorted(transactions, key=lambda tx: (tx.created_at, _id_sort_key(tx.id)))


def reconstruct_stock_level(item_id, transactions: Iterable[TransactionRecord]) -> StockLevel:
    quantity = 0.0
    received_quantity = 0.0
    received_cost = 0.0
    average_unit_cost = 0.0
    last_transaction_date = None

    for tx in replay_order(transactions):
        if tx.type is TransactionType.STOCK_IN:
            quantity += tx.quantity
            # zero or negative inbound quantity has no defined unit cost
            if tx.quantity > 0:
                received_quantity += tx.quantity
                received_cost += tx.total_value
                average_unit_cost = received_cost / received_quantity
        else:
            quantity -= tx.quantity

        if last_transaction_date is None or tx.created_at > last_transaction_date:
            last_transaction_date = tx.created_at

    return StockLevel(
        item_id=item_id,
        current_quantity=quantity,
        average_unit_cost=average_unit_cost,
        total_value=quantity * average_unit_cost,
        last_transaction_date=last_transaction_date,
    )


__all__ = ["reconstruct_stock_level", "replay_order"]
