from typing import Iterable, Mapping

from stockmetrics.schemas.inventory import ItemRead, LowStockItem


def is_low_stock(quantity, reorder_point) -> bool:
    # inclusive: an item sitting exactly on its reorder point is flagged
    return quantity <= reorder_point


def find_low_stock(
    items: Iterable[ItemRead],
    quantities: Mapping,
    default_reorder_point: int = 10,
) -> list[LowStockItem]:
    results = []
    for item in items:
        quantity = quantities.get(item.id, 0.0)
        threshold = item.reorder_point if item.reorder_point is not None else default_reorder_point
        if not is_low_stock(quantity, threshold):
            continue
        results.append(
            LowStockItem(
                **item.model_dump(),
                current_quantity=quantity,
                effective_reorder_point=threshold,
                out_of_stock=quantity == 0,
                oversold=quantity < 0,
            )
        )
    return results


def find_out_of_stock(low_stock_items: Iterable[LowStockItem]) -> list[LowStockItem]:
    return [item for item in low_stock_items if item.out_of_stock]


__all__ = ["find_low_stock", "find_out_of_stock", "is_low_stock"]
