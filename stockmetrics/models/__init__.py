import importlib

from stockmetrics.models.category import Category
from stockmetrics.models.item import Item
from stockmetrics.models.transaction import Transaction


def import_all_models() -> None:
    for module_name in (
        "stockmetrics.models.category",
        "stockmetrics.models.item",
        "stockmetrics.models.transaction",
    ):
        importlib.import_module(module_name)


__all__ = [
    "Category",
    "Item",
    "Transaction",
    "import_all_models",
]
