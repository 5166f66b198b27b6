from datetime import datetime, timedelta, timezone

from stockmetrics.schemas.inventory import CategoryRead, ItemRead, TransactionRecord

NOW = datetime(2026, 10, 17, 15, 30, tzinfo=timezone.utc)


def make_tx(tx_id, item_id, kind, quantity, total_value=0.0, when=NOW, **extra):
    return TransactionRecord(
        id=tx_id,
        item_id=item_id,
        type=kind,
        quantity=quantity,
        total_value=total_value,
        created_at=when,
        **extra,
    )


def days_ago(days, hour=12):
    return (NOW - timedelta(days=days)).replace(hour=hour, minute=0)


class InMemoryStore:
    def __init__(
        self,
        transactions=(),
        items=(),
        categories=(),
        failing_categories=(),
        category_error=RuntimeError("category service timed out"),
    ):
        self.transactions = list(transactions)
        self.items = {item.id: item for item in items}
        self.categories = {category.id: category for category in categories}
        self.failing_categories = set(failing_categories)
        self.category_error = category_error
        self.fail_transactions = False
        self.category_calls = []
        self.transaction_calls = []

    async def list_transactions(self, item_id=None, date_range=None):
        self.transaction_calls.append((item_id, date_range))
        if self.fail_transactions:
            raise ConnectionError("store unreachable")
        results = []
        for tx in self.transactions:
            if item_id is not None and tx.item_id != item_id:
                continue
            if date_range is not None and not date_range.contains(tx.created_at):
                continue
            results.append(tx)
        return results

    async def list_items(self):
        return [item.model_copy(deep=True) for item in self.items.values()]

    async def get_item(self, item_id):
        item = self.items.get(item_id)
        return item.model_copy(deep=True) if item is not None else None

    async def get_category(self, category_id):
        self.category_calls.append(category_id)
        if category_id in self.failing_categories:
            raise self.category_error
        return self.categories.get(category_id)


def item(item_id, name, reorder_point=None, category_id=None, **extra):
    return ItemRead(
        id=item_id,
        name=name,
        reorder_point=reorder_point,
        category_id=category_id,
        **extra,
    )


def category(category_id, name):
    return CategoryRead(id=category_id, name=name)
