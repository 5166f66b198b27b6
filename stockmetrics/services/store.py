"""
Read side of the transaction store.

The metrics engine only ever lists and looks up records; inserting them is
owned by the CRUD side of the application. ``TransactionStore`` is the
boundary the engine depends on and ``SqlTransactionStore`` is the SQLAlchemy
implementation used by the HTTP app.
"""

from typing import Optional, Protocol

from sqlalchemy import select
from starlette.concurrency import run_in_threadpool

from stockmetrics.core.dates import to_utc
from stockmetrics.core.periods import DateRange
from stockmetrics.database.session import SessionLocal
from stockmetrics.models.category import Category
from stockmetrics.models.item import Item
from stockmetrics.models.transaction import Transaction
from stockmetrics.schemas.inventory import CategoryRead, ItemRead, TransactionRecord


class TransactionStore(Protocol):
    async def list_transactions(
        self,
        item_id=None,
        date_range: Optional[DateRange] = None,
    ) -> list[TransactionRecord]:
        ...

    async def list_items(self) -> list[ItemRead]:
        ...

    async def get_item(self, item_id) -> Optional[ItemRead]:
        ...

    async def get_category(self, category_id) -> Optional[CategoryRead]:
        ...


class SqlTransactionStore:
    """Runs blocking SQLAlchemy queries in the threadpool, one session per call."""

    def __init__(self, session_factory=SessionLocal):
        self._session_factory = session_factory

    async def list_transactions(self, item_id=None, date_range: Optional[DateRange] = None):
        return await run_in_threadpool(self._list_transactions, item_id, date_range)

    async def list_items(self):
        return await run_in_threadpool(self._list_items)

    async def get_item(self, item_id):
        return await run_in_threadpool(self._get_item, item_id)

    async def get_category(self, category_id):
        return await run_in_threadpool(self._get_category, category_id)

    def _list_transactions(self, item_id, date_range):
        stmt = select(Transaction)
        if item_id is not None:
            stmt = stmt.where(Transaction.item_id == item_id)
        if date_range is not None:
            stmt = stmt.where(
                Transaction.created_at >= to_utc(date_range.start),
                Transaction.created_at < to_utc(date_range.end),
            )
        with self._session_factory() as db:
            rows = db.execute(stmt).scalars().all()
            return [TransactionRecord.model_validate(row) for row in rows]

    def _list_items(self):
        with self._session_factory() as db:
            rows = db.execute(select(Item).order_by(Item.name)).scalars().all()
            return [ItemRead.model_validate(row) for row in rows]

    def _get_item(self, item_id):
        with self._session_factory() as db:
            row = db.get(Item, item_id)
            return ItemRead.model_validate(row) if row is not None else None

    def _get_category(self, category_id):
        with self._session_factory() as db:
            row = db.get(Category, category_id)
            return CategoryRead.model_validate(row) if row is not None else None


__all__ = ["SqlTransactionStore", "TransactionStore"]
