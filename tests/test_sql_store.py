import unittest
from datetime import timedelta, timezone

from sqlalchemy.orm import sessionmaker

from fakes import NOW

from stockmetrics.core.periods import DateRange
from stockmetrics.database.base import Base
from stockmetrics.database.engine import build_engine
from stockmetrics.models import Category, Item, Transaction
from stockmetrics.schemas.inventory import TransactionType
from stockmetrics.services.metrics_service import DashboardMetricsService
from stockmetrics.services.store import SqlTransactionStore


class SqlTransactionStoreTest(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.engine = build_engine("sqlite:///:memory:")
        Base.metadata.create_all(bind=self.engine)
        self.Session = sessionmaker(bind=self.engine, expire_on_commit=False)

        db = self.Session()
        db.add(Category(id=1, name="Dairy"))
        db.add_all(
            [
                Item(id=1, name="Milk", category_id=1, reorder_point=10, unit_price=1.5),
                Item(id=2, name="Butter", category_id=7, reorder_point=2, unit_price=3.0),
            ]
        )
        db.add_all(
            [
                Transaction(
                    id=1, item_id=1, type="stock_in", quantity=50, total_value=500,
                    created_at=NOW - timedelta(days=2),
                ),
                Transaction(
                    id=2, item_id=1, type="stock_out", quantity=45, total_value=675,
                    created_at=NOW - timedelta(days=1),
                ),
                Transaction(
                    id=3, item_id=2, type="stock_in", quantity=6, total_value=12,
                    created_at=NOW,
                ),
            ]
        )
        db.commit()
        db.close()

        self.store = SqlTransactionStore(self.Session)

    def tearDown(self):
        self.engine.dispose()

    async def test_list_transactions_returns_records(self):
        records = await self.store.list_transactions(item_id=1)
        self.assertEqual(sorted(record.id for record in records), [1, 2])
        first = min(records, key=lambda record: record.id)
        self.assertIs(first.type, TransactionType.STOCK_IN)
        self.assertEqual(first.created_at, NOW - timedelta(days=2))
        self.assertEqual(first.created_at.tzinfo, timezone.utc)

    async def test_date_range_is_half_open(self):
        date_range = DateRange(start=NOW - timedelta(days=1), end=NOW)
        records = await self.store.list_transactions(date_range=date_range)
        self.assertEqual([record.id for record in records], [2])

    async def test_lookups(self):
        milk = await self.store.get_item(1)
        self.assertEqual(milk.name, "Milk")
        self.assertEqual(milk.reorder_point, 10)
        self.assertIsNone(await self.store.get_item(5))
        self.assertEqual((await self.store.get_category(1)).name, "Dairy")
        self.assertIsNone(await self.store.get_category(7))
        self.assertEqual([entry.name for entry in await self.store.list_items()], ["Butter", "Milk"])

    async def test_service_over_sql_store(self):
        service = DashboardMetricsService(
            self.store,
            tz=timezone.utc,
            clock=lambda: NOW,
            enrichment_concurrency=1,
        )
        levels = {level.item_id: level for level in await service.get_stock_levels()}
        self.assertEqual(levels[1].current_quantity, 5)
        self.assertEqual(levels[1].total_value, 50)
        self.assertEqual(levels[1].item.category.name, "Dairy")
        # category 7 does not exist; the item is simply uncategorized
        self.assertIsNone(levels[2].item.category)

        snapshot = await service.get_dashboard_metrics("this-week")
        self.assertEqual(snapshot.total_stock_in, 50)
        self.assertEqual(snapshot.total_stock_out, 45)


if __name__ == "__main__":
    unittest.main()
