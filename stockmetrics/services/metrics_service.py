import asyncio
import logging
from datetime import datetime
from typing import Callable, Optional

from stockmetrics.config import get_settings
from stockmetrics.core.dates import resolve_timezone
from stockmetrics.core.low_stock import find_low_stock, find_out_of_stock
from stockmetrics.core.periods import parse_period, period_label, resolve_date_range
from stockmetrics.core.stock_levels import reconstruct_stock_level
from stockmetrics.core.trends import aggregate_trends, summarize_metrics
from stockmetrics.core.valuation import value_inventory
from stockmetrics.schemas.dashboard import DashboardOverview
from stockmetrics.services.store import TransactionStore

logger = logging.getLogger(__name__)


def _group_by_item(transactions):
    grouped = {}
    skipped = 0
    for tx in transactions:
        if tx.item_id is None:
            skipped += 1
            continue
        grouped.setdefault(tx.item_id, []).append(tx)
    if skipped:
        logger.warning(
            "Skipped %s transaction(s) without item_id", skipped, extra={"skipped": skipped}
        )
    return grouped


class DashboardMetricsService:
    """Derives dashboard and stock views from the transaction log.

    Nothing is cached between calls: every method fetches what it needs from
    the store and reduces it in memory.
    """

    def __init__(
        self,
        store: TransactionStore,
        *,
        tz=None,
        default_reorder_point: Optional[int] = None,
        enrichment_concurrency: Optional[int] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        settings = get_settings()
        self._store = store
        self._tz = tz if tz is not None else resolve_timezone(settings.REPORTING_TZ)
        self._default_reorder_point = (
            default_reorder_point
            if default_reorder_point is not None
            else settings.DEFAULT_REORDER_POINT
        )
        self._enrichment_concurrency = max(
            1, int(enrichment_concurrency or settings.ENRICHMENT_CONCURRENCY)
        )
        self._recent_limit = settings.RECENT_TRANSACTIONS_LIMIT
        self._clock = clock

    def _now(self) -> datetime:
        if self._clock is not None:
            return self._clock()
        return datetime.now(self._tz)

    # ------------------------------------------------------------------
    # Period-scoped views
    # ------------------------------------------------------------------

    async def _period_slice(self, period, now):
        date_range = resolve_date_range(period, now=now or self._now(), tz=self._tz)
        transactions = await self._store.list_transactions(date_range=date_range)
        return date_range, transactions

    async def get_dashboard_metrics(self, period, now: Optional[datetime] = None):
        _, transactions = await self._period_slice(period, now)
        return summarize_metrics(transactions)

    async def get_inventory_trends(self, period, now: Optional[datetime] = None):
        _, transactions = await self._period_slice(period, now)
        return aggregate_trends(transactions, period, tz=self._tz)

    async def get_dashboard_overview(self, period, now: Optional[datetime] = None):
        """Snapshot and trend series computed from one fetch of one interval."""
        token = parse_period(period)
        date_range, transactions = await self._period_slice(token, now)
        return DashboardOverview(
            period=token.value,
            label=period_label(token),
            start=date_range.start,
            end=date_range.end,
            metrics=summarize_metrics(transactions),
            trends=aggregate_trends(transactions, token, tz=self._tz),
        )

    async def get_recent_transactions(self, limit: Optional[int] = None):
        limit = limit if limit is not None else self._recent_limit
        transactions = await self._store.list_transactions()
        ordered = sorted(transactions, key=lambda tx: tx.created_at, reverse=True)
        return ordered[:limit]

    # ------------------------------------------------------------------
    # All-time views
    # ------------------------------------------------------------------

    async def get_stock_levels(self):
        items = await self._store.list_items()
        grouped = _group_by_item(await self._store.list_transactions())

        levels = []
        known_ids = set()
        for item in items:
            known_ids.add(item.id)
            if item.is_archived:
                continue
            level = reconstruct_stock_level(item.id, grouped.get(item.id, []))
            level.item = item
            levels.append(level)

        orphans = [item_id for item_id in grouped if item_id not in known_ids]
        if orphans:
            logger.warning(
                "Transactions reference missing item(s): %s", orphans, extra={"item_ids": orphans}
            )
        for item_id in orphans:
            levels.append(reconstruct_stock_level(item_id, grouped[item_id]))

        await self._attach_categories([level.item for level in levels if level.item is not None])
        levels.sort(key=lambda level: level.total_value, reverse=True)
        return levels

    async def get_item_stock_level(self, item_id):
        item = await self._store.get_item(item_id)
        if item is None:
            raise LookupError("Item {} not found".format(item_id))
        transactions = await self._store.list_transactions(item_id=item_id)
        level = reconstruct_stock_level(item.id, transactions)
        level.item = item
        await self._attach_categories([item])
        return level

    async def get_low_stock_items(self):
        items = [item for item in await self._store.list_items() if not item.is_archived]
        grouped = _group_by_item(await self._store.list_transactions())
        quantities = {
            item_id: reconstruct_stock_level(item_id, transactions).current_quantity
            for item_id, transactions in grouped.items()
        }
        low_stock = find_low_stock(items, quantities, self._default_reorder_point)
        oversold = [item.id for item in low_stock if item.oversold]
        if oversold:
            logger.warning(
                "Negative reconstructed stock for item(s): %s", oversold, extra={"item_ids": oversold}
            )
        await self._attach_categories(low_stock)
        return low_stock

    async def get_out_of_stock_items(self):
        return find_out_of_stock(await self.get_low_stock_items())

    async def get_inventory_valuation(self, method="FIFO"):
        items = await self._store.list_items()
        transactions = await self._store.list_transactions()
        item_names = {item.id: item.name for item in items}
        return value_inventory(transactions, item_names, method)

    # ------------------------------------------------------------------
    # Enrichment
    # ------------------------------------------------------------------

    async def _lookup_category(self, category_id, semaphore):
        async with semaphore:
            try:
                category = await self._store.get_category(category_id)
            except Exception:
                # a failed lookup leaves its records uncategorized
                logger.warning(
                    "Category lookup failed for %s",
                    category_id,
                    exc_info=True,
                    extra={"category_id": category_id},
                )
                return None
        if category is None:
            logger.info("Category %s not found; leaving records uncategorized", category_id)
        return category

    async def _attach_categories(self, records):
        category_ids = list(
            dict.fromkeys(
                record.category_id for record in records if record.category_id is not None
            )
        )
        if not category_ids:
            return

        semaphore = asyncio.Semaphore(self._enrichment_concurrency)
        found = await asyncio.gather(
            *(self._lookup_category(category_id, semaphore) for category_id in category_ids)
        )
        categories = dict(zip(category_ids, found))
        for record in records:
            if record.category_id is not None:
                record.category = categories.get(record.category_id)


__all__ = ["DashboardMetricsService"]
