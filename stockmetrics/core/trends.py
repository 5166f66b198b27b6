from datetime import tzinfo
from typing import Iterable, Optional

from stockmetrics.core.periods import bucket_granularity, bucket_key
from stockmetrics.schemas.dashboard import MetricsSnapshot, TrendBucket
from stockmetrics.schemas.inventory import TransactionRecord, TransactionType


def summarize_metrics(transactions: Iterable[TransactionRecord]) -> MetricsSnapshot:
    snapshot = MetricsSnapshot()
    for tx in transactions:
        if tx.type is TransactionType.STOCK_IN:
            snapshot.total_stock_in += tx.quantity
            snapshot.revenue_spent_on_stock_in += tx.total_value
        else:
            snapshot.total_stock_out += tx.quantity
            snapshot.revenue_earned_from_stock_out += tx.total_value
    return snapshot


def aggregate_trends(
    transactions: Iterable[TransactionRecord],
    period,
    tz: Optional[tzinfo] = None,
) -> list[TrendBucket]:
    """Group an already period-filtered slice into chart buckets.

    Bucket size follows the requested period, not the width of the slice.
    Empty buckets are never synthesized. The result is ordered by each
    bucket's earliest transaction.
    """
    granularity = bucket_granularity(period)
    buckets: dict[str, TrendBucket] = {}

    for tx in transactions:
        moment = tx.created_at.astimezone(tz) if tz is not None else tx.created_at
        key = bucket_key(moment, granularity)

        bucket = buckets.get(key)
        if bucket is None:
            bucket = TrendBucket(period=key, starts_at=tx.created_at)
            buckets[key] = bucket
        elif tx.created_at < bucket.starts_at:
            bucket.starts_at = tx.created_at

        if tx.type is TransactionType.STOCK_IN:
            bucket.stock_in += tx.quantity
            bucket.revenue_in += tx.total_value
        else:
            bucket.stock_out += tx.quantity
            bucket.revenue_out += tx.total_value

    return sorted(buckets.values(), key=lambda bucket: bucket.starts_at)


__all__ = ["aggregate_trends", "summarize_metrics"]
